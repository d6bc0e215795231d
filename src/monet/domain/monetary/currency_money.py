from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from monet.domain.monetary.currency import Currency
from monet.domain.monetary.money import Money
from monet.domain.monetary.scaled_amount import AMOUNT_UNIT
from monet.errors import DifferentCurrencyError
from monet.utils.math import pow10, trunc_div


def format_minor_units(amount: int, code: str, units: int) -> str:
    """Render an amount of minor units as `"<CODE> <units>.<decimals>"`.

    Decimals are zero-padded to $units; with $units 0 the plain amount is shown.

    Examples:
        >>> format_minor_units(100, "USD", 2)
        'USD 1.00'
        >>> format_minor_units(-5, "USD", 2)
        'USD -0.05'
        >>> format_minor_units(1250, "JPY", 0)
        'JPY 1250'
    """
    if units == 0:
        return f"{code} {amount}"

    sign = "-" if amount < 0 else ""
    whole, decimals = divmod(abs(amount), pow10(units))
    return f"{code} {sign}{whole}.{decimals:0{units}d}"


@dataclass(frozen=True)
class DynamicMoney:
    """Money whose currency is only known at runtime (e.g. loaded from a database).

    Attributes:
        amount (int): Amount in minor units of the currency.
        currency_code (str): Currency code as loaded.
        currency_units (int): Minor-unit exponent as loaded.
    """

    amount: int
    currency_code: str
    currency_units: int

    def __str__(self) -> str:
        return format_minor_units(self.amount, self.currency_code, self.currency_units)


class CurrencyMoney:
    """Amount in minor units bound to one `Currency`.

    Use where a call site deals with exactly one currency: `CurrencyMoney(1850, CHF)` is
    18.50 CHF. Adding or subtracting two CurrencyMoney(s) of different currencies raises
    `DifferentCurrencyError`. `sum()` works on an iterable of one currency.

    Attributes:
        amount (int): Amount in minor units.
        currency (Currency): The bound currency.
    """

    __slots__ = ("_amount", "_currency")

    def __init__(self, amount: int, currency: Currency) -> None:
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise TypeError(f"$amount must be an int, but provided value is: {amount!r}")

        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency!r}")

        self._amount = amount
        self._currency = currency

    @property
    def amount(self) -> int:
        return self._amount

    @property
    def currency(self) -> Currency:
        return self._currency

    # region Conversion

    @classmethod
    def from_dynamic(cls, money: DynamicMoney, currency: Currency) -> CurrencyMoney:
        """Check that $money is in $currency and bind it.

        Raises:
            DifferentCurrencyError: If the code of $money differs from $currency.
        """
        if money.currency_code != currency.code:
            raise DifferentCurrencyError(money, currency.code)
        return cls(money.amount, currency)

    def to_dynamic(self) -> DynamicMoney:
        return DynamicMoney(self._amount, self._currency.code, self._currency.units)

    def to_money(self) -> Money:
        """Convert into scaled `Money`; digits beyond the 6 scaled decimals are truncated."""
        scaled = trunc_div(self._amount * AMOUNT_UNIT, pow10(self._currency.units))
        return Money(scaled, self._currency.currency_code)

    # endregion

    # region Arithmetic

    def _check_same_currency(self, other: CurrencyMoney) -> None:
        if self._currency != other._currency:
            raise DifferentCurrencyError(other.to_dynamic(), self._currency.code)

    def __add__(self, other):
        if not isinstance(other, CurrencyMoney):
            return NotImplemented
        self._check_same_currency(other)
        return CurrencyMoney(self._amount + other._amount, self._currency)

    def __radd__(self, other):
        # `sum()` starts from 0
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other):
        if not isinstance(other, CurrencyMoney):
            return NotImplemented
        self._check_same_currency(other)
        return CurrencyMoney(self._amount - other._amount, self._currency)

    def __neg__(self) -> CurrencyMoney:
        return CurrencyMoney(-self._amount, self._currency)

    # endregion

    def __eq__(self, other) -> bool:
        if not isinstance(other, CurrencyMoney):
            return NotImplemented
        return self._amount == other._amount and self._currency == other._currency

    def __hash__(self) -> int:
        return hash((self._amount, self._currency))

    def __str__(self) -> str:
        return format_minor_units(self._amount, self._currency.code, self._currency.units)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._amount}, {self._currency.code})"


def try_convert_all(moneys: Iterable[DynamicMoney], currency: Currency) -> list[CurrencyMoney]:
    """Bind every item of $moneys to $currency.

    Raises:
        DifferentCurrencyError: For the first item whose code differs from $currency.
    """
    return [CurrencyMoney.from_dynamic(money, currency) for money in moneys]
