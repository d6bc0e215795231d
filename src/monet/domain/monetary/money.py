from __future__ import annotations

import logging
import re

from monet.domain.monetary.currency_code import CurrencyCode, CurrencyCodeLike, as_currency_code
from monet.domain.monetary.currency_registry import DEFAULT_REGISTRY, CurrencyRegistry
from monet.domain.monetary.operation import Operation
from monet.domain.monetary.rates import RateTable
from monet.domain.monetary.scaled_amount import AMOUNT_SCALE, AMOUNT_UNIT, ScaledAmount, ScaledAmountLike, as_scaled_amount
from monet.errors import FormattingError, InvalidCodeEncodingError
from monet.utils.math import pow10

logger = logging.getLogger(__name__)

# Highest precision that `ScaledAmount` can represent
MAX_DISPLAY_PRECISION = AMOUNT_SCALE

# Format spec accepted by `Money.__format__`: optional fill/align/width, then optional ".precision"
_FORMAT_SPEC_PATTERN = re.compile(r"^(?P<layout>[^.]*)(?:\.(?P<precision>\d+))?$")


class Money(Operation):
    """An `amount` of money in a certain `currency_code`.

    $amount is a `ScaledAmount`, so it holds fractions of a unit: `ScaledAmount(1_000_000)`
    is one unit. Money is an immutable value; equality is structural.

    Money is also the leaf of the operation algebra: `+`, `-` with another Money (or any
    `Operation`) and `*`, `/` with an `Exponent` build a deferred operation, see
    `monet.domain.monetary.operation`.

    Display: `str(money)` renders `"12.10 CHF"` using the currency's minor-unit exponent as
    precision; `f"{money:.6}"` renders `"12.100000 CHF"`, `f"{money:.0}"` renders `"12 CHF"`.
    """

    __slots__ = ("_amount", "_currency_code")

    def __init__(self, amount: ScaledAmountLike, currency_code: CurrencyCodeLike) -> None:
        """Initialize Money.

        Args:
            amount: Scaled amount; a plain int is taken as the raw scaled value.
            currency_code: Currency code as CurrencyCode or 3-character string.

        Raises:
            MalformedCodeError: If $currency_code is a string that is not exactly 3 bytes long.
        """
        self._amount = as_scaled_amount(amount)
        self._currency_code = as_currency_code(currency_code)

    # region Construction

    @classmethod
    def with_str_code(cls, amount: ScaledAmountLike, currency_code: str) -> Money:
        """Create Money from an amount and a string code.

        Raises:
            MalformedCodeError: If $currency_code is not exactly 3 characters long.
        """
        return cls(amount, CurrencyCode(currency_code))

    @classmethod
    def with_cents(cls, cents: int, currency_code: str) -> Money:
        """Like `with_str_code`, but takes cents instead of a scaled amount."""
        return cls.with_str_code(ScaledAmount.with_cents(cents), currency_code)

    def with_amount(self, amount: ScaledAmountLike) -> Money:
        """Return new Money with $amount and the same currency code."""
        return self.__class__(amount, self._currency_code)

    # endregion

    @property
    def amount(self) -> ScaledAmount:
        return self._amount

    @property
    def currency_code(self) -> CurrencyCode:
        return self._currency_code

    # region Conversion

    def into_code(self, code: CurrencyCodeLike, rates: RateTable) -> Money:
        """Convert into currency $code using $rates.

        The new amount is `amount * worth(own code) / worth(code)`, truncated toward zero.
        Converting into the own code returns an equal Money (both rates are still required).

        Raises:
            RateNotFoundError: If $rates has no rate for the own code or for $code.
        """
        target_code = as_currency_code(code)
        worth_self = rates.worth(self._currency_code)
        worth_target = rates.worth(target_code)

        result = Money(self._amount * worth_self / worth_target, target_code)
        logger.debug(f"Converted {self!r} into {result!r}")
        return result

    def execute(self, rates: RateTable) -> Money:
        """Money evaluates to itself."""
        return self

    # endregion

    # region Display

    def format(self, precision: int | None = None, registry: CurrencyRegistry | None = None) -> str:
        """Render as `"<units>.<decimals> <CODE>"`.

        Decimals are zero-padded to $precision; with precision 0 the decimal point is omitted.
        Digits below $precision are truncated, not rounded. A negative amount renders with
        one leading minus sign (e.g. `"-0.50 USD"`).

        Args:
            precision: Number of decimals, 0-6. When None, the minor-unit exponent of the
                currency found in $registry is used.
            registry: Currency metadata for the default precision. Defaults to the ISO 4217
                `DEFAULT_REGISTRY`.

        Raises:
            FormattingError: If $precision is outside 0-6, or it is None and the currency is
                unknown to $registry (or its exponent is above 6), or the currency code
                bytes are not valid UTF-8.
        """
        try:
            code = self._currency_code.as_str()
        except InvalidCodeEncodingError as e:
            raise FormattingError(f"Cannot call `Money.format` because the currency code is not printable: {e}") from e

        if precision is None:
            registry = DEFAULT_REGISTRY if registry is None else registry
            currency = registry.find(self._currency_code)
            # Raise: no explicit precision and no metadata to derive one
            if currency is None:
                raise FormattingError(f"Cannot call `Money.format` because currency '{code}' is unknown and no $precision was given")
            precision = currency.units

        # Raise: precision beyond the fixed-point scale is not representable
        if isinstance(precision, bool) or not isinstance(precision, int) or not 0 <= precision <= MAX_DISPLAY_PRECISION:
            raise FormattingError(f"Cannot call `Money.format` because $precision ({precision}) is not an integer between 0 and {MAX_DISPLAY_PRECISION}")

        units, decimals = divmod(abs(self._amount.raw), AMOUNT_UNIT)
        decimals //= pow10(AMOUNT_SCALE - precision)
        sign = "-" if self._amount.raw < 0 and (units or decimals) else ""

        if precision == 0:
            return f"{sign}{units} {code}"
        return f"{sign}{units}.{decimals:0{precision}d} {code}"

    def __format__(self, format_spec: str) -> str:
        match = _FORMAT_SPEC_PATTERN.match(format_spec)
        if match is None:
            raise FormattingError(f"Invalid format specifier '{format_spec}' for Money")

        precision = match.group("precision")
        text = self.format(None if precision is None else int(precision))
        return format(text, match.group("layout"))

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._amount.raw}, {self._currency_code})"

    # endregion

    def __eq__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._amount == other._amount and self._currency_code == other._currency_code

    def __hash__(self) -> int:
        return hash((self._amount, self._currency_code))
