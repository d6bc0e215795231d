from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from monet.domain.monetary.currency_code import CurrencyCode, CurrencyCodeLike, as_currency_code
from monet.domain.monetary.scaled_amount import ScaledAmount, ScaledAmountLike, as_scaled_amount
from monet.errors import MalformedCodeError, RateNotFoundError

logger = logging.getLogger(__name__)


class RateTable:
    """Read-only mapping from `CurrencyCode` to its worth.

    The worth of a currency is "how many base units are needed to make one of this". If USD
    is worth `1_000_000` and CHF is worth `2_000_000`, 2 USD are needed to make 1 CHF.
    Converting amount `a` of currency X into currency Y is `a * worth(X) / worth(Y)`.

    The table never changes after construction, so it can be shared by any number of
    evaluations (also across threads).
    """

    __slots__ = ("_worth_by_code",)

    def __init__(self, rates: Mapping[CurrencyCodeLike, ScaledAmountLike] | None = None) -> None:
        """Initialize with given rates.

        Args:
            rates: Mapping of currency code (CurrencyCode or str) to worth (ScaledAmount or
                raw scaled int). None creates an empty table.

        Raises:
            MalformedCodeError: If a string key is not a valid currency code.
            ValueError: If some worth is zero (conversion would divide by zero).
        """
        worth_by_code: dict[CurrencyCode, ScaledAmount] = {}
        for code, worth in (rates or {}).items():
            currency_code = as_currency_code(code)
            worth_amount = as_scaled_amount(worth)

            # Raise: zero worth makes every conversion into this currency divide by zero
            if worth_amount.raw == 0:
                raise ValueError(f"Cannot call `RateTable.__init__` because worth of '{currency_code}' is zero")

            worth_by_code[currency_code] = worth_amount

        self._worth_by_code = MappingProxyType(worth_by_code)
        logger.debug(f"Created RateTable with {len(worth_by_code)} rate(s)")

    @classmethod
    def with_rates(cls, rates: Mapping[CurrencyCodeLike, ScaledAmountLike]) -> RateTable:
        return cls(rates)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[CurrencyCodeLike, ScaledAmountLike]]) -> RateTable:
        """Build a table from (code, worth) pairs; when a code repeats, the last pair wins."""
        rates: dict[CurrencyCode, ScaledAmountLike] = {}
        for code, worth in pairs:
            rates[as_currency_code(code)] = worth
        return cls(rates)

    def worth(self, code: CurrencyCodeLike) -> ScaledAmount:
        """Get the worth of a currency.

        Raises:
            RateNotFoundError: If the table has no rate for $code.
        """
        currency_code = as_currency_code(code)
        try:
            return self._worth_by_code[currency_code]
        except KeyError:
            raise RateNotFoundError(currency_code) from None

    def codes(self) -> list[CurrencyCode]:
        return sorted(self._worth_by_code)

    def __contains__(self, code) -> bool:
        if isinstance(code, str):
            # Malformed codes are never present
            try:
                code = as_currency_code(code)
            except MalformedCodeError:
                return False
        return code in self._worth_by_code

    def __len__(self) -> int:
        return len(self._worth_by_code)

    def __iter__(self) -> Iterator[CurrencyCode]:
        return iter(self._worth_by_code)

    def __eq__(self, other) -> bool:
        if not isinstance(other, RateTable):
            return NotImplemented
        return dict(self._worth_by_code) == dict(other._worth_by_code)

    __hash__ = None

    def __repr__(self) -> str:
        rates = ", ".join(f"{code}: {worth.raw}" for code, worth in self._worth_by_code.items())
        return f"{self.__class__.__name__}({{{rates}}})"
