from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from monet.domain.monetary.currency import Currency
from monet.domain.monetary.currency_code import CurrencyCode, CurrencyCodeLike, as_currency_code
from monet.errors import CurrencyDefinitionError, MalformedCodeError, UnknownCurrencyError

logger = logging.getLogger(__name__)


class CurrencyRegistry:
    """Lookup of `Currency` metadata by code.

    Codes are unique: constructing a registry from currencies with a repeated code fails, and
    `register` refuses to replace an existing currency unless asked to.
    """

    __slots__ = ("_currency_by_code",)

    def __init__(self, currencies: Iterable[Currency] = ()) -> None:
        """Initialize the registry.

        Args:
            currencies: Initial currencies. Codes must be unique.

        Raises:
            CurrencyDefinitionError: If two currencies share the same code.
        """
        self._currency_by_code: dict[CurrencyCode, Currency] = {}
        for currency in currencies:
            # Raise: codes must be unique within one registry
            if currency.currency_code in self._currency_by_code:
                raise CurrencyDefinitionError(f"Currency with code '{currency.code}' is defined more than once")
            self.register(currency)

    def register(self, currency: Currency, overwrite: bool = False) -> None:
        """Register a currency.

        Args:
            currency: The currency to register.
            overwrite: Whether to overwrite an existing currency with the same code.

        Raises:
            TypeError: If $currency is not a Currency instance.
            CurrencyDefinitionError: If currency already exists and $overwrite is False.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        if currency.currency_code in self._currency_by_code and not overwrite:
            raise CurrencyDefinitionError(f"Currency with code '{currency.code}' already exists in registry. Use overwrite=True to replace it.")

        self._currency_by_code[currency.currency_code] = currency
        logger.debug(f"Registered currency {currency!r}")

    def get(self, code: CurrencyCodeLike) -> Currency:
        """Get currency from registry by code.

        Raises:
            UnknownCurrencyError: If no currency with $code is registered.
        """
        currency = self.find(code)
        if currency is None:
            raise UnknownCurrencyError(str(code), self.codes())
        return currency

    def find(self, code: CurrencyCodeLike) -> Currency | None:
        """Like `get`, but returns None for unknown (or malformed) codes."""
        try:
            currency_code = as_currency_code(code)
        except MalformedCodeError:
            return None
        return self._currency_by_code.get(currency_code)

    def codes(self) -> list[str]:
        return sorted(currency.code for currency in self._currency_by_code.values())

    def __contains__(self, code) -> bool:
        if isinstance(code, Currency):
            code = code.currency_code
        return self.find(code) is not None

    def __len__(self) -> int:
        return len(self._currency_by_code)

    def __iter__(self) -> Iterator[Currency]:
        return iter(self._currency_by_code.values())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.codes()})"


# ISO 4217 currencies as (name, code, minor-unit exponent)
ISO_4217: list[tuple[str, str, int]] = [
    ("UAE Dirham", "AED", 2),
    ("Argentine Peso", "ARS", 2),
    ("Australian Dollar", "AUD", 2),
    ("Bulgarian Lev", "BGN", 2),
    ("Bahraini Dinar", "BHD", 3),
    ("Burundi Franc", "BIF", 0),
    ("Brazilian Real", "BRL", 2),
    ("Canadian Dollar", "CAD", 2),
    ("Swiss Franc", "CHF", 2),
    ("Unidad de Fomento", "CLF", 4),
    ("Chilean Peso", "CLP", 0),
    ("Yuan Renminbi", "CNY", 2),
    ("Colombian Peso", "COP", 2),
    ("Czech Koruna", "CZK", 2),
    ("Djibouti Franc", "DJF", 0),
    ("Danish Krone", "DKK", 2),
    ("Egyptian Pound", "EGP", 2),
    ("Euro", "EUR", 2),
    ("Pound Sterling", "GBP", 2),
    ("Guinean Franc", "GNF", 0),
    ("Hong Kong Dollar", "HKD", 2),
    ("Hungarian Forint", "HUF", 2),
    ("Indonesian Rupiah", "IDR", 2),
    ("New Israeli Sheqel", "ILS", 2),
    ("Indian Rupee", "INR", 2),
    ("Iraqi Dinar", "IQD", 3),
    ("Iceland Krona", "ISK", 0),
    ("Jordanian Dinar", "JOD", 3),
    ("Yen", "JPY", 0),
    ("Comorian Franc", "KMF", 0),
    ("Won", "KRW", 0),
    ("Kuwaiti Dinar", "KWD", 3),
    ("Libyan Dinar", "LYD", 3),
    ("Moroccan Dirham", "MAD", 2),
    ("Mexican Peso", "MXN", 2),
    ("Malaysian Ringgit", "MYR", 2),
    ("Naira", "NGN", 2),
    ("Norwegian Krone", "NOK", 2),
    ("New Zealand Dollar", "NZD", 2),
    ("Rial Omani", "OMR", 3),
    ("Philippine Peso", "PHP", 2),
    ("Pakistan Rupee", "PKR", 2),
    ("Zloty", "PLN", 2),
    ("Guarani", "PYG", 0),
    ("Romanian Leu", "RON", 2),
    ("Russian Ruble", "RUB", 2),
    ("Rwanda Franc", "RWF", 0),
    ("Saudi Riyal", "SAR", 2),
    ("Swedish Krona", "SEK", 2),
    ("Singapore Dollar", "SGD", 2),
    ("Baht", "THB", 2),
    ("Tunisian Dinar", "TND", 3),
    ("Turkish Lira", "TRY", 2),
    ("New Taiwan Dollar", "TWD", 2),
    ("Hryvnia", "UAH", 2),
    ("Uganda Shilling", "UGX", 0),
    ("US Dollar", "USD", 2),
    ("Unidad Previsional", "UYW", 4),
    ("Dong", "VND", 0),
    ("Vatu", "VUV", 0),
    ("CFA Franc BEAC", "XAF", 0),
    ("CFA Franc BCEAO", "XOF", 0),
    ("CFP Franc", "XPF", 0),
    ("Rand", "ZAR", 2),
]

# Registry used for display precision when no other registry is given
DEFAULT_REGISTRY = CurrencyRegistry(Currency(code, name, units) for name, code, units in ISO_4217)

# Frequently used currencies
USD = DEFAULT_REGISTRY.get("USD")
EUR = DEFAULT_REGISTRY.get("EUR")
CHF = DEFAULT_REGISTRY.get("CHF")
GBP = DEFAULT_REGISTRY.get("GBP")
JPY = DEFAULT_REGISTRY.get("JPY")
