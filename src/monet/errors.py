"""Exceptions raised by the monetary domain."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from monet.domain.monetary.currency_code import CurrencyCode
    from monet.domain.monetary.currency_money import DynamicMoney


class MonetError(Exception):
    """Base class for all errors raised by `monet`."""


class MalformedCodeError(MonetError, ValueError):
    """Raised when a currency code is not exactly 3 bytes long."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Malformed currency code '{value}': a currency code must be exactly 3 characters long")


class InvalidCodeEncodingError(MonetError, ValueError):
    """Raised when stored currency code bytes cannot be decoded as UTF-8."""

    def __init__(self, raw: bytes):
        self.raw = raw
        super().__init__(f"Currency code bytes {raw!r} are not valid UTF-8")


class RateNotFoundError(MonetError, LookupError):
    """Raised when a conversion needs a rate that is absent from the `RateTable`."""

    def __init__(self, code: CurrencyCode):
        self.code = code
        super().__init__(f"Rate for currency '{code}' not found")


class DifferentCurrencyError(MonetError, ValueError):
    """Raised when a runtime currency code does not match the expected currency."""

    def __init__(self, money: DynamicMoney, expected_code: str):
        self.money = money
        self.expected_code = expected_code
        super().__init__(f"Cannot convert {money!r} into money with currency '{expected_code}', since the currencies differ")


class FormattingError(MonetError, ValueError):
    """Raised when `Money` cannot be rendered (precision out of range, unknown currency)."""


class AmountOverflowError(MonetError, OverflowError):
    """Raised when a scaled amount leaves the signed 128-bit range."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Scaled amount {value} does not fit into a signed 128-bit integer")


class UnknownCurrencyError(MonetError, LookupError):
    """Raised when a currency registry has no currency for the requested code."""

    def __init__(self, code: str, available: list[str]):
        self.code = code
        self.available = available
        super().__init__(f"Currency with code '{code}' not found in registry. Available currencies: {available}")


class CurrencyDefinitionError(MonetError, ValueError):
    """Raised when currency definitions (array, CSV, TOML) are malformed or conflicting."""
