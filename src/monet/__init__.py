__version__ = "0.1.0"

from monet.domain.monetary import (
    AMOUNT_UNIT,
    Currency,
    CurrencyCode,
    CurrencyMoney,
    CurrencyRegistry,
    DynamicMoney,
    Exponent,
    Money,
    Operation,
    RateTable,
    ScaledAmount,
)
from monet.domain.monetary.currency_loader import currencies_from_array, load_currencies_csv, load_currencies_toml
from monet.errors import (
    AmountOverflowError,
    CurrencyDefinitionError,
    DifferentCurrencyError,
    FormattingError,
    InvalidCodeEncodingError,
    MalformedCodeError,
    MonetError,
    RateNotFoundError,
    UnknownCurrencyError,
)

__all__ = [
    "AMOUNT_UNIT",
    "Currency",
    "CurrencyCode",
    "CurrencyMoney",
    "CurrencyRegistry",
    "DynamicMoney",
    "Exponent",
    "Money",
    "Operation",
    "RateTable",
    "ScaledAmount",
    "currencies_from_array",
    "load_currencies_csv",
    "load_currencies_toml",
    "AmountOverflowError",
    "CurrencyDefinitionError",
    "DifferentCurrencyError",
    "FormattingError",
    "InvalidCodeEncodingError",
    "MalformedCodeError",
    "MonetError",
    "RateNotFoundError",
    "UnknownCurrencyError",
]
