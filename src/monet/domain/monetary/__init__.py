"""Monetary domain package.

This package contains the fixed-point `ScaledAmount`, currency codes and metadata, exchange
rates, `Money` with its display rules, and the deferred operation algebra that evaluates
mixed-currency arithmetic against a `RateTable`.
"""

from monet.domain.monetary.scaled_amount import AMOUNT_UNIT, ScaledAmount
from monet.domain.monetary.currency_code import CurrencyCode
from monet.domain.monetary.exponent import Exponent
from monet.domain.monetary.rates import RateTable
from monet.domain.monetary.operation import Operation, Add, Sub, Mul, Div, evaluate
from monet.domain.monetary.money import Money
from monet.domain.monetary.currency import Currency
from monet.domain.monetary.currency_registry import CurrencyRegistry, DEFAULT_REGISTRY
from monet.domain.monetary.currency_money import CurrencyMoney, DynamicMoney, try_convert_all

__all__ = [
    "AMOUNT_UNIT",
    "ScaledAmount",
    "CurrencyCode",
    "Exponent",
    "RateTable",
    "Operation",
    "Add",
    "Sub",
    "Mul",
    "Div",
    "evaluate",
    "Money",
    "Currency",
    "CurrencyRegistry",
    "DEFAULT_REGISTRY",
    "CurrencyMoney",
    "DynamicMoney",
    "try_convert_all",
]
