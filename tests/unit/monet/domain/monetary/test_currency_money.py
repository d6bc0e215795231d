from __future__ import annotations

import pytest

from monet.domain.monetary.currency import Currency
from monet.domain.monetary.currency_money import CurrencyMoney, DynamicMoney, format_minor_units, try_convert_all
from monet.domain.monetary.currency_registry import CHF, JPY, USD
from monet.domain.monetary.money import Money
from monet.errors import DifferentCurrencyError

TST = Currency("TST", "Test currency", 1)


def test_display() -> None:
    assert str(CurrencyMoney(100, USD)) == "USD 1.00"
    assert str(CurrencyMoney(1850, CHF)) == "CHF 18.50"
    assert str(CurrencyMoney(5, USD)) == "USD 0.05"
    assert str(CurrencyMoney(-1500, CHF)) == "CHF -15.00"
    assert str(CurrencyMoney(1250, JPY)) == "JPY 1250"


def test_display_dynamic() -> None:
    assert str(DynamicMoney(100, "EUR", 2)) == "EUR 1.00"
    assert str(DynamicMoney(-5, "EUR", 2)) == "EUR -0.05"
    assert format_minor_units(7, "KWD", 3) == "KWD 0.007"


def test_sum() -> None:
    m1, m2 = CurrencyMoney(100, TST), CurrencyMoney(300, TST)

    assert m1 + m2 == CurrencyMoney(400, TST)
    assert m2 - m1 == CurrencyMoney(200, TST)
    assert -m1 == CurrencyMoney(-100, TST)


def test_sum_iter() -> None:
    result = sum([CurrencyMoney(100, TST), CurrencyMoney(300, TST), CurrencyMoney(500, TST)])

    assert result == CurrencyMoney(900, TST)


def test_different_currencies_cannot_be_mixed() -> None:
    with pytest.raises(DifferentCurrencyError) as exc_info:
        CurrencyMoney(100, USD) + CurrencyMoney(100, CHF)

    assert exc_info.value.expected_code == "USD"
    assert exc_info.value.money == DynamicMoney(100, "CHF", 2)

    with pytest.raises(DifferentCurrencyError):
        sum([CurrencyMoney(100, USD), CurrencyMoney(100, CHF)])


def test_try_from() -> None:
    dynamic = DynamicMoney(100, "USD", 2)

    money = CurrencyMoney.from_dynamic(dynamic, USD)

    assert money == CurrencyMoney(100, USD)
    assert str(dynamic) == str(money)
    assert money.to_dynamic() == dynamic


def test_try_from_different_currency() -> None:
    dynamic = DynamicMoney(100, "CHF", 2)

    with pytest.raises(DifferentCurrencyError) as exc_info:
        CurrencyMoney.from_dynamic(dynamic, USD)

    assert exc_info.value.money is dynamic
    assert exc_info.value.expected_code == "USD"


def test_try_convert_all() -> None:
    good = [DynamicMoney(100, "CHF", 2), DynamicMoney(1250, "CHF", 2), DynamicMoney(390, "CHF", 2)]
    bad = [DynamicMoney(100, "USD", 2), DynamicMoney(1250, "CHF", 2)]

    assert try_convert_all(good, CHF) == [CurrencyMoney(100, CHF), CurrencyMoney(1250, CHF), CurrencyMoney(390, CHF)]
    with pytest.raises(DifferentCurrencyError):
        try_convert_all(bad, CHF)


def test_to_money() -> None:
    assert CurrencyMoney(1850, CHF).to_money() == Money.with_cents(1850, "CHF")
    assert CurrencyMoney(1250, JPY).to_money() == Money(1_250_000_000, "JPY")
    assert CurrencyMoney(-5, TST).to_money() == Money(-500_000, "TST")


def test_validation() -> None:
    with pytest.raises(TypeError):
        CurrencyMoney(1.5, USD)
    with pytest.raises(TypeError):
        CurrencyMoney(100, "USD")
