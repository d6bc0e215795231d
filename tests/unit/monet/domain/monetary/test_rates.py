from __future__ import annotations

import pytest

from monet.domain.monetary.currency_code import CurrencyCode
from monet.domain.monetary.rates import RateTable
from monet.domain.monetary.scaled_amount import ScaledAmount
from monet.errors import RateNotFoundError
from tests.helpers.helper_rates import create_rates


def test_worth_by_code() -> None:
    rates = create_rates()

    assert rates.worth("USD") == ScaledAmount(1_000_000)
    assert rates.worth(CurrencyCode("CHF")) == ScaledAmount(1_100_000)


def test_missing_rate_raises() -> None:
    rates = create_rates()

    with pytest.raises(RateNotFoundError) as exc_info:
        rates.worth("JPY")

    assert exc_info.value.code == CurrencyCode("JPY")
    assert isinstance(exc_info.value, LookupError)
    assert "JPY" in str(exc_info.value)


def test_empty_table() -> None:
    rates = RateTable()

    assert len(rates) == 0
    with pytest.raises(RateNotFoundError):
        rates.worth("USD")


def test_zero_worth_is_rejected() -> None:
    with pytest.raises(ValueError):
        RateTable({"USD": 0})


def test_from_pairs_last_write_wins() -> None:
    rates = RateTable.from_pairs([("USD", 1_000_000), ("CHF", 1_100_000), ("CHF", 900_000)])

    assert len(rates) == 2
    assert rates.worth("CHF") == ScaledAmount(900_000)


def test_table_is_not_affected_by_source_mapping() -> None:
    source = {"USD": 1_000_000}
    rates = RateTable(source)
    source["CHF"] = 1_100_000

    assert "CHF" not in rates
    assert rates.codes() == [CurrencyCode("USD")]


def test_membership_and_iteration() -> None:
    rates = create_rates()

    assert "USD" in rates
    assert CurrencyCode("GBP") in rates
    assert "JPY" not in rates
    # Malformed codes are simply not present
    assert "US" not in rates
    assert set(rates) == {CurrencyCode(code) for code in ("USD", "CHF", "EUR", "GBP")}
    assert [code.as_str() for code in rates.codes()] == ["CHF", "EUR", "GBP", "USD"]


def test_equality() -> None:
    assert create_rates() == create_rates()
    assert create_rates() != RateTable({"USD": 1_000_000})
