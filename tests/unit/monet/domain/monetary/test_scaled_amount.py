from __future__ import annotations

import pytest

from monet.domain.monetary.scaled_amount import AMOUNT_UNIT, MAX_AMOUNT, MIN_AMOUNT, ScaledAmount, as_scaled_amount
from monet.errors import AmountOverflowError


def test_construct_from_sub_units() -> None:
    assert ScaledAmount.with_unit(2).raw == 2 * AMOUNT_UNIT
    assert ScaledAmount.with_tenths(15).raw == 1_500_000
    assert ScaledAmount.with_cents(2125).raw == 21_250_000
    assert ScaledAmount.with_thousands(1).raw == 1_000
    assert ScaledAmount.with_cents(-1).raw == -10_000


@pytest.mark.parametrize("value", [0, 1, -1, 7, 2125, -999, 10**20])
def test_round_trip_at_matching_precision(value: int) -> None:
    assert ScaledAmount.with_unit(value).into_unit() == value
    assert ScaledAmount.with_tenths(value).into_tenths() == value
    assert ScaledAmount.with_cents(value).into_cents() == value
    assert ScaledAmount.with_thousands(value).into_thousands() == value


def test_conversion_truncates_toward_zero() -> None:
    assert ScaledAmount(19_999).into_cents() == 1
    assert ScaledAmount(-19_999).into_cents() == -1
    assert ScaledAmount(1_999_999).into_unit() == 1
    assert ScaledAmount(-1_999_999).into_unit() == -1
    assert ScaledAmount(150_000).into_tenths() == 1


def test_arithmetic_on_scaled_values() -> None:
    assert ScaledAmount(3) + ScaledAmount(4) == ScaledAmount(7)
    assert ScaledAmount(3) - ScaledAmount(4) == ScaledAmount(-1)
    assert ScaledAmount(7) / ScaledAmount(2) == ScaledAmount(3)
    assert ScaledAmount(-7) / ScaledAmount(2) == ScaledAmount(-3)
    assert -ScaledAmount(5) == ScaledAmount(-5)
    assert abs(ScaledAmount(-5)) == ScaledAmount(5)
    # Plain ints are taken as raw scaled values
    assert ScaledAmount(10) * 3 == ScaledAmount(30)


def test_multiplication_does_not_rescale() -> None:
    product = ScaledAmount.with_unit(2) * ScaledAmount.with_unit(3)

    assert product == ScaledAmount(6 * AMOUNT_UNIT * AMOUNT_UNIT)
    assert product / ScaledAmount(AMOUNT_UNIT) == ScaledAmount.with_unit(6)


def test_division_by_zero_raises() -> None:
    with pytest.raises(ZeroDivisionError):
        ScaledAmount(1) / ScaledAmount(0)


def test_128_bit_range_is_checked() -> None:
    assert ScaledAmount(MAX_AMOUNT).raw == 2**127 - 1
    assert ScaledAmount(MIN_AMOUNT).raw == -(2**127)

    with pytest.raises(AmountOverflowError):
        ScaledAmount(2**127)
    with pytest.raises(AmountOverflowError):
        ScaledAmount(MAX_AMOUNT) + ScaledAmount(1)
    with pytest.raises(AmountOverflowError):
        ScaledAmount(MIN_AMOUNT) - ScaledAmount(1)
    with pytest.raises(OverflowError):
        ScaledAmount(MAX_AMOUNT) * ScaledAmount(2)


@pytest.mark.parametrize("value", [1.5, "100", True, None])
def test_only_int_is_accepted(value) -> None:
    with pytest.raises(TypeError):
        ScaledAmount(value)


def test_same_whole_units_ignores_fraction() -> None:
    # Exact equality sees the fraction, whole-unit comparison does not
    assert ScaledAmount(1_200_000) != ScaledAmount(1_900_000)
    assert ScaledAmount(1_200_000).same_whole_units(ScaledAmount(1_900_000))
    assert not ScaledAmount(1_900_000).same_whole_units(ScaledAmount(2_000_000))
    assert ScaledAmount(-500_000).same_whole_units(500_000)


def test_ordering_and_hash() -> None:
    assert ScaledAmount(1) < ScaledAmount(2) <= ScaledAmount(2)
    assert ScaledAmount(3) > ScaledAmount(2) >= ScaledAmount(2)
    assert len({ScaledAmount(1), ScaledAmount(1), ScaledAmount(2)}) == 2
    assert sorted([ScaledAmount(3), ScaledAmount(-1)]) == [ScaledAmount(-1), ScaledAmount(3)]


def test_as_scaled_amount() -> None:
    amount = ScaledAmount(42)

    assert as_scaled_amount(amount) is amount
    assert as_scaled_amount(42) == amount
    assert int(amount) == 42
    assert repr(amount) == "ScaledAmount(42)"


def test_comparison_with_raw_int() -> None:
    # A plain int is a raw scaled value, in comparisons as in arithmetic
    assert ScaledAmount(5) == 5
    assert 5 == ScaledAmount(5)
    assert ScaledAmount(5) + 5 == 10
    assert ScaledAmount(5) != 6
    assert ScaledAmount(5) < 6
    assert ScaledAmount(5) >= 5
    assert 4 < ScaledAmount(5)
    assert hash(ScaledAmount(5)) == hash(5)
    assert ScaledAmount(1) != True  # noqa: E712
    assert ScaledAmount(5) != "5"
