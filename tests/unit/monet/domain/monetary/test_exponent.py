from __future__ import annotations

import pytest

from monet.domain.monetary.exponent import Exponent
from monet.domain.monetary.scaled_amount import ScaledAmount


def test_int_amount_is_converted() -> None:
    exponent = Exponent(1000, 2)

    assert exponent.amount == ScaledAmount(1000)
    assert exponent.exponent == 2
    assert exponent.divisor == ScaledAmount(100)


def test_default_exponent_is_zero() -> None:
    assert Exponent(5).divisor == ScaledAmount(1)


def test_equivalence_compares_truncated_values() -> None:
    assert Exponent(1000, 2).is_equivalent(Exponent(10, 0))
    # Equivalent because of precision loss: 1005 / 100 truncates to 10
    assert Exponent(1005, 2).is_equivalent(Exponent(10, 0))
    assert not Exponent(1100, 2).is_equivalent(Exponent(10, 0))


def test_equality_is_structural() -> None:
    assert Exponent(1000, 2) == Exponent(ScaledAmount(1000), 2)
    assert Exponent(1000, 2) != Exponent(10, 0)


@pytest.mark.parametrize("value", [-1, 256])
def test_exponent_range(value: int) -> None:
    with pytest.raises(ValueError):
        Exponent(1, value)


def test_exponent_must_be_int() -> None:
    with pytest.raises(TypeError):
        Exponent(1, "2")

    with pytest.raises(TypeError):
        Exponent(1000, 2).is_equivalent(10)
