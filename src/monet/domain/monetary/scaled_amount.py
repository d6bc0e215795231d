from __future__ import annotations

from typing import TypeAlias

from monet.errors import AmountOverflowError
from monet.utils.math import trunc_div

# How much raw amount makes one currency unit
AMOUNT_UNIT = 1_000_000
# Number of decimal digits held below one unit
AMOUNT_SCALE = 6

# Scaled amounts are signed 128-bit integers
MIN_AMOUNT = -(2**127)
MAX_AMOUNT = 2**127 - 1


class ScaledAmount:
    """Signed fixed-point amount expressed in 1/10^6 of a currency unit.

    The stored integer always equals `real_value * AMOUNT_UNIT`. Arithmetic between two
    ScaledAmount(s) is plain integer arithmetic on the scaled representation: `*` and `/`
    do not rescale, callers decide when an extra division by `AMOUNT_UNIT` is needed.
    Division truncates toward zero. Arithmetic and comparisons also accept a plain int, taken
    as the raw scaled value: `ScaledAmount(5) == 5`.

    The value must fit into a signed 128-bit integer; every construction is checked and
    raises `AmountOverflowError` when it does not. Since all operations return new objects,
    this covers every intermediate result too.

    Attributes:
        raw (int): The scaled integer.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: int = 0) -> None:
        """Initialize from a raw scaled integer.

        Args:
            raw: Scaled integer, i.e. `real_value * AMOUNT_UNIT`.

        Raises:
            TypeError: If $raw is not an int.
            AmountOverflowError: If $raw does not fit into a signed 128-bit integer.
        """
        # Raise: bool is an int subclass, but never a meaningful amount
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise TypeError(f"$raw must be an int, but provided value is: {raw!r} (type '{type(raw).__name__}')")

        # Raise: keep the 128-bit invariant
        if raw < MIN_AMOUNT or raw > MAX_AMOUNT:
            raise AmountOverflowError(raw)

        self._raw = raw

    # region Construction

    @classmethod
    def with_unit(cls, unit: int) -> ScaledAmount:
        return cls(unit * AMOUNT_UNIT)

    @classmethod
    def with_tenths(cls, tenths: int) -> ScaledAmount:
        return cls(trunc_div(tenths * AMOUNT_UNIT, 10))

    @classmethod
    def with_cents(cls, cents: int) -> ScaledAmount:
        return cls(trunc_div(cents * AMOUNT_UNIT, 100))

    @classmethod
    def with_thousands(cls, thousands: int) -> ScaledAmount:
        """Build from a count of thousandths of a unit."""
        return cls(trunc_div(thousands * AMOUNT_UNIT, 1000))

    # endregion

    # region Conversion

    @property
    def raw(self) -> int:
        return self._raw

    def into_unit(self) -> int:
        return trunc_div(self._raw, AMOUNT_UNIT)

    def into_tenths(self) -> int:
        return trunc_div(self._raw * 10, AMOUNT_UNIT)

    def into_cents(self) -> int:
        return trunc_div(self._raw * 100, AMOUNT_UNIT)

    def into_thousands(self) -> int:
        """Count of thousandths of a unit, truncated toward zero."""
        return trunc_div(self._raw * 1000, AMOUNT_UNIT)

    def __int__(self) -> int:
        return self._raw

    # endregion

    # region Arithmetic

    def __add__(self, other: ScaledAmountLike) -> ScaledAmount:
        other_raw = _raw_or_none(other)
        if other_raw is None:
            return NotImplemented
        return ScaledAmount(self._raw + other_raw)

    def __sub__(self, other: ScaledAmountLike) -> ScaledAmount:
        other_raw = _raw_or_none(other)
        if other_raw is None:
            return NotImplemented
        return ScaledAmount(self._raw - other_raw)

    def __mul__(self, other: ScaledAmountLike) -> ScaledAmount:
        other_raw = _raw_or_none(other)
        if other_raw is None:
            return NotImplemented
        return ScaledAmount(self._raw * other_raw)

    def __truediv__(self, other: ScaledAmountLike) -> ScaledAmount:
        """Integer division truncating toward zero.

        Raises:
            ZeroDivisionError: If $other is zero.
        """
        other_raw = _raw_or_none(other)
        if other_raw is None:
            return NotImplemented
        return ScaledAmount(trunc_div(self._raw, other_raw))

    def __neg__(self) -> ScaledAmount:
        return ScaledAmount(-self._raw)

    def __abs__(self) -> ScaledAmount:
        return ScaledAmount(abs(self._raw))

    # endregion

    # region Comparison

    def same_whole_units(self, other: ScaledAmountLike) -> bool:
        """Compare only the whole-unit parts of two amounts.

        Both sides are truncated to whole units before comparing, so amounts that differ
        only below one unit compare as the same: `1.2` and `1.9` match, `1.9` and `2.0` do not.
        Use `==` for exact comparison.
        """
        other_amount = as_scaled_amount(other)
        return self.into_unit() == other_amount.into_unit()

    def __eq__(self, other) -> bool:
        other_raw = _raw_or_none(other)
        if other_raw is None:
            return NotImplemented
        return self._raw == other_raw

    def __lt__(self, other) -> bool:
        other_raw = _raw_or_none(other)
        if other_raw is None:
            return NotImplemented
        return self._raw < other_raw

    def __le__(self, other) -> bool:
        other_raw = _raw_or_none(other)
        if other_raw is None:
            return NotImplemented
        return self._raw <= other_raw

    def __gt__(self, other) -> bool:
        other_raw = _raw_or_none(other)
        if other_raw is None:
            return NotImplemented
        return self._raw > other_raw

    def __ge__(self, other) -> bool:
        other_raw = _raw_or_none(other)
        if other_raw is None:
            return NotImplemented
        return self._raw >= other_raw

    def __hash__(self) -> int:
        # Equal to the hash of the raw int, since `ScaledAmount(5) == 5`
        return hash(self._raw)

    # endregion

    def __str__(self) -> str:
        return str(self._raw)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._raw})"


# Use where optimal type is `ScaledAmount`, but a raw scaled `int` is also acceptable
ScaledAmountLike: TypeAlias = ScaledAmount | int


def as_scaled_amount(value: ScaledAmountLike) -> ScaledAmount:
    """Convert input to `ScaledAmount`; a plain int is taken as the raw scaled value.

    Raises:
        TypeError: If $value is neither ScaledAmount nor int.
    """
    if isinstance(value, ScaledAmount):
        return value

    return ScaledAmount(value)


def _raw_or_none(value) -> int | None:
    if isinstance(value, ScaledAmount):
        return value.raw
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None
