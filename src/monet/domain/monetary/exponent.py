from __future__ import annotations

from dataclasses import dataclass

from monet.domain.monetary.scaled_amount import ScaledAmount, as_scaled_amount
from monet.utils.math import pow10

MAX_EXPONENT = 255


@dataclass(frozen=True)
class Exponent:
    """Amount paired with a power-of-ten scale; the right-hand operand of `*` and `/`.

    `Exponent(amount, exponent)` stands for `amount / 10^exponent`. Multiplying a Money by
    `Exponent(1000, 2)` multiplies it by 10, dividing by `Exponent(5, 1)` divides it by 0.5.

    Attributes:
        amount (ScaledAmount): The multiplier/divisor before scaling. Plain ints are accepted.
        exponent (int): Power of ten to scale $amount down by, 0-255.
    """

    amount: ScaledAmount
    exponent: int = 0

    def __post_init__(self) -> None:
        # Convert amount (bypass mechanism of frozen dataclass, that does not allow setting new value)
        object.__setattr__(self, "amount", as_scaled_amount(self.amount))

        # Raise: $exponent must be an int in 0..=255
        if isinstance(self.exponent, bool) or not isinstance(self.exponent, int):
            raise TypeError(f"$exponent must be an int, but provided value is: {self.exponent!r}")
        if not 0 <= self.exponent <= MAX_EXPONENT:
            raise ValueError(f"$exponent must be between 0 and {MAX_EXPONENT}, but provided value is: {self.exponent}")

    @property
    def divisor(self) -> ScaledAmount:
        """`10^exponent` as ScaledAmount."""
        return ScaledAmount(pow10(self.exponent))

    def is_equivalent(self, other: Exponent) -> bool:
        """Compare `amount / 10^exponent` of both sides, truncated.

        Warning: two Exponent(s) may be equivalent due to precision losses, e.g.
        `Exponent(1005, 2)` is equivalent to `Exponent(10, 0)`.
        """
        if not isinstance(other, Exponent):
            raise TypeError(f"$other must be an Exponent, but provided value is: {other!r}")
        return self.amount / self.divisor == other.amount / other.divisor
