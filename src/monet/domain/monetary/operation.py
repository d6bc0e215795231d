"""Deferred arithmetic over `Money`.

Applying `+`, `-`, `*` or `/` to a Money or to another operation evaluates nothing: it builds
a bigger expression tree. A single `execute(rates)` call then evaluates the whole tree
depth-first, left to right, against a `RateTable`:

    >>> total = (price + shipping - discount) * Exponent(2)
    >>> total.execute(rates)

The currency of an `Add`/`Sub` result is always the currency of its left operand, so a chain
of mixed-currency terms resolves to the currency of the first term.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from monet.domain.monetary.exponent import Exponent

if TYPE_CHECKING:
    from monet.domain.monetary.money import Money
    from monet.domain.monetary.rates import RateTable

logger = logging.getLogger(__name__)


class Operation:
    """Base of everything that can be evaluated into `Money`.

    Subclasses are `Money` itself (the leaf) and the nodes `Add`, `Sub`, `Mul`, `Div`.
    `sum(operations)` builds a left-nested chain of `Add` nodes.
    """

    __slots__ = ()

    def execute(self, rates: RateTable) -> Money:
        """Evaluate this operation against $rates.

        Raises:
            RateNotFoundError: If a conversion needs a rate missing from $rates.
        """
        raise NotImplementedError

    # region Builder

    def add(self, other: Operation) -> Add:
        _require_operation(other, "add")
        return Add(self, other)

    def sub(self, other: Operation) -> Sub:
        _require_operation(other, "sub")
        return Sub(self, other)

    def scale(self, exponent: Exponent) -> Mul:
        _require_exponent(exponent, "scale")
        return Mul(self, exponent)

    def div(self, exponent: Exponent) -> Div:
        _require_exponent(exponent, "div")
        return Div(self, exponent)

    # endregion

    # region Operators

    def __add__(self, other):
        if not isinstance(other, Operation):
            return NotImplemented
        return Add(self, other)

    def __radd__(self, other):
        # `sum()` starts from 0
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other):
        if not isinstance(other, Operation):
            return NotImplemented
        return Sub(self, other)

    def __mul__(self, other):
        if not isinstance(other, Exponent):
            return NotImplemented
        return Mul(self, other)

    def __truediv__(self, other):
        if not isinstance(other, Exponent):
            return NotImplemented
        return Div(self, other)

    # endregion


class _Node(Operation):
    __slots__ = ()

    def execute(self, rates: RateTable) -> Money:
        result = evaluate(self, rates)
        logger.debug(f"Evaluated {self.__class__.__name__} operation to {result!r}")
        return result


@dataclass(frozen=True)
class Add(_Node):
    """Sum of two operations. The result has the currency of $left."""

    left: Operation
    right: Operation


@dataclass(frozen=True)
class Sub(_Node):
    """Difference of two operations. The result has the currency of $left."""

    left: Operation
    right: Operation


@dataclass(frozen=True)
class Mul(_Node):
    """Operation multiplied by an `Exponent`. The result keeps the currency of $operand."""

    operand: Operation
    exponent: Exponent


@dataclass(frozen=True)
class Div(_Node):
    """Operation divided by an `Exponent`. The result keeps the currency of $operand."""

    operand: Operation
    exponent: Exponent


def evaluate(operation: Operation, rates: RateTable) -> Money:
    """Evaluate $operation against $rates.

    Operands are evaluated depth-first, left before right; the first error propagates and
    nothing is mutated on the way (every step produces new values). The walk uses an explicit
    stack, so the depth of the tree is bounded by memory, not by the recursion limit.

    - `Add`/`Sub`: the right result is converted into the currency of the left result
      (`amount * worth(right) / worth(left)`), then amounts are added/subtracted.
    - `Mul`: `amount * exponent.amount / 10^exponent.exponent`.
    - `Div`: `amount * 10^exponent.exponent / exponent.amount`. Multiplying first keeps the
      precision of integer division.
    - Any other operation (a `Money`) evaluates to itself.

    Raises:
        TypeError: If $operation, or any operand in it, is not an Operation.
        RateNotFoundError: If a conversion needs a rate missing from $rates.
        AmountOverflowError: If an intermediate amount leaves the 128-bit range.
        ZeroDivisionError: If a `Div` exponent amount is zero.
    """
    # Each entry is (node, operands_done); a node is combined once its operands are evaluated
    pending: list[tuple[Operation, bool]] = [(operation, False)]
    results: list[Money] = []

    while pending:
        node, operands_done = pending.pop()

        # Raise: only operations can be evaluated
        if not isinstance(node, Operation):
            raise TypeError(f"$operation must be an Operation, but provided value is: {node!r}")

        if isinstance(node, (Add, Sub)):
            if not operands_done:
                pending.append((node, True))
                pending.append((node.right, False))
                pending.append((node.left, False))
                continue
            right = results.pop()
            left = results.pop()
            right = right.into_code(left.currency_code, rates)
            if isinstance(node, Add):
                results.append(left.with_amount(left.amount + right.amount))
            else:
                results.append(left.with_amount(left.amount - right.amount))

        elif isinstance(node, (Mul, Div)):
            if not operands_done:
                pending.append((node, True))
                pending.append((node.operand, False))
                continue
            money = results.pop()
            exponent = node.exponent
            if isinstance(node, Mul):
                results.append(money.with_amount(money.amount * exponent.amount / exponent.divisor))
            else:
                results.append(money.with_amount(money.amount * exponent.divisor / exponent.amount))

        else:
            # Leaf
            results.append(node.execute(rates))

    return results.pop()


def _require_operation(value, method_name: str) -> None:
    if not isinstance(value, Operation):
        raise TypeError(f"Cannot call `{method_name}` because $other is not an Operation (got type '{type(value).__name__}')")


def _require_exponent(value, method_name: str) -> None:
    if not isinstance(value, Exponent):
        raise TypeError(f"Cannot call `{method_name}` because $exponent is not an Exponent (got type '{type(value).__name__}')")
