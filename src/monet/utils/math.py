from __future__ import annotations


def trunc_div(n: int, d: int) -> int:
    """
    Divide $n by $d and truncate the quotient toward zero.

    Python's `//` floors, which differs from truncation for negative quotients.
    Scaled amounts always truncate, so every division in the monetary domain goes through here.

    Args:
        n: The dividend.
        d: The divisor.

    Returns:
        The quotient truncated toward zero.

    Raises:
        ZeroDivisionError: If $d == 0.

    Examples:
        >>> trunc_div(7, 2)
        3
        >>> trunc_div(-7, 2)
        -3
        >>> trunc_div(7, -2)
        -3
    """
    q = abs(n) // abs(d)
    return -q if (n < 0) != (d < 0) else q


def trunc_rem(n: int, d: int) -> int:
    """
    Remainder matching `trunc_div`: the result has the sign of $n.

    Examples:
        >>> trunc_rem(7, 2)
        1
        >>> trunc_rem(-7, 2)
        -1
    """
    return n - d * trunc_div(n, d)


def pow10(exponent: int) -> int:
    """
    Return 10 raised to $exponent.

    Raises:
        ValueError: If $exponent < 0.
    """
    if exponent < 0:
        raise ValueError(f"$exponent must be >= 0, but provided value is: {exponent}")
    return 10**exponent
