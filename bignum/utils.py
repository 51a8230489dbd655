"""
Integer helpers shared by BigInt and BigRat.
"""

from .errors import DivisionByZero


def int_pow(base: int, exp: int) -> int:
    """
    Raise integer to a non-negative integer power by repeated squaring.

    The exponent is an unbounded int, we walk its bits instead of counting.
    """
    assert exp >= 0
    if base in (0, 1) and exp > 0:
        return base
    if base == -1:
        return 1 if exp % 2 == 0 else -1
    result = 1
    while exp:
        if exp & 1:
            result *= base
        exp >>= 1
        if exp:
            base *= base
    return result


def int_root(x: int, k: int) -> int | None:
    """Exact k-th root of x >= 0, or None if x is not a perfect k-th power."""
    assert x >= 0 and k >= 1
    if x < 2:
        return x
    # Newton iteration from an upper bound
    r = 1 << -(-x.bit_length() // k)
    while True:
        s = ((k - 1) * r + x // int_pow(r, k - 1)) // k
        if s >= r:
            break
        r = s
    return r if int_pow(r, k) == x else None


def trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Division truncating toward zero; remainder takes the sign of a."""
    if b == 0:
        raise DivisionByZero('division of {} by zero'.format(a))
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


def round_half_away(n: int, d: int) -> int:
    """Round n/d (d > 0) to the nearest integer, ties away from zero."""
    q, r = divmod(abs(n), d)
    if 2 * r >= d:
        q += 1
    return q if n >= 0 else -q
