"""Elementary number theory on arbitrary-precision integers."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .errors import Indeterminate, Overflow

_U32_MAX = 2**32 - 1


def _tdiv(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _trem(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _tdiv(a, b)


def power_iu(a: int, b: int) -> int:
    """Raise an integer to a non-negative integer power."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    if a == 0 and b == 0:
        raise Indeterminate()
    if a == 0 or b == 0:
        return 0
    if a == 1:
        return 1
    if b == 1:
        return b
    if b > _U32_MAX:
        raise Overflow()
    return a**b


def _extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    r = (b, a)
    s = (0, 1)
    t = (1, 0)
    while r[0] != 0:
        q = _tdiv(r[1], r[0])
        r = (r[1] - q * r[0], r[0])
        s = (s[1] - q * s[0], s[0])
        t = (t[1] - q * t[0], t[0])
    if r[1] >= 0:
        return r[1], s[1], t[1]
    return -r[1], -s[1], -t[1]


def extended_gcd2(a: int, b: int) -> tuple[int, list[int]]:
    """Return gcd(a, b) and Bezout coefficients [x, y] with a*x + b*y = gcd."""
    g, x, y = _extended_gcd(a, b)
    return g, [x, y]


def modulo_inverse(a: int, m: int) -> int | None:
    """Solve a*x = 1 (mod m); None when a and m are not coprime."""
    g, x, _ = _extended_gcd(a, m)
    return x + m if g == 1 else None


def modulo_division(a: int, b: int, m: int) -> int | None:
    """Division a / b modulo m; None when gcd(b, m) does not divide a."""
    g, _, y = _extended_gcd(b, m)
    if _trem(a, g) == 0:
        return _tdiv(a, g) * y
    return None


def is_coprime(x: int, y: int) -> bool:
    """True when gcd(x, y) is 1."""
    return math.gcd(x, y) == 1


def chinese_remainder(u: Sequence[int], m: Sequence[int]) -> int | None:
    """Find x with x = u[i] (mod m[i]) for every i; None if it cannot be solved."""
    if len(u) != len(m):
        return None
    if not u:
        raise ValueError("at least one congruence is required")
    digits: list[int] = []
    for i, (u_i, m_i) in enumerate(zip(u, m)):
        product = 1
        for modulus in m[:i]:
            product = _trem(product * modulus, m_i)
        c_i = modulo_inverse(product, m_i)
        if c_i is None:
            return None
        t = 0
        for v_j, m_j in reversed(list(zip(digits, m))):
            t = m_j * t + _trem(v_j, m_i)
        digits.append(_trem((u_i - t) * c_i, m_i))
    result = digits.pop()
    for v_i, m_i in reversed(list(zip(digits, m))):
        result = result * m_i + v_i
    return result