"""Factorials."""

from __future__ import annotations

import math

from .errors import ComplexInfinity, Overflow

_ISIZE_MIN = -(2**63)
_ISIZE_MAX = 2**63 - 1


def factorial_fold_u(n: int) -> int:
    """Product of 1..n for a non-negative n."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return math.prod(range(1, n + 1))


def factorial_i(n: int) -> int:
    """Factorial of an integer; negative input is complex infinity."""
    if not _ISIZE_MIN <= n <= _ISIZE_MAX:
        raise Overflow()
    if n < 0:
        raise ComplexInfinity()
    return factorial_fold_u(n)