"""Fibonacci numbers."""

from __future__ import annotations

from .errors import Overflow

_ISIZE_MIN = -(2**63)
_ISIZE_MAX = 2**63 - 1


def fibonacci_i(n: int) -> int:
    """Fibonacci number for any integer index, including negative ones."""
    if not _ISIZE_MIN <= n <= _ISIZE_MAX:
        raise Overflow()
    value = fibonacci_fast_u(abs(n))
    if n < 0 and n % 2 == 0:
        return -value
    return value


def fibonacci_fold_u(n: int) -> int:
    """Fibonacci number by straightforward iteration."""
    if n < 0:
        raise ValueError("n must be non-negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = current + following, current
    return current


def fibonacci_fast_u(number: int) -> int:
    """Fibonacci number by memoised index doubling."""
    if number < 0:
        raise ValueError("number must be non-negative")
    memo = {0: 0, 1: 1, 2: 1}

    def fib(n: int) -> int:
        if n in memo:
            return memo[n]
        half = n // 2
        if n % 2 == 0:
            a = fib(half)
            b = fib(half + 1)
            result = a * (2 * b - a)
        else:
            a = fib(half + 1)
            b = fib(half)
            result = a * a + b * b
        memo[n] = result
        return result

    return fib(number)