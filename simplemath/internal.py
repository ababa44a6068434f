"""Built-in functions applied to expression nodes."""

from __future__ import annotations

from collections.abc import Callable

from .ast import (
    AST,
    Boolean,
    Decimal,
    EmptyStatement,
    Function,
    Integer,
    StringAtom,
    SymbolAtom,
    integer,
    string,
    symbol,
)
from .errors import AlgorithmError, EmptyContainerError, SMUnimplemented, from_algorithm
from .fibonacci import fibonacci_i
from .gamma import factorial_i
from .primes import prime_sum_i


def _apply(algorithm: Callable[[int], int], n: int) -> int:
    try:
        return algorithm(n)
    except AlgorithmError as error:
        raise from_algorithm(error) from error


def _unsupported(name: str, expr: AST) -> SMUnimplemented:
    return SMUnimplemented(f"Unimplemented Function: {name} for {type(expr).__name__}")


def _numeric(name: str, algorithm: Callable[[int], int], expr: AST) -> AST:
    if isinstance(expr, Integer):
        return Integer(_apply(algorithm, expr.value))
    if isinstance(expr, Decimal):
        return expr
    raise _unsupported(name, expr)


def factorial(expr: AST) -> AST:
    """Factorial of an integer node; decimal nodes are returned unchanged."""
    return _numeric("factorial", factorial_i, expr)


def fibonacci(expr: AST) -> AST:
    """Fibonacci number of an integer node; decimal nodes are returned unchanged."""
    return _numeric("fibonacci", fibonacci_i, expr)


def prime_sum(expr: AST) -> AST:
    """Sum of the primes not above an integer node; decimal nodes are returned unchanged."""
    return _numeric("prime_sum", prime_sum_i, expr)


def head(expr: AST) -> AST:
    """The head of a node: its type symbol, or the callee for a call."""
    if isinstance(expr, Function):
        params = expr.parameters
        if not params:
            return symbol("std::core::Symbol")
        if len(params) == 1:
            return SymbolAtom(expr.symbol)
        return Function(expr.symbol, params[:-1])
    if isinstance(expr, Boolean):
        return symbol("std::core::Boolean")
    if isinstance(expr, Integer):
        return symbol("std::core::Integer")
    if isinstance(expr, Decimal):
        return symbol("std::core::Decimal")
    if isinstance(expr, SymbolAtom):
        return symbol("std::core::Symbol")
    if isinstance(expr, StringAtom):
        return symbol("std::core::String")
    return EmptyStatement()


def length(expr: AST) -> AST:
    """Length of a string node, counted in UTF-8 bytes."""
    if isinstance(expr, StringAtom):
        return integer(len(expr.value.encode("utf-8")))
    raise _unsupported("length", expr)


def first(expr: AST) -> AST:
    """First character of a string node."""
    if isinstance(expr, StringAtom):
        if not expr.value:
            raise EmptyContainerError("Can't call `first` on empty string")
        return string(expr.value[0])
    raise _unsupported("first", expr)


def last(expr: AST) -> AST:
    """Last character of a string node."""
    if isinstance(expr, StringAtom):
        if not expr.value:
            raise EmptyContainerError("Can't call `last` on empty string")
        return string(expr.value[-1])
    raise _unsupported("last", expr)