"""Evaluation of expression trees."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from . import internal
from .ast import (
    AST,
    Boolean,
    Decimal,
    EmptyStatement,
    Function,
    Integer,
    Parameter,
    Program,
    StringAtom,
    Symbol,
    SymbolAtom,
)
from .errors import SMUnimplemented

_U64_MAX = 2**64 - 1

_ATOMS = (EmptyStatement, Boolean, Integer, Decimal, SymbolAtom, StringAtom)


@dataclass
class Context:
    """State of an evaluation session: numbered inputs, outputs and known symbols."""

    index: int = 0
    inputs: dict[int, str] = field(default_factory=dict)
    outputs: dict[int, AST] = field(default_factory=dict)
    symbols: set[Symbol] = field(default_factory=set)


def _unimplemented(what: str) -> SMUnimplemented:
    return SMUnimplemented(f"Unimplemented Function: {what}")


def forward(node: AST, ctx: Context) -> AST:
    """Evaluate one step of a node."""
    if isinstance(node, _ATOMS):
        return node
    if isinstance(node, Program):
        raise _unimplemented("program evaluation")
    if isinstance(node, Function):
        if not node.parameters:
            return SymbolAtom(node.symbol)
        if len(node.parameters) == 1:
            return _evaluate_function(node.symbol, node.parameters[0], ctx)
        raise _unimplemented(f"{node.symbol} with several parameter lists")
    raise _unimplemented(type(node).__name__)


def rewrite(node: AST) -> AST:
    """Simplify a node structurally; currently every node is already in normal form."""
    return node


def _unary(func: Callable[[AST], AST]) -> Callable[[Sequence[AST], Context], AST]:
    def apply(args: Sequence[AST], _ctx: Context) -> AST:
        if not args:
            raise _unimplemented(f"{func.__name__} without arguments")
        return func(args[0])

    return apply


def _integer_pair(name: str, args: Sequence[AST]) -> tuple[int, int]:
    if len(args) == 2 and all(isinstance(arg, Integer) for arg in args):
        return args[0].value, args[1].value  # type: ignore[attr-defined]
    raise _unimplemented(name)


def _evaluate_additive(args: Sequence[AST], _ctx: Context) -> AST:
    lhs, rhs = _integer_pair("plus", args)
    return Integer(lhs + rhs)


def _evaluate_multiplicative(args: Sequence[AST], _ctx: Context) -> AST:
    lhs, rhs = _integer_pair("times", args)
    return Integer(lhs * rhs)


def _evaluate_power(args: Sequence[AST], _ctx: Context) -> AST:
    lhs, rhs = _integer_pair("power", args)
    if not 0 <= rhs <= _U64_MAX:
        return Integer(lhs)
    return Integer(lhs**rhs)


_BUILTINS: dict[str, Callable[[Sequence[AST], Context], AST]] = {
    "first": _unary(internal.first),
    "last": _unary(internal.last),
    "length": _unary(internal.length),
    "factorial": _unary(internal.factorial),
    "fibonacci": _unary(internal.fibonacci),
    "plus": _evaluate_additive,
    "times": _evaluate_multiplicative,
    "power": _evaluate_power,
}


def _evaluate_function(function: Symbol, parameter: Parameter, ctx: Context) -> AST:
    try:
        builtin = _BUILTINS[function.name]
    except KeyError:
        raise _unimplemented(str(function)) from None
    return builtin(parameter.arguments, ctx)