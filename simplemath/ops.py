"""Symbols for the prefix, suffix and infix operators of the input language."""

from __future__ import annotations

from .ast import OperatorKind, Symbol, SymbolKind
from .errors import SMUnreachable

_PREFIX = {"+": "plus", "-": "minus", "*": "unpack", "!": "not"}
_SUFFIX = {"!": "factorial", "!!": "factorial2"}
_INFIX = {
    "+": ("add", 80),
    "-": ("subtract", 80),
    "*": ("times", 140),
    "/": ("divide", 140),
    "//": ("quotient", 140),
    "^": ("power", 150),
}
_DEFAULT_INFIX_PRECEDENCE = 170


def prefix_map(text: str) -> Symbol:
    """Symbol for a prefix operator."""
    try:
        name = _PREFIX[text]
    except KeyError:
        raise SMUnreachable(f"unknown prefix operator {text!r}") from None
    return Symbol(("std", "prefix"), name, SymbolKind(OperatorKind.PREFIX, text))


def suffix_map(text: str) -> Symbol:
    """Symbol for a suffix operator."""
    try:
        name = _SUFFIX[text]
    except KeyError:
        raise SMUnreachable(f"unknown suffix operator {text!r}") from None
    return Symbol(("std", "suffix"), name, SymbolKind(OperatorKind.SUFFIX, text))


def infix_map(text: str) -> Symbol:
    """Symbol for an infix operator; unknown operators keep their text as name."""
    name, precedence = _INFIX.get(text, (text, _DEFAULT_INFIX_PRECEDENCE))
    return Symbol(("std", "infix"), name, SymbolKind(OperatorKind.INFIX, text, precedence))