"""Wolfram Language input form of expression trees."""

from __future__ import annotations

from collections.abc import Iterable

from .ast import (
    AST,
    Boolean,
    Decimal,
    EmptyStatement,
    Function,
    Integer,
    Program,
    StringAtom,
    Symbol,
    SymbolAtom,
)
from .errors import SMUnimplemented

_RENAMED = {"factor": "FactorInteger"}


def function_map(symbol: Symbol) -> str:
    """Wolfram head name for a symbol: known renames, else the capitalised name."""
    name = symbol.name
    if name in _RENAMED:
        return _RENAMED[name]
    return name[:1].upper() + name[1:]


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _apply(head: str, items: Iterable[str | None], bare_head: bool) -> str:
    inner = ",".join(item for item in items if item is not None)
    if bare_head and head == "List":
        return "{" + inner + "}"
    return f"{head}[{inner}]"


def _render(node: AST) -> str | None:
    if isinstance(node, EmptyStatement):
        return None
    if isinstance(node, Program):
        return _apply("CompoundExpression", (_render(n) for n in node.body), True)
    if isinstance(node, Function):
        head = function_map(node.symbol)
        bare = True
        for parameter in node.parameters:
            items = [_render(arg) for arg in parameter.arguments]
            items.extend(
                _apply("Rule", (_render(key), _render(value)), True)
                for key, value in parameter.options
            )
            head = _apply(head, items, bare)
            bare = False
        return head
    if isinstance(node, Boolean):
        return "True" if node.value else "False"
    if isinstance(node, (Integer, Decimal)):
        return str(node.value)
    if isinstance(node, SymbolAtom):
        return node.symbol.name
    if isinstance(node, StringAtom):
        return _quote(node.value)
    raise SMUnimplemented(f"no Wolfram form for {type(node).__name__}")


def to_wolfram_string(node: AST) -> str:
    """Render a node in Wolfram Language input form; empty statements render as nothing."""
    rendered = _render(node)
    return "" if rendered is None else rendered