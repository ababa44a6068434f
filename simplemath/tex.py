"""TeX rendering of expression trees."""

from __future__ import annotations

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

_PREFIX_SPACE = ("std", "prefix")
_INFIX_SPACE = ("std", "infix")
_SUFFIX_SPACE = ("std", "suffix")

_NAMED_FUNCTIONS = frozenset(
    {"sin", "cos", "tan", "cot", "sec", "csc", "arcsin", "arccos", "arctan"}
)
_OPERATOR_NAMES = frozenset(
    {
        "arccot",
        "arcsec",
        "arccsc",
        "arcsinh",
        "arccosh",
        "arctanh",
        "arccoth",
        "arcsech",
        "arccsch",
    }
)


def _first_parameter(node: Function) -> Parameter:
    if not node.parameters:
        raise ValueError(f"call of {node.symbol} has no parameter list")
    return node.parameters[0]


def _parameter_tex(parameter: Parameter) -> str:
    terms = ", ".join(to_tex(arg) for arg in parameter.arguments)
    return rf"\\left({terms}\\right)"


def _function_tex(node: Function) -> str:
    sym = node.symbol
    if sym.name_space == _PREFIX_SPACE:
        raise SMUnimplemented(f"no TeX form for prefix operator {sym}")
    if sym.name_space == _INFIX_SPACE:
        return infix_tex(sym, _first_parameter(node))
    if sym.name_space == _SUFFIX_SPACE:
        raise SMUnimplemented(f"no TeX form for suffix operator {sym}")
    if sym.name in _NAMED_FUNCTIONS:
        return rf"\\{sym}{omit_brackets_function(_first_parameter(node))}"
    if sym.name in _OPERATOR_NAMES:
        return rf"\\operatorname{{{sym}}}{omit_brackets_function(_first_parameter(node))}"
    if sym.name == "List":
        arguments = _first_parameter(node).arguments
        if not arguments:
            raise ValueError("an empty list has no TeX form")
        tallest = max(height(arg) for arg in arguments)
        joined = ", ".join(to_tex(arg) for arg in arguments)
        if tallest > 1:
            return rf"\\left\\{{{joined}\\right\\}}"
        return rf"\\{{{joined}\\}}"
    inner = "".join(_parameter_tex(p) for p in node.parameters)
    return rf"\\operatorname{{{sym.name}}}{inner}"


def to_tex(node: AST) -> str:
    """Render a node as TeX."""
    if isinstance(node, EmptyStatement):
        return ""
    if isinstance(node, Program):
        raise SMUnimplemented("a program has no TeX form")
    if isinstance(node, (Integer, Decimal)):
        return str(node.value)
    if isinstance(node, SymbolAtom):
        return node.symbol.name
    if isinstance(node, StringAtom):
        return rf"\\text{{{node.value}}}"
    if isinstance(node, Function):
        return _function_tex(node)
    if isinstance(node, Boolean):
        return r"\\mathtt{true}" if node.value else r"\\mathtt{false}"
    raise SMUnimplemented(f"no TeX form for {type(node).__name__}")


def height(node: AST | Parameter) -> int:
    """Number of text lines the rendered node occupies."""
    if isinstance(node, Parameter):
        return max((height(arg) for arg in node.arguments), default=1)
    if isinstance(node, EmptyStatement):
        return 0
    return 1


def width(node: AST | Parameter) -> int:
    """Number of terms the rendered node shows side by side."""
    if isinstance(node, Parameter):
        return len(node.arguments)
    if isinstance(node, EmptyStatement):
        return 0
    if isinstance(node, Function):
        sym = node.symbol
        if sym.name_space in (_PREFIX_SPACE, _SUFFIX_SPACE):
            raise SMUnimplemented(f"no width for operator {sym}")
        if sym.name_space == _INFIX_SPACE:
            return len(_first_parameter(node).arguments)
    return 1


def infix_tex(symbol: Symbol, parameter: Parameter) -> str:
    """TeX for a binary infix operator applied to the first two arguments."""
    if len(parameter.arguments) < 2:
        raise ValueError(f"infix operator {symbol} needs two arguments")
    lhs, rhs = parameter.arguments[0], parameter.arguments[1]
    if symbol.name == "times":
        return f"{lhs} {rhs}"
    operator = "+" if symbol.name == "add" else symbol.name
    return f"{lhs} {operator} {rhs}"


def _bracketed(parameter: Parameter, body: str, closing: str) -> str:
    if height(parameter) > 1:
        return f"\\left({body}{closing}"
    return f"({body})"


def omit_brackets_function(parameter: Parameter) -> str:
    """Argument list of a named function, dropping brackets around a simple argument."""
    args = parameter.arguments
    if not args:
        return "()"
    if len(args) == 1:
        if width(args[0]) <= 1:
            return f" {to_tex(args[0])}"
        return _bracketed(parameter, to_tex(args[0]), "\\left)")
    return _bracketed(parameter, ", ".join(to_tex(arg) for arg in args), "\\right)")