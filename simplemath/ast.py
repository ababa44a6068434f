"""Expression tree: symbols, call parameters and the node types built on them."""

from __future__ import annotations

import decimal as _decimal
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field, fields
from enum import IntEnum
from typing import Any, ClassVar

from .errors import SMUnimplemented

_NO_PRECEDENCE = 255


class OperatorKind(IntEnum):
    """How a symbol is written; the order of members is the sort order."""

    NORMAL = 0
    ALIAS = 1
    PREFIX = 2
    INFIX = 3
    SUFFIX = 4


@dataclass(frozen=True, order=True)
class SymbolKind:
    """Kind of a symbol, with its operator text and infix precedence."""

    kind: OperatorKind = OperatorKind.NORMAL
    operator: str = ""
    precedence: int = 0


@dataclass(frozen=True, order=True)
class Symbol:
    """A possibly namespaced name such as ``std::infix::times``."""

    name_space: tuple[str, ...] = ()
    name: str = ""
    kind: SymbolKind = field(default_factory=SymbolKind)
    attributes: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "name_space", tuple(self.name_space))

    @classmethod
    def parse(cls, text: str) -> Symbol:
        """Build a plain symbol from ``a::b::name`` notation."""
        *name_space, name = text.split("::")
        return cls(name_space=tuple(name_space), name=name)

    def __str__(self) -> str:
        if not self.name_space:
            return self.name
        return "::".join((*self.name_space, self.name))

    def is_prefix(self) -> bool:
        return self.kind.kind is OperatorKind.PREFIX

    def is_infix(self) -> bool:
        return self.kind.kind is OperatorKind.INFIX

    def is_suffix(self) -> bool:
        return self.kind.kind is OperatorKind.SUFFIX

    def is_times(self) -> bool:
        return str(self) == "std::infix::times"


@dataclass(frozen=True, order=True)
class Position:
    """Source location of a node."""

    file: str = ""
    start: tuple[int, int] = (0, 0)
    end: tuple[int, int] = (0, 0)

    def __str__(self) -> str:
        return self.file


class AST:
    """Base class of expression nodes; nodes are immutable, hashable and ordered."""

    _rank: ClassVar[int] = -1

    def _order_key(self) -> tuple[int, tuple[Any, ...]]:
        return self._rank, tuple(getattr(self, f.name) for f in fields(self))  # type: ignore[arg-type]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, AST):
            return NotImplemented
        return self._order_key() < other._order_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, AST):
            return NotImplemented
        return self._order_key() <= other._order_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, AST):
            return NotImplemented
        return self._order_key() > other._order_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, AST):
            return NotImplemented
        return self._order_key() >= other._order_key()

    def precedence(self) -> int:
        """Infix precedence of this node; atoms bind tightest."""
        return _NO_PRECEDENCE

    def is_string(self) -> bool:
        return False

    def is_zero(self) -> bool:
        return False

    def is_one(self) -> bool:
        return False

    def is_boolean(self) -> bool:
        return False

    def is_null(self) -> bool:
        return False


@dataclass(frozen=True, order=True)
class Parameter:
    """One bracketed argument list: positional arguments and keyword options."""

    arguments: tuple[AST, ...] = ()
    options: tuple[tuple[AST, AST], ...] = ()
    position: Position = field(default_factory=Position)

    def __post_init__(self) -> None:
        object.__setattr__(self, "arguments", tuple(self.arguments))
        options: Mapping[AST, AST] | Iterable[tuple[AST, AST]] = self.options
        pairs = options.items() if isinstance(options, Mapping) else options
        object.__setattr__(self, "options", tuple(sorted((k, v) for k, v in pairs)))

    def is_unary(self) -> bool:
        return len(self.arguments) == 1 and not self.options

    def is_multiary(self) -> bool:
        return len(self.arguments) > 1 and not self.options


def is_unary(params: Sequence[Parameter]) -> bool:
    """True for a single parameter list holding exactly one argument."""
    return len(params) == 1 and params[0].is_unary()


def is_multiary(params: Sequence[Parameter]) -> bool:
    """True for a single parameter list holding several arguments."""
    return len(params) == 1 and params[0].is_multiary()


@dataclass(frozen=True, eq=True)
class EmptyStatement(AST):
    _rank: ClassVar[int] = 0

    def __str__(self) -> str:
        raise SMUnimplemented("an empty statement has no display form")


@dataclass(frozen=True, eq=True)
class Program(AST):
    body: tuple[AST, ...] = ()
    _rank: ClassVar[int] = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "body", tuple(self.body))

    def __str__(self) -> str:
        raise SMUnimplemented("a program has no display form")


@dataclass(frozen=True, eq=True)
class Function(AST):
    """A call ``symbol(args)(args)...``; operators are calls of operator symbols."""

    symbol: Symbol
    parameters: tuple[Parameter, ...] = ()
    _rank: ClassVar[int] = 2

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", tuple(self.parameters))

    def precedence(self) -> int:
        if self.symbol.is_infix():
            return self.symbol.kind.precedence
        return _NO_PRECEDENCE

    def __str__(self) -> str:
        kind = self.symbol.kind
        params = self.parameters
        if kind.kind in (OperatorKind.NORMAL, OperatorKind.ALIAS):
            raise SMUnimplemented(f"no display form for call of {self.symbol}")
        if kind.kind is OperatorKind.PREFIX and is_unary(params):
            return f"{kind.operator}{params[0].arguments[0]}"
        if kind.kind is OperatorKind.SUFFIX and is_unary(params):
            return f"{params[0].arguments[0]}{kind.operator}"
        if kind.kind is OperatorKind.INFIX and is_multiary(params):
            parts = (
                f"({arg})" if arg.precedence() < kind.precedence else str(arg)
                for arg in params[0].arguments
            )
            return kind.operator.join(parts)
        return ""


@dataclass(frozen=True, eq=True)
class Boolean(AST):
    value: bool
    _rank: ClassVar[int] = 3

    def __str__(self) -> str:
        return "true" if self.value else "false"

    def is_boolean(self) -> bool:
        return True


@dataclass(frozen=True, eq=True)
class Integer(AST):
    value: int
    _rank: ClassVar[int] = 4

    def __str__(self) -> str:
        return str(self.value)

    def is_zero(self) -> bool:
        return self.value == 0

    def is_one(self) -> bool:
        return self.value == 1


@dataclass(frozen=True, eq=True)
class Decimal(AST):
    value: _decimal.Decimal
    _rank: ClassVar[int] = 5

    def __str__(self) -> str:
        return str(self.value)

    def is_zero(self) -> bool:
        return self.value == 0

    def is_one(self) -> bool:
        return self.value == 1


@dataclass(frozen=True, eq=True)
class SymbolAtom(AST):
    symbol: Symbol
    _rank: ClassVar[int] = 6

    def __str__(self) -> str:
        return str(self.symbol)

    def is_null(self) -> bool:
        return self.symbol.name == "Null"


@dataclass(frozen=True, eq=True)
class StringAtom(AST):
    value: str
    _rank: ClassVar[int] = 7

    def __str__(self) -> str:
        return self.value

    def is_string(self) -> bool:
        return True


@dataclass(frozen=True, order=True)
class Expression:
    """A read-eval line: its raw text, the parsed input and, once run, the output."""

    raw: str
    input: AST
    eos: bool = False
    output: AST | None = None


def integer(n: int | str) -> Integer:
    """Integer node from an int or its decimal text."""
    return Integer(int(n))


def decimal(n: int | str | float | _decimal.Decimal) -> Decimal:
    """Decimal node from a number or its text."""
    if isinstance(n, float):
        return Decimal(_decimal.Decimal(repr(n)))
    return Decimal(_decimal.Decimal(n))


def symbol(s: str) -> SymbolAtom:
    """Symbol node from ``a::b::name`` notation."""
    return SymbolAtom(Symbol.parse(s))


def string(s: str) -> StringAtom:
    """String node."""
    return StringAtom(str(s))