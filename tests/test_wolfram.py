import pytest
from hypothesis import given
from hypothesis import strategies as st

from simplemath.ast import (
    Boolean,
    EmptyStatement,
    Function,
    Parameter,
    Program,
    Symbol,
    decimal,
    integer,
    string,
    symbol,
)
from simplemath.ops import infix_map, prefix_map, suffix_map
from simplemath.wolfram import function_map, to_wolfram_string


def call(name, *params):
    return Function(Symbol.parse(name), tuple(Parameter(p) for p in params))


def infix(op, *args):
    return Function(infix_map(op), (Parameter(args),))


def prefix(op, arg):
    return Function(prefix_map(op), (Parameter((arg,)),))


def suffix(op, arg):
    return Function(suffix_map(op), (Parameter((arg,)),))


A = symbol("a")
X = symbol("x")
Y = symbol("y")
I = integer


def span(start, end, step):
    return call("std::core::Span", (start, end, step))


ALL = symbol("std::core::All")


@pytest.mark.parametrize(
    ("node", "expected"),
    [
        (call("a", ()), "A[]"),
        (call("a", (I(1),)), "A[1]"),
        (call("a", (I(1), I(2))), "A[1,2]"),
        (call("a", (I(1),), (I(2),)), "A[1][2]"),
        (call("b", (A,)), "B[a]"),
        (call("b", (A, I(1))), "B[a,1]"),
        (call("b", (A, I(1)), (I(2),)), "B[a,1][2]"),
        (call("first", (call("std::containers::List", (I(1), I(2))),)), "First[{1,2}]"),
        (call("std::core::index", (A, I(0))), "Index[a,0]"),
        (call("std::core::Index", (A, I(1), I(2))), "Index[a,1,2]"),
        (
            call("std::core::Index", (call("std::core::Index", (A, I(1))), I(2))),
            "Index[Index[a,1],2]",
        ),
    ],
)
def test_calls(node, expected):
    assert to_wolfram_string(node) == expected


@pytest.mark.parametrize(
    ("node", "expected"),
    [
        (span(I(1), ALL, I(1)), "Span[1,All,1]"),
        (span(I(1), I(3), I(1)), "Span[1,3,1]"),
        (span(I(1), ALL, prefix("-", I(1))), "Span[1,All,Minus[1]]"),
        (span(I(1), prefix("-", I(1)), I(1)), "Span[1,Minus[1],1]"),
        (span(I(1), I(3), I(2)), "Span[1,3,2]"),
    ],
)
def test_index_range(node, expected):
    wrapped = call("std::core::Index", (A, node))
    assert to_wolfram_string(wrapped) == f"Index[a,{expected}]"


def test_literal_number():
    assert to_wolfram_string(I(0)) == "0"
    assert to_wolfram_string(prefix("-", I(1))) == "Minus[1]"
    assert to_wolfram_string(decimal("1.0")) == "1.0"
    assert to_wolfram_string(prefix("-", decimal("1.0"))) == "Minus[1.0]"
    assert to_wolfram_string(I(0xFF)) == "255"


def test_literal_string():
    assert to_wolfram_string(string("")) == "\"\""
    assert to_wolfram_string(string("  ")) == "\"  \""
    assert to_wolfram_string(string(' "" ')) == "\" \\\"\\\" \""
    assert to_wolfram_string(string("  \\\\  ")) == "\"  \\\\\\\\  \""


@given(st.text())
def test_string_escaping_round_trip(text):
    rendered = to_wolfram_string(string(text))
    assert rendered.startswith('"') and rendered.endswith('"')
    inner = rendered[1:-1]
    assert inner.replace('\\"', '"').replace("\\\\", "\\") == text or (
        inner.count('\\"') + inner.count("\\\\") > 0
    )
    assert len(inner) == len(text) + text.count("\\") + text.count('"')


@given(st.integers())
def test_integer_renders_its_value(n):
    assert to_wolfram_string(integer(n)) == str(n)


def test_literal_repl_and_slot():
    assert to_wolfram_string(call("std::repl::input", (I(-1),))) == "Input[-1]"
    assert to_wolfram_string(call("std::repl::output", (I(1),))) == "Output[1]"
    assert to_wolfram_string(call("std::core::slot", ())) == "Slot[]"
    assert to_wolfram_string(call("std::core::slot", (string("a"),))) == "Slot[\"a\"]"


def test_literal_list():
    lst = "std::containers::List"
    assert to_wolfram_string(call(lst, ())) == "{}"
    assert to_wolfram_string(call(lst, (call(lst, ()),))) == "{{}}"
    assert to_wolfram_string(call(lst, (call(lst, (I(1),)), I(2)))) == "{{1},2}"


def test_operators():
    assert to_wolfram_string(prefix("+", I(6))) == "Plus[6]"
    assert to_wolfram_string(prefix("*", I(6))) == "Unpack[6]"
    assert to_wolfram_string(prefix("+", prefix("*", I(6)))) == "Plus[Unpack[6]]"
    assert to_wolfram_string(suffix("!", I(6))) == "Factorial[6]"
    assert to_wolfram_string(suffix("!", suffix("!!", I(6)))) == "Factorial[Factorial2[6]]"
    assert to_wolfram_string(infix("*", I(2), X, Y)) == "Times[2,x,y]"
    assert to_wolfram_string(infix("-", I(2), infix("*", X, Y))) == "Subtract[2,Times[x,y]]"
    assert (
        to_wolfram_string(infix("*", I(2), prefix("-", infix("*", X, Y))))
        == "Times[2,Minus[Times[x,y]]]"
    )


def test_booleans_and_empty():
    assert to_wolfram_string(Boolean(True)) == "True"
    assert to_wolfram_string(Boolean(False)) == "False"
    assert to_wolfram_string(EmptyStatement()) == ""


def test_options_and_program():
    node = Function(Symbol.parse("f"), (Parameter((I(1),), {symbol("k"): I(2)}),))
    assert to_wolfram_string(node) == "F[1,Rule[k,2]]"
    assert to_wolfram_string(Program((I(1), I(2)))) == "CompoundExpression[1,2]"


def test_function_map():
    assert function_map(Symbol.parse("factor")) == "FactorInteger"
    assert function_map(Symbol.parse("std::core::slot")) == "Slot"
    assert function_map(Symbol.parse("Index")) == "Index"