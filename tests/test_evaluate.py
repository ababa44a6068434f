import pytest
from hypothesis import given
from hypothesis import strategies as st

from simplemath import internal
from simplemath.ast import (
    Boolean,
    EmptyStatement,
    Function,
    Parameter,
    Program,
    Symbol,
    SymbolAtom,
    decimal,
    integer,
    string,
    symbol,
)
from simplemath.errors import EmptyContainerError, SMComplexInfinity, SMUnimplemented
from simplemath.evaluate import Context, forward, rewrite
from simplemath.ops import infix_map, suffix_map


def call(name, *args):
    return Function(Symbol.parse(name), (Parameter(tuple(args)),))


@pytest.mark.parametrize(
    "node",
    [EmptyStatement(), Boolean(False), integer(7), decimal("1.25"), symbol("x"), string("hi")],
)
def test_atoms_evaluate_to_themselves(node):
    assert forward(node, Context()) == node


def test_call_without_parameters_becomes_symbol():
    s = Symbol.parse("std::f")
    assert forward(Function(s, ()), Context()) == SymbolAtom(s)


def test_factorial_call():
    assert forward(call("factorial", integer(10)), Context()) == integer(3628800)


def test_suffix_factorial_symbol_is_evaluated():
    node = Function(suffix_map("!"), (Parameter((integer(10),)),))
    assert forward(node, Context()) == internal.factorial(integer(10))


def test_fibonacci_call():
    result = forward(call("fibonacci", integer(100)), Context())
    assert result == integer(354224848179261915075)


def test_string_builtins_match_internal():
    s = string("word")
    for name, func in [("first", internal.first), ("last", internal.last), ("length", internal.length)]:
        assert forward(call(name, s), Context()) == func(s)


def test_first_of_empty_string_raises():
    with pytest.raises(EmptyContainerError):
        forward(call("first", string("")), Context())


def test_factorial_negative_raises():
    with pytest.raises(SMComplexInfinity):
        forward(call("factorial", integer(-3)), Context())


@given(st.integers(-10**6, 10**6))
def test_plus_zero_is_identity(a):
    assert forward(call("plus", integer(a), integer(0)), Context()) == integer(a)


@given(st.integers(-10**6, 10**6), st.integers(-10**6, 10**6))
def test_times_commutes(a, b):
    ctx = Context()
    assert forward(call("times", integer(a), integer(b)), ctx) == forward(
        call("times", integer(b), integer(a)), ctx
    )


def test_infix_times_symbol_multiplies():
    node = Function(infix_map("*"), (Parameter((integer(6), integer(1))),))
    assert forward(node, Context()) == integer(6)


def test_infix_add_symbol_is_not_a_builtin():
    node = Function(infix_map("+"), (Parameter((integer(1), integer(2))),))
    with pytest.raises(SMUnimplemented):
        forward(node, Context())


@given(st.integers(-1000, 1000))
def test_power_one_and_negative_exponent(a):
    assert forward(call("power", integer(a), integer(1)), Context()) == integer(a)
    assert forward(call("power", integer(a), integer(-2)), Context()) == integer(a)


def test_power_value():
    assert forward(call("power", integer(2), integer(10)), Context()) == integer(1024)


@pytest.mark.parametrize(
    "node",
    [
        Program((integer(1),)),
        call("unknown", integer(1)),
        call("plus", integer(1), string("a")),
        call("times", integer(1), integer(2), integer(3)),
        call("factorial"),
        Function(Symbol.parse("f"), (Parameter((integer(1),)), Parameter((integer(2),)))),
    ],
)
def test_unimplemented_cases(node):
    with pytest.raises(SMUnimplemented):
        forward(node, Context())


def test_forward_leaves_context_untouched():
    ctx = Context()
    forward(call("times", integer(2), integer(3)), ctx)
    assert ctx == Context()


@pytest.mark.parametrize("node", [integer(3), call("f", symbol("x")), string("s")])
def test_rewrite_is_identity(node):
    assert rewrite(node) == node


def test_context_records_entries():
    ctx = Context()
    ctx.index += 1
    ctx.inputs[ctx.index] = "2*3"
    ctx.outputs[ctx.index] = forward(call("times", integer(2), integer(3)), ctx)
    assert ctx.outputs[1] == forward(call("times", integer(3), integer(2)), Context())
    assert ctx.inputs == {1: "2*3"}