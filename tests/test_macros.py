from collections import ChainMap

import pytest

from lispkit.macros import (
    BigNumberExpr,
    BooleanExpr,
    BracketExpr,
    KeywordExpr,
    ListExpr,
    Macro,
    NumberExpr,
    QuotedValue,
    StringExpr,
    SymbolExpr,
    define_macro,
    expand_macro,
    lookup_macro,
    quote,
    value_to_expr,
)
from lispkit.values import NIL, Keyword, LispError, format_value


def sym(name):
    return SymbolExpr(name)


def q(name):
    return ListExpr([sym("quote"), sym(name)])


def call(*elements):
    return ListExpr(list(elements))


def _evaluate(expr, env):
    """A tiny evaluator knowing only symbols, quote and list."""
    if isinstance(expr, SymbolExpr):
        if expr.name not in env:
            raise LispError(f"undefined symbol: {expr.name}")
        return env[expr.name]
    if isinstance(expr, ListExpr):
        head = expr.elements[0].name
        if head == "quote":
            return quote(expr.elements[1])
        if head == "list":
            return [_evaluate(item, env) for item in expr.elements[1:]]
        raise LispError(f"unknown form: {head}")
    return quote(expr)


def make_evaluator(namespace):
    return lambda body, bindings: _evaluate(body, ChainMap(bindings, namespace))


def test_defmacro_simple():
    namespace = {}
    macro = define_macro(
        [sym("when"), BracketExpr([sym("condition"), sym("body")]),
         call(sym("list"), q("if"), sym("condition"), sym("body"), q("nil"))],
        namespace,
    )
    assert str(macro) == "#<macro([condition body])>"
    assert lookup_macro(namespace, "when") is macro


def test_defmacro_multiple_parameters():
    macro = define_macro(
        [sym("unless"), BracketExpr([sym("condition"), sym("then"), sym("else")]),
         call(sym("list"), q("if"), sym("condition"), sym("else"), sym("then"))],
        {},
    )
    assert str(macro) == "#<macro([condition then else])>"


def test_defmacro_uses_last_body_expression():
    macro = define_macro([sym("m"), BracketExpr([sym("x")]), NumberExpr(1), NumberExpr(2)], {})
    assert macro.body == NumberExpr(2)


def test_when_expansion():
    namespace = {}
    macro = define_macro(
        [sym("when"), BracketExpr([sym("condition"), sym("body")]),
         call(sym("list"), q("if"), sym("condition"), sym("body"), q("nil"))],
        namespace,
    )
    condition = call(sym(">"), NumberExpr(5), NumberExpr(3))
    result = expand_macro(macro, [condition, NumberExpr(42)], make_evaluator(namespace))
    assert result == ListExpr([
        sym("if"),
        ListExpr([sym(">"), NumberExpr(5.0), NumberExpr(3.0)]),
        NumberExpr(42.0),
        sym("nil"),
    ])


def test_unless_expansion_swaps_branches():
    namespace = {}
    macro = define_macro(
        [sym("unless"), BracketExpr([sym("condition"), sym("then"), sym("else")]),
         call(sym("list"), q("if"), sym("condition"), sym("else"), sym("then"))],
        namespace,
    )
    condition = call(sym("<"), NumberExpr(5), NumberExpr(3))
    result = expand_macro(
        macro, [condition, NumberExpr(42), NumberExpr(99)], make_evaluator(namespace)
    )
    assert result.elements[2] == NumberExpr(99.0)
    assert result.elements[3] == NumberExpr(42.0)


def test_let1_expansion_builds_bracket_parameters():
    namespace = {}
    macro = define_macro(
        [sym("let1"), BracketExpr([sym("var"), sym("value"), sym("body")]),
         call(sym("list"),
              call(sym("list"), q("fn"), call(sym("list"), sym("var")), sym("body")),
              sym("value"))],
        namespace,
    )
    body = call(sym("+"), sym("x"), NumberExpr(5))
    result = expand_macro(macro, [sym("x"), NumberExpr(10), body], make_evaluator(namespace))
    assert result == ListExpr([
        ListExpr([sym("fn"), BracketExpr([sym("x")]),
                  ListExpr([sym("+"), sym("x"), NumberExpr(5.0)])]),
        NumberExpr(10.0),
    ])


def test_nested_quote_expansion():
    namespace = {}
    macro = define_macro(
        [sym("debug"), BracketExpr([sym("expr")]),
         call(sym("list"), q("list"),
              call(sym("list"), q("quote"), sym("expr")), sym("expr"))],
        namespace,
    )
    expr = call(sym("+"), NumberExpr(2), NumberExpr(3))
    result = expand_macro(macro, [expr], make_evaluator(namespace))
    assert result == ListExpr([
        sym("list"),
        ListExpr([sym("quote"), ListExpr([sym("+"), NumberExpr(2.0), NumberExpr(3.0)])]),
        ListExpr([sym("+"), NumberExpr(2.0), NumberExpr(3.0)]),
    ])


def test_variadic_parameter_collects_arguments():
    macro = Macro(params=("exprs",), body=sym("exprs"))
    result = expand_macro(
        macro, [NumberExpr(1), NumberExpr(2), NumberExpr(3)], make_evaluator({})
    )
    assert result == ListExpr([NumberExpr(1.0), NumberExpr(2.0), NumberExpr(3.0)])


def test_wrong_argument_count():
    macro = Macro(params=("a", "b"), body=sym("a"))
    with pytest.raises(LispError) as info:
        expand_macro(macro, [NumberExpr(1)], make_evaluator({}))
    assert str(info.value) == "macro [a b] expects 2 arguments, got 1"


def test_single_non_variadic_parameter_rejects_extra_arguments():
    macro = Macro(params=("x",), body=sym("x"))
    with pytest.raises(LispError, match="expects 1 arguments, got 2"):
        expand_macro(macro, [NumberExpr(1), NumberExpr(2)], make_evaluator({}))


def test_expansion_error_is_wrapped():
    macro = Macro(params=("x",), body=sym("missing"))
    with pytest.raises(LispError) as info:
        expand_macro(macro, [NumberExpr(1)], make_evaluator({}))
    assert str(info.value).startswith("error expanding macro:")


@pytest.mark.parametrize(
    "args, message",
    [
        ([], "defmacro requires at least 3 arguments"),
        ([NumberExpr(123), BracketExpr([sym("x")]), sym("x")],
         "defmacro first argument must be a symbol"),
        ([sym("test"), sym("x"), sym("x")],
         "defmacro second argument must be a parameter list using square brackets"),
        ([sym("test"), BracketExpr([NumberExpr(123)]), NumberExpr(456)],
         "defmacro parameter must be a symbol"),
    ],
)
def test_defmacro_errors(args, message):
    with pytest.raises(LispError) as info:
        define_macro(args, {})
    assert message in str(info.value)


@pytest.mark.parametrize(
    "expr, expected",
    [
        (NumberExpr(42), "42"),
        (sym("foo"), "foo"),
        (ListExpr([NumberExpr(1), NumberExpr(2), NumberExpr(3)]), "(1 2 3)"),
        (ListExpr([sym("+"), NumberExpr(1), NumberExpr(2)]), "(+ 1 2)"),
    ],
)
def test_quote_prints(expr, expected):
    assert format_value(quote(expr)) == expected


def test_quote_literals():
    assert quote(StringExpr("hi")) == "hi"
    assert quote(BooleanExpr(True)) is True
    assert quote(KeywordExpr("k")) == Keyword("k")
    assert quote(sym("foo")) == QuotedValue(sym("foo"))
    assert quote(BigNumberExpr("123456789012345678901234567890")) == 123456789012345678901234567890


def test_quote_invalid_big_number():
    with pytest.raises(LispError, match="invalid big number"):
        quote(BigNumberExpr("12x"))


def test_quote_rejects_unknown_expression():
    with pytest.raises(LispError, match="cannot quote"):
        quote(object())


def test_value_to_expr_round_trip():
    expr = ListExpr([sym("+"), NumberExpr(1.0), StringExpr("a"), KeywordExpr("k"),
                     BooleanExpr(False)])
    assert value_to_expr(quote(expr)) == expr


def test_value_to_expr_special_values():
    assert value_to_expr(NIL) == sym("nil")
    assert value_to_expr([]) == ListExpr([])
    assert value_to_expr(2**60) == BigNumberExpr(str(2**60))
    assert value_to_expr(7) == NumberExpr(7.0)


def test_value_to_expr_rejects_unknown_value():
    with pytest.raises(LispError, match="cannot convert value"):
        value_to_expr(object())


def test_lookup_macro_ignores_other_values():
    assert lookup_macro({"x": 1}, "x") is None
    assert lookup_macro({}, "y") is None