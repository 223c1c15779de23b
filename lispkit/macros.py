"""Expression nodes, quoting, and macro definition and expansion."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, MutableMapping, Optional, Union

from lispkit.values import NIL, Keyword, LispError

_VARIADIC_PARAMS = frozenset({"exprs", "expressions", "clauses"})
_EXACT_INT_LIMIT = 2**53


@dataclass
class NumberExpr:
    """A numeric literal."""

    value: float

    def __str__(self) -> str:
        return repr(self.value)


@dataclass
class BigNumberExpr:
    """An integer literal too large for a float, held as its digits."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class StringExpr:
    """A string literal."""

    value: str

    def __str__(self) -> str:
        return '"' + self.value + '"'


@dataclass
class BooleanExpr:
    """A boolean literal."""

    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass
class KeywordExpr:
    """A keyword literal; ``value`` is the text without the colon."""

    value: str

    def __str__(self) -> str:
        return ":" + self.value


@dataclass
class SymbolExpr:
    """A symbol."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass
class ListExpr:
    """A parenthesised form."""

    elements: list = field(default_factory=list)

    def __str__(self) -> str:
        return "(" + " ".join(str(item) for item in self.elements) + ")"


@dataclass
class BracketExpr:
    """A square-bracketed form, as used for parameter lists."""

    elements: list = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + " ".join(str(item) for item in self.elements) + "]"


Expr = Union[
    NumberExpr, BigNumberExpr, StringExpr, BooleanExpr,
    KeywordExpr, SymbolExpr, ListExpr, BracketExpr,
]


@dataclass
class QuotedValue:
    """A quoted symbol kept as an unevaluated expression."""

    value: Any

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class Macro:
    """A macro: parameter names, a body, and the namespace it was defined in."""

    params: tuple
    body: Any
    env: Any = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.params = tuple(self.params)

    def __str__(self) -> str:
        return f"#<macro([{' '.join(self.params)}])>"


def quote(expr: Any) -> Any:
    """Turn an expression into a value without evaluating it."""
    if isinstance(expr, NumberExpr):
        return float(expr.value)
    if isinstance(expr, BigNumberExpr):
        try:
            return int(expr.value)
        except ValueError:
            raise LispError(f"invalid big number: {expr.value}") from None
    if isinstance(expr, StringExpr):
        return expr.value
    if isinstance(expr, BooleanExpr):
        return bool(expr.value)
    if isinstance(expr, KeywordExpr):
        return Keyword(expr.value)
    if isinstance(expr, SymbolExpr):
        return QuotedValue(expr)
    if isinstance(expr, (ListExpr, BracketExpr)):
        return [quote(item) for item in expr.elements]
    raise LispError(f"cannot quote expression of type {type(expr).__name__}")


def value_to_expr(value: Any) -> Any:
    """Turn a value back into an expression; a non-empty list of symbols becomes a bracket form."""
    if isinstance(value, bool):
        return BooleanExpr(value)
    if isinstance(value, int):
        if abs(value) > _EXACT_INT_LIMIT:
            return BigNumberExpr(str(value))
        return NumberExpr(float(value))
    if isinstance(value, float):
        return NumberExpr(value)
    if isinstance(value, str):
        return StringExpr(value)
    if isinstance(value, Keyword):
        return KeywordExpr(value.name)
    if isinstance(value, list):
        elements = [value_to_expr(item) for item in value]
        if elements and all(isinstance(item, SymbolExpr) for item in elements):
            return BracketExpr(elements)
        return ListExpr(elements)
    if isinstance(value, QuotedValue):
        return value.value
    if value is NIL:
        return SymbolExpr("nil")
    raise LispError(
        f"cannot convert value of type {type(value).__name__} to expression"
    )


def define_macro(args: list, namespace: MutableMapping[str, Any]) -> Macro:
    """Define a macro from ``name [params...] body...`` and bind it in ``namespace``."""
    if len(args) < 3:
        raise LispError(
            "defmacro requires at least 3 arguments: name, parameters, and body"
        )
    name, params_expr = args[0], args[1]
    if not isinstance(name, SymbolExpr):
        raise LispError("defmacro first argument must be a symbol")
    if not isinstance(params_expr, BracketExpr):
        raise LispError(
            "defmacro second argument must be a parameter list using square brackets"
        )
    params = []
    for param in params_expr.elements:
        if not isinstance(param, SymbolExpr):
            raise LispError(
                f"defmacro parameter must be a symbol, got {type(param).__name__}"
            )
        params.append(param.name)
    macro = Macro(params=tuple(params), body=args[-1], env=namespace)
    namespace[name.name] = macro
    return macro


def _quote_argument(expr: Any) -> Any:
    try:
        return quote(expr)
    except LispError as exc:
        raise LispError(f"error preparing macro argument: {exc}") from exc


def _arity_error(macro: Macro, count: int) -> LispError:
    return LispError(
        f"macro [{' '.join(macro.params)}] expects {len(macro.params)} arguments, got {count}"
    )


def expand_macro(
    macro: Macro,
    args: list,
    evaluate: Callable[[Any, dict], Any],
) -> Any:
    """Expand a macro call into an expression.

    ``evaluate`` is called with the macro body and a dict binding each parameter
    to its quoted argument; it evaluates the body in a child of the caller's
    environment extended with those bindings.
    """
    bindings: dict[str, Any] = {}
    if len(macro.params) == 1 and len(args) > 1:
        if macro.params[0] not in _VARIADIC_PARAMS:
            raise _arity_error(macro, len(args))
        bindings[macro.params[0]] = [_quote_argument(arg) for arg in args]
    else:
        if len(args) != len(macro.params):
            raise _arity_error(macro, len(args))
        for param, arg in zip(macro.params, args):
            bindings[param] = _quote_argument(arg)

    try:
        expansion = evaluate(macro.body, bindings)
    except LispError as exc:
        raise LispError(f"error expanding macro: {exc}") from exc
    return value_to_expr(expansion)


def lookup_macro(namespace: MutableMapping[str, Any], name: str) -> Optional[Macro]:
    """Return the macro bound to ``name``, or None if the name is unbound or not a macro."""
    value = namespace.get(name)
    return value if isinstance(value, Macro) else None