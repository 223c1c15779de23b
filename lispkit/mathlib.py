"""Core numeric functions: roots, powers, trigonometry, rounding and random numbers."""

from __future__ import annotations

import math
import random
from typing import Any, Callable

from lispkit.values import LispError

_rng = random.Random()


def _fmt(number: float) -> str:
    """Format a number for an error message, without a trailing ``.0``."""
    if math.isfinite(number) and number == int(number) and abs(number) < 1e21:
        return str(int(number))
    return repr(number)


def to_float(value: Any) -> float:
    """Return a number argument as a float; anything else is an error."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LispError(f"expected number, got {type(value).__name__}")
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _number(name: str, value: Any) -> float:
    try:
        return to_float(value)
    except LispError as exc:
        raise LispError(f"{name}: {exc}") from exc


def _unary(func: Callable[[float], float], x: float) -> float:
    """Apply a math function, giving NaN where the domain is not covered."""
    try:
        return float(func(x))
    except ValueError:
        return math.nan


def _is_integral(number: float) -> bool:
    return math.isfinite(number) and number == math.trunc(number)


def sqrt(x: Any) -> float:
    """Return the square root of a non-negative number."""
    num = _number("sqrt", x)
    if num < 0:
        raise LispError(
            f"sqrt: cannot compute square root of negative number: {_fmt(num)}"
        )
    return math.sqrt(num)


def power(base: Any, exponent: Any) -> float:
    """Return ``base`` raised to ``exponent``; NaN or infinite results are errors."""
    b = _number("pow base", base)
    x = _number("pow exponent", exponent)
    try:
        result = math.pow(b, x)
    except OverflowError:
        raise LispError("pow: result is infinite") from None
    except ValueError:
        if b == 0 and x < 0:
            raise LispError("pow: result is infinite") from None
        raise LispError("pow: result is not a number") from None
    if math.isnan(result):
        raise LispError("pow: result is not a number")
    if math.isinf(result):
        raise LispError("pow: result is infinite")
    return result


def sin(x: Any) -> float:
    """Return the sine of an angle in radians."""
    return _unary(math.sin, _number("sin", x))


def cos(x: Any) -> float:
    """Return the cosine of an angle in radians."""
    return _unary(math.cos, _number("cos", x))


def tan(x: Any) -> float:
    """Return the tangent of an angle in radians; values near an asymptote are errors."""
    result = _unary(math.tan, _number("tan", x))
    if abs(result) > 1e15:
        raise LispError("tan: result too large (near asymptote)")
    return result


def log(x: Any) -> float:
    """Return the natural logarithm of a positive number."""
    num = _number("log", x)
    if num <= 0:
        raise LispError(
            f"log: cannot compute logarithm of non-positive number: {_fmt(num)}"
        )
    return _unary(math.log, num)


def exp(x: Any) -> float:
    """Return e raised to ``x``; overflow is an error."""
    num = _number("exp", x)
    try:
        result = math.exp(num)
    except OverflowError:
        raise LispError("exp: result is infinite (overflow)") from None
    if math.isinf(result):
        raise LispError("exp: result is infinite (overflow)")
    return result


def floor(x: Any) -> float:
    """Return the largest integer not greater than ``x``."""
    num = _number("floor", x)
    if not math.isfinite(num):
        return num
    return float(math.floor(num))


def ceil(x: Any) -> float:
    """Return the smallest integer not less than ``x``."""
    num = _number("ceil", x)
    if not math.isfinite(num):
        return num
    return float(math.ceil(num))


def round_number(x: Any) -> float:
    """Round to the nearest integer, halves away from zero."""
    num = _number("round", x)
    if not math.isfinite(num):
        return num
    whole = float(math.trunc(num))
    if abs(num - whole) >= 0.5:
        whole += math.copysign(1.0, num)
    return math.copysign(whole, num) if whole == 0 else whole


def absolute(x: Any) -> float:
    """Return the absolute value."""
    return math.fabs(_number("abs", x))


def minimum(a: Any, b: Any) -> float:
    """Return the smaller of two numbers; NaN if either is NaN."""
    x = _number("min first argument", a)
    y = _number("min second argument", b)
    if math.isnan(x) or math.isnan(y):
        return math.nan
    return min(x, y)


def maximum(a: Any, b: Any) -> float:
    """Return the larger of two numbers; NaN if either is NaN."""
    x = _number("max first argument", a)
    y = _number("max second argument", b)
    if math.isnan(x) or math.isnan(y):
        return math.nan
    return max(x, y)


def random_number(*args: Any) -> float:
    """Return a random float in [0, 1), an integer in [0, n) or one in [min, max)."""
    if not args:
        return _rng.random()
    if len(args) == 1:
        num = _number("random", args[0])
        if num <= 0:
            raise LispError(f"random: upper bound must be positive, got {_fmt(num)}")
        if not _is_integral(num):
            raise LispError(f"random: upper bound must be an integer, got {_fmt(num)}")
        return float(_rng.randrange(int(num)))
    if len(args) == 2:
        low = _number("random min", args[0])
        high = _number("random max", args[1])
        if not _is_integral(low):
            raise LispError(f"random: min must be an integer, got {_fmt(low)}")
        if not _is_integral(high):
            raise LispError(f"random: max must be an integer, got {_fmt(high)}")
        if high <= low:
            raise LispError(
                "random: max must be greater than min, "
                f"got min={_fmt(low)} max={_fmt(high)}"
            )
        return float(_rng.randrange(int(low), int(high)))
    raise LispError(f"random requires 0, 1, or 2 arguments, got {len(args)}")


def pi() -> float:
    """Return the constant pi."""
    return math.pi


def e() -> float:
    """Return Euler's number."""
    return math.e