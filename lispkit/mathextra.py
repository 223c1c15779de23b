"""Inverse and hyperbolic trigonometry, angle conversion, logarithms and rounding helpers."""

from __future__ import annotations

import math
from typing import Any

from lispkit.mathlib import _fmt, _number
from lispkit.values import LispError


def _unit_range(name: str, x: Any) -> float:
    num = _number(name, x)
    if num < -1 or num > 1:
        raise LispError(f"{name}: input must be in range [-1, 1], got {_fmt(num)}")
    return num


def _positive(name: str, x: Any) -> float:
    num = _number(name, x)
    if num <= 0:
        raise LispError(f"{name}: input must be positive, got {_fmt(num)}")
    return num


def asin(x: Any) -> float:
    """Return the arcsine of a number in [-1, 1]."""
    return math.asin(_unit_range("asin", x))


def acos(x: Any) -> float:
    """Return the arccosine of a number in [-1, 1]."""
    return math.acos(_unit_range("acos", x))


def atan(x: Any) -> float:
    """Return the arctangent."""
    return math.atan(_number("atan", x))


def atan2(y: Any, x: Any) -> float:
    """Return the arctangent of ``y / x``, taking the quadrant into account."""
    return math.atan2(_number("atan2 y", y), _number("atan2 x", x))


def sinh(x: Any) -> float:
    """Return the hyperbolic sine; overflow gives a signed infinity."""
    num = _number("sinh", x)
    try:
        return math.sinh(num)
    except OverflowError:
        return math.copysign(math.inf, num)


def cosh(x: Any) -> float:
    """Return the hyperbolic cosine; overflow gives infinity."""
    num = _number("cosh", x)
    try:
        return math.cosh(num)
    except OverflowError:
        return math.inf


def tanh(x: Any) -> float:
    """Return the hyperbolic tangent."""
    return math.tanh(_number("tanh", x))


def degrees(x: Any) -> float:
    """Convert radians to degrees."""
    return _number("degrees", x) * 180.0 / math.pi


def radians(x: Any) -> float:
    """Convert degrees to radians."""
    return _number("radians", x) * math.pi / 180.0


def log10(x: Any) -> float:
    """Return the base-10 logarithm of a positive number."""
    return math.log10(_positive("log10", x))


def log2(x: Any) -> float:
    """Return the base-2 logarithm of a positive number."""
    return math.log2(_positive("log2", x))


def trunc(x: Any) -> float:
    """Truncate towards zero."""
    num = _number("trunc", x)
    if not math.isfinite(num):
        return num
    return math.copysign(float(math.trunc(num)), num)


def sign(x: Any) -> float:
    """Return -1, 0 or 1 according to the sign of the number."""
    num = _number("sign", x)
    if num > 0:
        return 1.0
    if num < 0:
        return -1.0
    return 0.0


def mod(x: Any, y: Any) -> float:
    """Return the remainder of ``x / y`` with the sign of the divisor."""
    dividend = _number("mod x", x)
    divisor = _number("mod y", y)
    if divisor == 0:
        raise LispError("mod: division by zero")
    try:
        result = math.fmod(dividend, divisor)
    except ValueError:
        return math.nan
    if (result < 0 < divisor) or (result > 0 > divisor):
        result += divisor
    return result