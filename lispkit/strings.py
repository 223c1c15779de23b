"""String manipulation, conversion and regular-expression functions."""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any

from lispkit.values import LispError, format_value

_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_EXPONENT_THRESHOLD = 6
_EXACT_INT_LIMIT = 2**53


def _type_name(value: Any) -> str:
    return type(value).__name__


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _require_string(message: str, value: Any) -> str:
    if not isinstance(value, str):
        raise LispError(f"{message}, got {_type_name(value)}")
    return value


def _require_number(message: str, value: Any) -> int | float:
    if not _is_number(value):
        raise LispError(f"{message}, got {_type_name(value)}")
    return value


def _format_float(number: float) -> str:
    """Format with the shortest digits that round-trip, in ``%g`` style."""
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"
    if number == 0:
        return "-0" if math.copysign(1.0, number) < 0 else "0"

    sign, digit_tuple, exponent = Decimal(repr(number)).as_tuple()
    raw = "".join(map(str, digit_tuple))
    digits = raw.rstrip("0")
    exponent += len(raw) - len(digits)
    point = len(digits) + exponent
    prefix = "-" if sign else ""

    power = point - 1
    if power < -4 or power >= _EXPONENT_THRESHOLD:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "-" if power < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(power):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return f"{prefix}{digits}{'0' * (point - len(digits))}"
    return f"{prefix}{digits[:point]}.{digits[point:]}"


def _format_number(number: int | float) -> str:
    if isinstance(number, int) and abs(number) > _EXACT_INT_LIMIT:
        return str(number)
    return _format_float(float(number))


def _to_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if _is_number(value):
        return _format_number(value)
    if isinstance(value, list):
        return "(" + " ".join(_to_text(item) for item in value) + ")"
    return format_value(value)


def string_concat(*args: Any) -> str:
    """Join the text forms of all arguments."""
    return "".join(_to_text(arg) for arg in args)


def string_length(text: Any) -> int:
    """Return the number of characters in a string."""
    return len(_require_string("string-length argument must be a string", text))


def string_substring(text: Any, start: Any, end: Any) -> str:
    """Return the characters from ``start`` up to but not including ``end``."""
    value = _require_string("string-substring first argument must be a string", text)
    first = int(_require_number("string-substring second argument must be a number", start))
    stop = int(_require_number("string-substring third argument must be a number", end))
    if first < 0 or stop < 0 or first > len(value) or stop > len(value) or first > stop:
        raise LispError("string-substring indices out of bounds")
    return value[first:stop]


def string_char_at(text: Any, index: Any) -> str:
    """Return the one-character string at ``index``."""
    value = _require_string("string-char-at first argument must be a string", text)
    position = int(_require_number("string-char-at second argument must be a number", index))
    if position < 0 or position >= len(value):
        raise LispError("string-char-at index out of bounds")
    return value[position]


def string_upper(text: Any) -> str:
    """Return the string in upper case."""
    return _require_string("string-upper argument must be a string", text).upper()


def string_lower(text: Any) -> str:
    """Return the string in lower case."""
    return _require_string("string-lower argument must be a string", text).lower()


def string_trim(text: Any) -> str:
    """Return the string without leading and trailing whitespace."""
    return _require_string("string-trim argument must be a string", text).strip()


def string_split(text: Any, separator: Any) -> list:
    """Split on every occurrence of ``separator``; an empty one splits into characters."""
    value = _require_string("string-split first argument must be a string", text)
    sep = _require_string("string-split second argument must be a string", separator)
    if sep == "":
        return list(value)
    return value.split(sep)


def string_join(items: Any, separator: Any) -> str:
    """Join the text forms of the list's elements with ``separator``."""
    if not isinstance(items, list):
        raise LispError(f"string-join first argument must be a list, got {_type_name(items)}")
    sep = _require_string("string-join second argument must be a string", separator)
    return sep.join(_to_text(item) for item in items)


def string_contains(text: Any, substring: Any) -> bool:
    """Return whether ``substring`` occurs in the string."""
    value = _require_string("string-contains? first argument must be a string", text)
    part = _require_string("string-contains? second argument must be a string", substring)
    return part in value


def string_starts_with(text: Any, prefix: Any) -> bool:
    """Return whether the string begins with ``prefix``."""
    value = _require_string("string-starts-with? first argument must be a string", text)
    head = _require_string("string-starts-with? second argument must be a string", prefix)
    return value.startswith(head)


def string_ends_with(text: Any, suffix: Any) -> bool:
    """Return whether the string ends with ``suffix``."""
    value = _require_string("string-ends-with? first argument must be a string", text)
    tail = _require_string("string-ends-with? second argument must be a string", suffix)
    return value.endswith(tail)


def string_replace(text: Any, old: Any, new: Any) -> str:
    """Replace every occurrence of ``old`` with ``new``."""
    value = _require_string("string-replace first argument must be a string", text)
    target = _require_string("string-replace second argument must be a string", old)
    replacement = _require_string("string-replace third argument must be a string", new)
    return value.replace(target, replacement)


def string_index_of(text: Any, substring: Any) -> int:
    """Return the position of the first occurrence of ``substring``, or -1."""
    value = _require_string("string-index-of first argument must be a string", text)
    part = _require_string("string-index-of second argument must be a string", substring)
    return value.find(part)


def string_to_number(text: Any) -> float:
    """Parse a decimal floating-point number."""
    value = _require_string("string->number argument must be a string", text)
    if not _FLOAT_PATTERN.fullmatch(value):
        raise LispError(f"string->number: invalid number format '{value}'")
    try:
        return float(value)
    except ValueError as exc:
        raise LispError(f"string->number: invalid number format '{value}'") from exc


def number_to_string(number: Any) -> str:
    """Return the shortest text that reads back as the same number."""
    if not _is_number(number):
        raise LispError(f"number->string argument must be a number, got {_type_name(number)}")
    return _format_number(number)


def _compile(name: str, pattern: str) -> re.Pattern:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise LispError(f"{name}: invalid regex pattern '{pattern}': {exc}") from exc


def string_regex_match(text: Any, pattern: Any) -> bool:
    """Return whether ``pattern`` matches anywhere in the string."""
    value = _require_string("string-regex-match? first argument must be a string", text)
    source = _require_string("string-regex-match? second argument must be a string", pattern)
    return _compile("string-regex-match?", source).search(value) is not None


def string_regex_find_all(text: Any, pattern: Any) -> list:
    """Return every non-overlapping match of ``pattern`` in the string."""
    value = _require_string("string-regex-find-all first argument must be a string", text)
    source = _require_string("string-regex-find-all second argument must be a string", pattern)
    return [match.group(0) for match in _compile("string-regex-find-all", source).finditer(value)]


def string_repeat(text: Any, count: Any) -> str:
    """Return the string repeated ``count`` times."""
    value = _require_string("string-repeat first argument must be a string", text)
    times = _require_number("string-repeat second argument must be a number", count)
    if times < 0:
        raise LispError("string-repeat count must be non-negative")
    return value * int(times)


def is_string(value: Any) -> bool:
    """Return whether the value is a string."""
    return isinstance(value, str)


def string_empty(text: Any) -> bool:
    """Return whether the string has no characters."""
    return _require_string("string-empty? argument must be a string", text) == ""