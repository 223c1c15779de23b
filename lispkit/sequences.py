"""Higher-order list functions and list reshaping."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Optional

from lispkit.values import Function, LispError, format_value, is_truthy


def _type_name(value: Any) -> str:
    return type(value).__name__


def _require_list(message: str, value: Any) -> list:
    if not isinstance(value, list):
        raise LispError(f"{message}, got {_type_name(value)}")
    return value


def _require_function(name: str, position: str, value: Any, arity: int) -> Function:
    if not isinstance(value, Function):
        raise LispError(f"{name} {position} argument must be a function, got {_type_name(value)}")
    if len(value.params) != arity:
        noun = "parameter" if arity == 1 else "parameters"
        raise LispError(
            f"{name} function must take exactly {arity} {noun}, got {len(value.params)}"
        )
    return value


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def map_list(function: Any, items: Any) -> list:
    """Return a new list of ``function`` applied to each element."""
    values = _require_list("map second argument must be a list", items)
    func = _require_function("map", "first", function, 1)
    return [func(item) for item in values]


def filter_list(function: Any, items: Any) -> list:
    """Return the elements for which ``function`` gives a truthy result."""
    values = _require_list("filter second argument must be a list", items)
    func = _require_function("filter", "first", function, 1)
    return [item for item in values if is_truthy(func(item))]


def reduce_list(function: Any, initial: Any, items: Any) -> Any:
    """Fold ``function`` over the list, starting from ``initial``."""
    values = _require_list("reduce third argument must be a list", items)
    func = _require_function("reduce", "first", function, 2)
    accumulator = initial
    for item in values:
        accumulator = func(accumulator, item)
    return accumulator


def _flatten(values: list):
    for item in values:
        if isinstance(item, list):
            yield from _flatten(item)
        else:
            yield item


def flatten(items: Any) -> list:
    """Return the elements of all nested lists as one flat list."""
    return list(_flatten(_require_list("flatten requires a list", items)))


def zip_lists(*args: Any) -> list:
    """Return lists of corresponding elements, as long as the shortest list."""
    if len(args) < 2:
        raise LispError("zip requires at least 2 arguments")
    lists = [_require_list("zip arguments must be lists", arg) for arg in args]
    return [list(group) for group in zip(*lists)]


def default_less(a: Any, b: Any) -> bool:
    """Order numbers numerically, strings lexically, and others by printed form."""
    if _is_number(a) and _is_number(b):
        return a < b
    if isinstance(a, str) and isinstance(b, str):
        return a < b
    return format_value(a) < format_value(b)


def sort_list(items: Any, comparator: Optional[Any] = None) -> list:
    """Return a sorted copy of the list, using ``comparator`` as a less-than test."""
    values = _require_list("sort first argument must be a list", items)

    if comparator is None:
        less = default_less
    else:
        func = _require_function("sort", "second", comparator, 2)
        if len(func.params) != 2:
            raise LispError(
                f"sort comparator function must take exactly 2 parameters, got {len(func.params)}"
            )

        def less(a: Any, b: Any) -> bool:
            try:
                return is_truthy(func(a, b))
            except LispError:
                return False

    def compare(a: Any, b: Any) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    return sorted(values, key=cmp_to_key(compare))


def distinct(items: Any) -> list:
    """Return the elements without repeats, judged by printed form, keeping first seen."""
    values = _require_list("distinct requires a list", items)
    seen: set[str] = set()
    result = []
    for item in values:
        key = format_value(item)
        if key not in seen:
            seen.add(key)
            result.append(item)
    return result


def concat(*args: Any) -> list:
    """Return one list of the elements of all the given lists."""
    result: list = []
    for arg in args:
        result.extend(_require_list("concat arguments must be lists", arg))
    return result


def partition(size: Any, items: Any) -> list:
    """Split the list into chunks of ``size``; the last chunk may be shorter."""
    if not _is_number(size):
        raise LispError(f"partition first argument must be a number, got {_type_name(size)}")
    values = _require_list("partition second argument must be a list", items)
    chunk = int(size)
    if chunk <= 0:
        raise LispError(f"partition size must be positive, got {chunk}")
    return [values[start:start + chunk] for start in range(0, len(values), chunk)]