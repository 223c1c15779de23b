"""Basic list construction, access and manipulation."""

from __future__ import annotations

from typing import Any


from lispkit.values import LispError


def _require_list(message: str, value: Any) -> list:
    if not isinstance(value, list):
        raise LispError(f"{message}, got {type(value).__name__}")
    return value


def make_list(*args: Any) -> list:
    """Return a new list of the arguments."""
    return list(args)


def first(items: Any) -> Any:
    """Return the first element of a non-empty list."""
    values = _require_list("first requires a list", items)
    if not values:
        raise LispError("first: list is empty")
    return values[0]


def rest(items: Any) -> list:
    """Return all but the first element of a non-empty list."""
    values = _require_list("rest requires a list", items)
    if not values:
        raise LispError("rest: list is empty")
    return values[1:]


def cons(item: Any, items: Any) -> list:
    """Return a new list with ``item`` in front of ``items``."""
    values = _require_list("cons second argument must be a list", items)
    return [item, *values]


def length(items: Any) -> int:
    """Return the number of elements in a list."""
    return len(_require_list("length requires a list", items))


def is_empty(items: Any) -> bool:
    """Return whether a list has no elements."""
    return not _require_list("empty? requires a list", items)


def append(first_items: Any, second_items: Any) -> list:
    """Return a new list of both lists' elements."""
    head = _require_list("append first argument must be a list", first_items)
    tail = _require_list("append second argument must be a list", second_items)
    return [*head, *tail]


def reverse(items: Any) -> list:
    """Return a new list with the elements in reverse order."""
    return _require_list("reverse argument must be a list", items)[::-1]


def nth(index: Any, items: Any) -> Any:
    """Return the element at ``index``, which is truncated to an integer."""
    if isinstance(index, bool) or not isinstance(index, (int, float)):
        raise LispError(f"nth first argument must be a number, got {type(index).__name__}")
    values = _require_list("nth second argument must be a list", items)
    position = int(index)
    if position < 0:
        raise LispError(f"nth index cannot be negative: {position}")
    if position >= len(values):
        raise LispError(
            f"nth index {position} out of bounds for list of length {len(values)}"
        )
    return values[position]


def last(items: Any) -> Any:
    """Return the last element of a non-empty list."""
    values = _require_list("last requires a list", items)
    if not values:
        raise LispError("last: list is empty")
    return values[-1]


def butlast(items: Any) -> list:
    """Return all but the last element; an empty list stays empty."""
    return _require_list("butlast requires a list", items)[:-1]