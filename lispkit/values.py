"""Runtime values shared by the built-in functions, and how they print."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Callable


class LispError(Exception):
    """Raised when a built-in function is given arguments it cannot work with."""


@dataclass(frozen=True)
class Keyword:
    """A keyword such as ``:name``; ``name`` holds the text without the colon."""

    name: str

    def __str__(self) -> str:
        return ":" + self.name


class NilType:
    """The type of the single ``nil`` value."""

    _instance: NilType | None = None

    def __new__(cls) -> NilType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "nil"

    __str__ = __repr__


NIL = NilType()


@dataclass(frozen=True)
class Function:
    """A callable with named parameters and a fixed arity."""

    params: tuple[str, ...]
    body: Callable[..., Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(self.params))

    def __call__(self, *args: Any) -> Any:
        if len(args) != len(self.params):
            raise LispError(
                f"function expects {len(self.params)} arguments, got {len(args)}"
            )
        return self.body(*args)


def is_truthy(value: Any) -> bool:
    """Return whether a value counts as true in a condition."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value != ""
    if isinstance(value, list):
        return len(value) > 0
    return True


def format_value(value: Any) -> str:
    """Return the printed representation of a value."""
    if value is NIL:
        return "nil"
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return "%.0f" % float(value)
    if isinstance(value, list):
        return "(" + " ".join(format_value(item) for item in value) + ")"
    if isinstance(value, Function):
        return f"#<function([[{' '.join(value.params)}]])>"
    if isinstance(value, dict):
        body = ", ".join(f"{key}: {format_value(item)}" for key, item in value.items())
        return "{" + body + "}"
    return str(value)


def print_values(*args: Any) -> NilType:
    """Write the values to standard output, separated by spaces, without a newline."""
    if args:
        sys.stdout.write(" ".join(format_value(arg) for arg in args))
    return NIL


def println_values(*args: Any) -> NilType:
    """Write the values to standard output, separated by spaces, then a newline."""
    sys.stdout.write(" ".join(format_value(arg) for arg in args) + "\n")
    return NIL