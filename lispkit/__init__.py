"""Runtime building blocks for a small Lisp: values, lists, hash maps, strings, math, macros and modules."""

__version__ = "0.1.0"