# lispkit

lispkit holds the runtime pieces that a small Lisp interpreter is built from:
value types and printing, list and hash-map builtins, string and math
functions, quoting and macro expansion, and a module registry. Each builtin is
a plain Python function. When it is given arguments it cannot work with, it
raises `lispkit.values.LispError`.

It has no dependencies beyond the standard library.

## Install

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## How values are represented

Lisp values are ordinary Python objects:

| Lisp value | Python object |
| --- | --- |
| number | `int` or `float` |
| string | `str` |
| boolean | `bool` |
| list | `list` |
| hash map | `dict` with string keys |
| keyword | `lispkit.values.Keyword` (its `name` holds the text without the colon) |
| nil | `lispkit.values.NIL`, the single instance of `NilType` |
| function | `lispkit.values.Function(params, body)`, a callable that checks its arity |

`is_truthy` treats `false`, `0`, the empty string and the empty list as false.
Everything else counts as true, `nil` included. `format_value` gives the
printed form of a value, and numbers print with no decimal places.
`print_values` and `println_values` write to standard output and return `NIL`.

## Modules

| Module | Contents |
| --- | --- |
| `lispkit.values` | `LispError`, `Keyword`, `NilType`, `NIL`, `Function`, `is_truthy`, `format_value`, `print_values`, `println_values` |
| `lispkit.lists` | `make_list`, `first`, `rest`, `cons`, `length`, `is_empty`, `append`, `reverse`, `nth`, `last`, `butlast` |
| `lispkit.sequences` | `map_list`, `filter_list`, `reduce_list`, `flatten`, `zip_lists`, `sort_list`, `distinct`, `concat`, `partition`, `default_less` |
| `lispkit.hashmaps` | `make_hash_map`, `hash_map_get`, `hash_map_put`, `hash_map_remove`, `hash_map_contains`, `hash_map_keys`, `hash_map_values`, `hash_map_size`, `hash_map_empty`, `key_to_string` |
| `lispkit.strings` | `string_concat`, `string_length`, `string_substring`, `string_char_at`, `string_upper`, `string_lower`, `string_trim`, `string_split`, `string_join`, `string_contains`, `string_starts_with`, `string_ends_with`, `string_replace`, `string_index_of`, `string_to_number`, `number_to_string`, `string_regex_match`, `string_regex_find_all`, `string_repeat`, `is_string`, `string_empty` |
| `lispkit.mathlib` | `to_float`, `sqrt`, `power`, `sin`, `cos`, `tan`, `log`, `exp`, `floor`, `ceil`, `round_number`, `absolute`, `minimum`, `maximum`, `random_number`, `pi`, `e` |
| `lispkit.mathextra` | `asin`, `acos`, `atan`, `atan2`, `sinh`, `cosh`, `tanh`, `degrees`, `radians`, `log10`, `log2`, `trunc`, `sign`, `mod` |
| `lispkit.macros` | the expression classes `NumberExpr`, `BigNumberExpr`, `StringExpr`, `BooleanExpr`, `KeywordExpr`, `SymbolExpr`, `ListExpr`, `BracketExpr`, plus `QuotedValue`, `Macro`, `quote`, `value_to_expr`, `define_macro`, `expand_macro`, `lookup_macro` |
| `lispkit.modules` | `Module`, `ModuleRegistry`, `module_name_from_path` |

## Examples

Lists, hash maps and strings:

```python
from lispkit.hashmaps import make_hash_map, hash_map_get, hash_map_put
from lispkit.sequences import map_list, partition, sort_list
from lispkit.strings import number_to_string, string_concat, string_split
from lispkit.values import Function

m = make_hash_map("name", "Alice", "age", 30)
hash_map_get(m, "name")              # "Alice"
m2 = hash_map_put(m, "age", 31)      # a new dict; m is left unchanged

double = Function(("x",), lambda x: x * 2)
map_list(double, [1, 2, 3])          # [2, 4, 6]
sort_list([3, 1, 2])                 # [1, 2, 3]
partition(2, [1, 2, 3, 4, 5])        # [[1, 2], [3, 4], [5]]

string_split("a,b,c", ",")           # ["a", "b", "c"]
string_concat("Number: ", 42)        # "Number: 42"
number_to_string(42.5)               # "42.5"
```

Math:

```python
from lispkit.mathextra import mod
from lispkit.mathlib import random_number, sqrt

sqrt(16)                             # 4.0
mod(-7, 3)                           # 2.0, which takes the sign of the divisor
random_number(5, 15)                 # an integer-valued float in [5, 15)
```

Macros. `expand_macro` takes an `evaluate(body, bindings)` callback that
evaluates the macro body with each parameter bound to its quoted argument. It
turns the result back into an expression:

```python
from lispkit.macros import (
    BooleanExpr, BracketExpr, NumberExpr, SymbolExpr, define_macro, expand_macro,
)

namespace = {}
macro = define_macro(
    [SymbolExpr("pick"), BracketExpr([SymbolExpr("c"), SymbolExpr("b")]), SymbolExpr("b")],
    namespace,
)
str(macro)                           # "#<macro([c b])>"
expand_macro(
    macro,
    [BooleanExpr(True), NumberExpr(42.0)],
    lambda body, bindings: bindings[body.name],
)                                    # NumberExpr(value=42.0)
```

Modules. `require` takes a `loader(filename)` callback that reads and
evaluates the file, which defines modules in the registry:

```python
from lispkit.modules import ModuleRegistry

registry = ModuleRegistry()

def loader(filename):
    registry.define("shapes", {"square": lambda x: x * x}, ["square"])

namespace = {}
registry.require("lib/shapes.lisp", namespace, loader, alias="sh")
registry.resolve("sh.square", namespace)(3)   # 9
registry.listing()                            # [["shapes", ["square"]]]
```

Hash-map keys can be strings or keywords. A keyword key is stored with a
leading colon. The list, hash-map and string functions return new objects and
leave their inputs unchanged. `define_macro`, `ModuleRegistry.import_into` and
`ModuleRegistry.require` bind names in the namespace mapping they are given.

## What lispkit does not do

lispkit has no tokenizer, parser or evaluator of its own, and it has no
interactive prompt or command-line program. Macro expansion and `require`
depend on the caller to supply the evaluation step (`evaluate`) and the file
loading step (`loader`).