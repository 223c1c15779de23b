[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lispkit"
version = "0.1.0"
description = "Runtime building blocks for a small Lisp: values, lists, hash maps, strings, math, macros and modules"
requires-python = ">=3.10"
dependencies = []
keywords = ["lisp", "interpreter", "macros", "runtime", "builtins"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lispkit"]

[tool.pytest.ini_options]
addopts = "-ra"
