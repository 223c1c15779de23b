"""Module registry: defining modules, qualified lookup, import and require."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, MutableMapping, Optional

from lispkit.values import LispError

_SOURCE_SUFFIX = ".lisp"


@dataclass
class Module:
    """A named module with the bindings it exports and the namespace it was built in."""

    name: str
    exports: dict = field(default_factory=dict)
    env: Any = field(default=None, repr=False, compare=False)

    def __str__(self) -> str:
        return f"#<module {self.name}>"


def module_name_from_path(filename: str) -> str:
    """Guess a module name from a file path: its last component without ``.lisp``."""
    base = filename.split("/")[-1]
    if base.endswith(_SOURCE_SUFFIX):
        base = base[: -len(_SOURCE_SUFFIX)]
    return base


class ModuleRegistry:
    """Holds the defined modules and the files that have been loaded."""

    def __init__(self) -> None:
        self.modules: dict[str, Module] = {}
        self.loaded_files: set[str] = set()

    def define(
        self,
        name: str,
        namespace: MutableMapping[str, Any],
        exports: Iterable[str],
    ) -> Module:
        """Register a module whose body has been evaluated into ``namespace``."""
        exported: dict[str, Any] = {}
        for export in exports:
            if export not in namespace:
                raise LispError(
                    f"exported symbol {export} not found in module {name}"
                )
            exported[export] = namespace[export]
        module = Module(name=name, exports=exported, env=namespace)
        self.modules[name] = module
        return module

    def get(self, name: str) -> Optional[Module]:
        """Return the module registered under ``name``, or None."""
        return self.modules.get(name)

    def resolve(self, qualified: str, namespace: MutableMapping[str, Any]) -> Any:
        """Look up ``module.symbol``; the module may also be an alias bound in ``namespace``."""
        parts = qualified.split(".")
        if len(parts) != 2:
            raise LispError(f"invalid qualified symbol: {qualified}")
        module_name, symbol = parts

        module = self.get(module_name)
        if module is None:
            if module_name not in namespace:
                raise LispError(f"module not found: {module_name}")
            candidate = namespace[module_name]
            if not isinstance(candidate, Module):
                raise LispError(f"symbol {module_name} is not a module")
            module = candidate

        if symbol not in module.exports:
            raise LispError(f"symbol {symbol} not exported by module {module_name}")
        return module.exports[symbol]

    def import_into(self, name: str, namespace: MutableMapping[str, Any]) -> Module:
        """Bind every export of module ``name`` in ``namespace``."""
        module = self.get(name)
        if module is None:
            raise LispError(f"module not found: {name}")
        namespace.update(module.exports)
        return module

    def mark_loaded(self, filename: str) -> None:
        """Record that ``filename`` has been loaded."""
        self.loaded_files.add(filename)

    def is_loaded(self, filename: str) -> bool:
        """Return whether ``filename`` has been loaded."""
        return filename in self.loaded_files

    def require(
        self,
        filename: str,
        namespace: MutableMapping[str, Any],
        loader: Callable[[str], Any],
        alias: Optional[str] = None,
        only: Optional[Iterable[str]] = None,
    ) -> Module:
        """Load ``filename`` once and bring its module into ``namespace``.

        ``loader`` reads and evaluates the file, defining modules in this
        registry. With ``alias`` the module itself is bound under that name;
        with ``only`` just the listed exports are bound; otherwise all are.
        """
        if self.is_loaded(filename):
            module = self._module_for_loaded_file(filename)
        else:
            before = set(self.modules)
            try:
                loader(filename)
            except (LispError, OSError) as exc:
                raise LispError(f"failed to load file {filename}: {exc}") from exc
            self.mark_loaded(filename)
            new_modules = [
                module for name, module in self.modules.items() if name not in before
            ]
            if not new_modules:
                raise LispError(f"no module found in file {filename}")
            module = new_modules[0]
        return self._apply(module, namespace, alias, only)

    def _module_for_loaded_file(self, filename: str) -> Module:
        module = self.get(module_name_from_path(filename))
        if module is not None:
            return module
        fallback = next(iter(self.modules.values()), None)
        if fallback is None:
            raise LispError(
                f"no suitable module found for already loaded file {filename}"
            )
        return fallback

    @staticmethod
    def _apply(
        module: Module,
        namespace: MutableMapping[str, Any],
        alias: Optional[str],
        only: Optional[Iterable[str]],
    ) -> Module:
        names = list(only) if only is not None else []
        if alias:
            namespace[alias] = module
        elif names:
            for symbol in names:
                if symbol not in module.exports:
                    raise LispError(
                        f"symbol {symbol} not exported by module {module.name}"
                    )
                namespace[symbol] = module.exports[symbol]
        else:
            namespace.update(module.exports)
        return module

    def listing(self) -> list:
        """Return ``[name, [export names...]]`` for every module."""
        return [[name, list(module.exports)] for name, module in self.modules.items()]