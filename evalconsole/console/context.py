"""Context extraction for console autocompletion and inspection."""

import builtins
from typing import Any, Protocol

from evalconsole.console.binding import Binding

_MISSING = object()


class ContextExtractorFactory(Protocol):
    def __call__(self, binding: Binding) -> "ContextExtractor": ...


class ContextExtractor:
    """Describe names reachable from a binding.

    Object paths are resolved by plain name lookup and getattr; the path
    is never compiled or evaluated as code.
    """

    def __init__(self, binding: Binding) -> None:
        self.binding = binding

    def extract(self, objpath: str = "") -> list[list[str]]:
        """Return groups of names for objpath.

        An empty path yields three groups (locals, globals, builtins). A
        dotted path like ``request.headers`` yields one group with the
        attributes of the resolved object. Unresolvable paths yield [].
        """
        objpath = objpath.strip()
        if not objpath:
            return self._global_context()

        target = self._resolve(objpath)
        if target is _MISSING:
            return []
        return [sorted(dir(target))]

    def _global_context(self) -> list[list[str]]:
        return [
            sorted(self.binding.locals),
            sorted(name for name in self.binding.globals if not name.startswith("__")),
            sorted(dir(builtins)),
        ]

    def _resolve(self, objpath: str) -> Any:
        head, *attrs = objpath.split(".")
        target = self._lookup(head)
        for attr in attrs:
            if target is _MISSING or not attr:
                return _MISSING
            target = getattr(target, attr, _MISSING)
        return target

    def _lookup(self, name: str) -> Any:
        for namespace in (self.binding.locals, self.binding.globals, vars(builtins)):
            if name in namespace:
                return namespace[name]
        return _MISSING
