"""Helpers that preserve an exception or binding for a later console session.

The storage is any mutable mapping that outlives the failing code, usually
the request environment. SessionFactory.from_capture reads the same keys.
"""

from collections.abc import MutableMapping
from typing import Any

from evalconsole.console.binding import Binding

EXCEPTION_KEY = "__evalconsole_exception"
BINDING_KEY = "__evalconsole_binding"


def preserve_exception(storage: MutableMapping[str, Any], exc: BaseException) -> None:
    storage[EXCEPTION_KEY] = exc


def preserve_binding(
    storage: MutableMapping[str, Any],
    binding: Binding | None = None,
) -> Binding:
    """Store a binding, capturing the caller's frame when none is given.

    Returns:
        The stored binding
    """
    if binding is None:
        binding = Binding.of_caller(depth=2)
    storage[BINDING_KEY] = binding
    return binding
