"""Session registries."""

from evalconsole.console.registries.inmemory import InMemorySessionRegistry
from evalconsole.console.registry import SessionRegistry

__all__ = [
    "SessionRegistry",
    "InMemorySessionRegistry",
]
