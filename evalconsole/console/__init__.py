"""Console sessions: registry, bindings, evaluation and binding switching.

Usage:
    from evalconsole.console import InMemorySessionRegistry, SessionFactory

    factory = SessionFactory(InMemorySessionRegistry())
    session = factory.from_capture(request.environ)
    ...
    factory.find(session_id).evaluate("user.name", actor_id=current_user_id)
"""

from evalconsole.console.binding import Binding, BindingInfo
from evalconsole.console.capture import (
    BINDING_KEY,
    EXCEPTION_KEY,
    preserve_binding,
    preserve_exception,
)
from evalconsole.console.context import ContextExtractor
from evalconsole.console.errors import (
    BindingIndexError,
    ConsoleError,
    ErrorCode,
    EvaluationError,
    EvaluatorClosedError,
    NoBindingsError,
    SessionNotFoundError,
)
from evalconsole.console.evaluator import Evaluator, PythonEvaluator
from evalconsole.console.exception_mapper import map_exception_to_bindings
from evalconsole.console.factory import SessionFactory
from evalconsole.console.registries import InMemorySessionRegistry, SessionRegistry
from evalconsole.console.session import Session, SessionInfo

__all__ = [
    "BINDING_KEY",
    "EXCEPTION_KEY",
    "Binding",
    "BindingInfo",
    "BindingIndexError",
    "ConsoleError",
    "ContextExtractor",
    "ErrorCode",
    "EvaluationError",
    "Evaluator",
    "EvaluatorClosedError",
    "InMemorySessionRegistry",
    "NoBindingsError",
    "PythonEvaluator",
    "Session",
    "SessionFactory",
    "SessionInfo",
    "SessionNotFoundError",
    "SessionRegistry",
    "map_exception_to_bindings",
    "preserve_binding",
    "preserve_exception",
]
