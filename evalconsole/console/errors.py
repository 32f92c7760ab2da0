"""Console exception hierarchy.

All console exceptions inherit from ConsoleError, which carries an
error_code the transport layer can map onto a user-facing response.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Machine-readable error codes for console failures."""

    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    """No live session is registered under the given id."""

    NO_BINDINGS = "NO_BINDINGS"
    """A session was constructed without any binding."""

    BINDING_INDEX_OUT_OF_RANGE = "BINDING_INDEX_OUT_OF_RANGE"
    """A binding switch referenced an index outside the session's bindings."""

    EVALUATION_FAILED = "EVALUATION_FAILED"
    """The submitted code raised while being evaluated."""

    EVALUATOR_CLOSED = "EVALUATOR_CLOSED"
    """An evaluator was used after being discarded."""


class ConsoleError(Exception):
    """Base exception for all console errors."""

    error_code: ErrorCode

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class SessionNotFoundError(ConsoleError):
    """Raised when session_id doesn't match any registered session."""

    error_code = ErrorCode.SESSION_NOT_FOUND

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Session not found: {session_id}")
        self.session_id = session_id


class NoBindingsError(ConsoleError, ValueError):
    """Raised when a session would be created with zero bindings."""

    error_code = ErrorCode.NO_BINDINGS

    def __init__(self, message: str = "A session requires at least one binding") -> None:
        super().__init__(message)


class BindingIndexError(ConsoleError, IndexError):
    """Raised when switching to a binding index that doesn't exist."""

    error_code = ErrorCode.BINDING_INDEX_OUT_OF_RANGE

    def __init__(self, index: int, size: int) -> None:
        super().__init__(
            f"Binding index {index} out of range for {size} binding(s)"
        )
        self.index = index
        self.size = size


class EvaluationError(ConsoleError):
    """Raised when submitted code fails during evaluation.

    Carries the raised exception type name, its message and the
    formatted traceback of the evaluated fragment.
    """

    error_code = ErrorCode.EVALUATION_FAILED

    def __init__(self, error_type: str, message: str, traceback_text: str = "") -> None:
        super().__init__(f"{error_type}: {message}")
        self.error_type = error_type
        self.error_message = message
        self.traceback_text = traceback_text


class EvaluatorClosedError(ConsoleError):
    """Raised when an evaluator is used after close()."""

    error_code = ErrorCode.EVALUATOR_CLOSED

    def __init__(self) -> None:
        super().__init__("Evaluator has been closed")
