"""SessionFactory: build and register sessions from bindings or captures."""

from collections.abc import Mapping, Sequence
from typing import Any

from evalconsole.audit.store import EvaluationAuditStore
from evalconsole.console.binding import Binding
from evalconsole.console.capture import BINDING_KEY, EXCEPTION_KEY
from evalconsole.console.context import ContextExtractor, ContextExtractorFactory
from evalconsole.console.evaluator import EvaluatorFactory, PythonEvaluator
from evalconsole.console.exception_mapper import ExceptionMapper, map_exception_to_bindings
from evalconsole.console.registry import SessionRegistry
from evalconsole.console.session import Session
from evalconsole.observability.logging import get_logger
from evalconsole.observability.metrics import SESSIONS_CREATED

logger = get_logger(__name__)


class SessionFactory:
    """Create sessions wired to a registry and their collaborators.

    Every session built here is registered in ``registry`` before it is
    returned, so ``registry.find(session.id)`` resolves it immediately.
    """

    def __init__(
        self,
        registry: SessionRegistry,
        *,
        audit_store: EvaluationAuditStore | None = None,
        evaluator_factory: EvaluatorFactory = PythonEvaluator,
        extractor_factory: ContextExtractorFactory = ContextExtractor,
        exception_mapper: ExceptionMapper = map_exception_to_bindings,
    ) -> None:
        self.registry = registry
        self.audit_store = audit_store
        self._evaluator_factory = evaluator_factory
        self._extractor_factory = extractor_factory
        self._exception_mapper = exception_mapper

    def find(self, session_id: str) -> Session:
        """Look up a registered session.

        Raises:
            SessionNotFoundError: If the id is unknown
        """
        return self.registry.find(session_id)

    def from_bindings(self, bindings: Sequence[Binding], *, source: str = "bindings") -> Session:
        """Create a session over bindings, starting at the first one.

        Raises:
            NoBindingsError: If bindings is empty
        """
        session = Session(
            bindings,
            registry=self.registry,
            audit_store=self.audit_store,
            evaluator_factory=self._evaluator_factory,
            extractor_factory=self._extractor_factory,
        )
        SESSIONS_CREATED.labels(source=source).inc()
        logger.info(
            "session_created",
            session_id=session.id,
            source=source,
            binding_count=len(session.bindings),
        )
        return session

    def from_capture(self, capture: Mapping[str, Any]) -> Session | None:
        """Create a session from a preserved exception or binding.

        The exception wins when both are present; its traceback frames
        become the session's bindings. An exception without frames falls
        back to the preserved binding.

        Returns:
            The new session, or None when the capture holds neither
        """
        exc = capture.get(EXCEPTION_KEY)
        if exc is not None:
            bindings = list(self._exception_mapper(exc))
            if bindings:
                return self.from_bindings(bindings, source="exception")

        binding = capture.get(BINDING_KEY)
        if binding is not None:
            return self.from_bindings([binding], source="binding")

        logger.debug("capture_without_context", has_exception=exc is not None)
        return None
