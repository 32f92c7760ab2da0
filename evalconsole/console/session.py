"""Console session: a live evaluator attached to one of several bindings.

A session is created for an error page (one binding per traceback frame)
or for an explicit console request (a single binding). It is registered
as part of construction, so the id it exposes can be resolved by later
requests through the same registry.
"""

import operator
import time
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from evalconsole.audit.models import EvaluationRecord
from evalconsole.audit.store import EvaluationAuditStore
from evalconsole.console.binding import Binding, BindingInfo
from evalconsole.console.context import ContextExtractor, ContextExtractorFactory
from evalconsole.console.errors import BindingIndexError, NoBindingsError
from evalconsole.console.evaluator import Evaluator, EvaluatorFactory, PythonEvaluator
from evalconsole.console.identifiers import generate_session_id
from evalconsole.console.registry import SessionRegistry
from evalconsole.observability.logging import get_logger
from evalconsole.observability.metrics import (
    AUDIT_RECORDS,
    BINDING_SWITCHES,
    EVALUATION_LATENCY,
    EVALUATIONS,
)

logger = get_logger(__name__)


class SessionInfo(BaseModel):
    """Snapshot of a session for rendering frame lists."""

    model_config = ConfigDict(frozen=True)

    session_id: str = Field(..., description="Session identifier")
    current_index: int = Field(..., description="Index of the active binding")
    bindings: list[BindingInfo] = Field(..., description="Candidate bindings in order")


class Session:
    """Persist an evaluator in memory, associated with multiple bindings.

    Only one evaluator is live at a time and it is always bound to
    ``bindings[current_index]``. Concurrent calls on the same session are
    not serialized here; callers keep one conversation per session id.
    """

    def __init__(
        self,
        bindings: Sequence[Binding],
        *,
        registry: SessionRegistry,
        audit_store: EvaluationAuditStore | None = None,
        evaluator_factory: EvaluatorFactory = PythonEvaluator,
        extractor_factory: ContextExtractorFactory = ContextExtractor,
    ) -> None:
        """Build the session and register it.

        Raises:
            NoBindingsError: If bindings is empty
        """
        if not bindings:
            raise NoBindingsError()

        self._id = generate_session_id()
        self._bindings = tuple(bindings)
        self._current_index = 0
        self._audit_store = audit_store
        self._evaluator_factory = evaluator_factory
        self._extractor_factory = extractor_factory
        self._evaluator: Evaluator = evaluator_factory(self._bindings[0])

        registry.register(self)

    @property
    def id(self) -> str:
        return self._id

    @property
    def bindings(self) -> tuple[Binding, ...]:
        return self._bindings

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_binding(self) -> Binding:
        return self._bindings[self._current_index]

    def evaluate(self, input: str, actor_id: str | None = None) -> str:
        """Evaluate input against the current binding.

        When an audit store is configured, one record is appended per
        successful evaluation. Evaluator and audit failures propagate.

        Args:
            input: Code fragment to evaluate
            actor_id: Identifier of the user submitting the input

        Returns:
            The evaluator output
        """
        start = time.perf_counter()
        try:
            result = self._evaluator.evaluate(input)
        except Exception as exc:
            EVALUATIONS.labels(status="error").inc()
            logger.info(
                "evaluation_failed",
                session_id=self._id,
                binding_index=self._current_index,
                input_length=len(input),
                error_type=type(exc).__name__,
            )
            raise
        finally:
            EVALUATION_LATENCY.observe(time.perf_counter() - start)

        if self._audit_store is not None:
            try:
                self._save_result(self._audit_store, input, result, actor_id)
            except Exception as exc:
                EVALUATIONS.labels(status="audit_error").inc()
                logger.error(
                    "audit_write_failed",
                    session_id=self._id,
                    error_type=type(exc).__name__,
                )
                raise

        EVALUATIONS.labels(status="ok").inc()
        return result

    def switch_binding(self, index: int | str) -> None:
        """Switch the current binding to the one at index.

        The previous evaluator is closed, so names defined through it are
        not visible afterwards. Switching to the current index rebuilds the
        evaluator.

        Strings are parsed as integers; other values must be integral
        (``operator.index``), so floats are rejected instead of truncated.

        Raises:
            BindingIndexError: If index is outside the session's bindings
            TypeError: If index is neither a string nor an integer
            ValueError: If index is a non-numeric string
        """
        position = int(index) if isinstance(index, str) else operator.index(index)
        if not 0 <= position < len(self._bindings):
            raise BindingIndexError(position, len(self._bindings))

        evaluator = self._evaluator_factory(self._bindings[position])
        previous, self._evaluator = self._evaluator, evaluator
        self._current_index = position
        previous.close()

        BINDING_SWITCHES.inc()
        logger.debug("binding_switched", session_id=self._id, binding_index=position)

    def inspect(self, objpath: str = "") -> list[list[str]]:
        """Describe names reachable from the current binding."""
        return self._extractor_factory(self.current_binding).extract(objpath)

    def describe(self) -> SessionInfo:
        return SessionInfo(
            session_id=self._id,
            current_index=self._current_index,
            bindings=[binding.describe() for binding in self._bindings],
        )

    def _save_result(
        self,
        store: EvaluationAuditStore,
        input: str,
        result: str,
        actor_id: str | None,
    ) -> None:
        store.append(
            EvaluationRecord(
                session_id=self._id,
                input=input,
                result=result,
                actor_id=actor_id,
            )
        )
        AUDIT_RECORDS.inc()
