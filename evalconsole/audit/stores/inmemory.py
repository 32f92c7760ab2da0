"""In-memory implementation of EvaluationAuditStore."""

import threading

from evalconsole.audit.models import EvaluationRecord
from evalconsole.audit.store import EvaluationAuditStore


class InMemoryEvaluationAuditStore(EvaluationAuditStore):
    """In-memory implementation of EvaluationAuditStore for testing and development.

    Keeps records in insertion order. Not suitable for production use.
    """

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._records: list[EvaluationRecord] = []
        self._lock = threading.Lock()

    def append(self, record: EvaluationRecord) -> None:
        """Append an evaluation record."""
        with self._lock:
            self._records.append(record)

    def list_records(self) -> list[EvaluationRecord]:
        """List all records in the order they were appended."""
        with self._lock:
            return list(self._records)

    def list_by_session(self, session_id: str) -> list[EvaluationRecord]:
        """List records of one session in chronological order."""
        return [r for r in self.list_records() if r.session_id == session_id]
