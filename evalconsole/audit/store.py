"""EvaluationAuditStore abstract interface."""

from abc import ABC, abstractmethod

from evalconsole.audit.models import EvaluationRecord


class EvaluationAuditStore(ABC):
    """Append-only sink for console evaluation history.

    Failures are not swallowed: an exception raised by append surfaces as a
    failure of the evaluation that produced the record.
    """

    @abstractmethod
    def append(self, record: EvaluationRecord) -> None:
        """Persist one evaluation record."""
        pass
