"""Audit domain models."""

from evalconsole.audit.models.evaluation_record import EvaluationRecord

__all__ = ["EvaluationRecord"]
