"""Audit stores for evaluation records."""

from evalconsole.audit.store import EvaluationAuditStore
from evalconsole.audit.stores.inmemory import InMemoryEvaluationAuditStore
from evalconsole.audit.stores.sqlalchemy import SQLAlchemyEvaluationAuditStore

__all__ = [
    "EvaluationAuditStore",
    "InMemoryEvaluationAuditStore",
    "SQLAlchemyEvaluationAuditStore",
]
