"""SQLAlchemy implementation of EvaluationAuditStore.

Writes each evaluation as one row of an externally managed table. The
table name and the three column names come from configuration, so the
history can land in whatever schema the host application already has.
"""

import sqlalchemy as sa
from sqlalchemy.engine import Engine

from evalconsole.audit.models import EvaluationRecord
from evalconsole.audit.store import EvaluationAuditStore
from evalconsole.config.models.audit import AuditColumnsConfig
from evalconsole.observability.logging import get_logger

logger = get_logger(__name__)


class SQLAlchemyEvaluationAuditStore(EvaluationAuditStore):
    """Append evaluation records to a reflected database table."""

    def __init__(
        self,
        engine: Engine,
        table: str,
        columns: AuditColumnsConfig | None = None,
    ) -> None:
        """Reflect the target table.

        Args:
            engine: SQLAlchemy engine bound to the audit database
            table: Name of the table receiving one row per evaluation
            columns: Column names for input, result and actor id

        Raises:
            sqlalchemy.exc.NoSuchTableError: If the table doesn't exist
            ValueError: If a configured column is missing from the table
        """
        self._engine = engine
        self._columns = columns or AuditColumnsConfig()
        self._table = sa.Table(table, sa.MetaData(), autoload_with=engine)

        missing = [
            name
            for name in (self._columns.input, self._columns.result, self._columns.actor_id)
            if name not in self._table.c
        ]
        if missing:
            raise ValueError(
                f"Audit table '{table}' is missing column(s): {', '.join(missing)}"
            )

    def append(self, record: EvaluationRecord) -> None:
        """Insert one row for the record in its own transaction."""
        values = {
            self._columns.input: record.input,
            self._columns.result: record.result,
            self._columns.actor_id: record.actor_id,
        }
        with self._engine.begin() as connection:
            connection.execute(self._table.insert().values(values))

        logger.debug(
            "audit_record_written",
            backend="sqlalchemy",
            table=self._table.name,
            session_id=record.session_id,
        )
