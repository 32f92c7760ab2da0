"""EvaluationAuditStore factory for creating backend instances.

The connection URL is read from configuration, or from the
EVALCONSOLE_AUDIT_DATABASE_URL / DATABASE_URL environment variables.
"""

import os

import sqlalchemy as sa

from evalconsole.audit.store import EvaluationAuditStore
from evalconsole.audit.stores.inmemory import InMemoryEvaluationAuditStore
from evalconsole.audit.stores.sqlalchemy import SQLAlchemyEvaluationAuditStore
from evalconsole.config.models.audit import AuditStorageConfig
from evalconsole.observability.logging import get_logger

logger = get_logger(__name__)


def create_audit_store(config: AuditStorageConfig) -> EvaluationAuditStore | None:
    """Create an EvaluationAuditStore based on configuration.

    Args:
        config: Audit storage configuration from settings

    Returns:
        Configured store, or None when auditing is disabled

    Raises:
        ValueError: If the backend needs a connection URL and none is set
    """
    if not config.enabled:
        return None

    backend = config.backend

    if backend == "inmemory":
        logger.info("creating_audit_store", backend="inmemory")
        return InMemoryEvaluationAuditStore()

    url = (
        config.connection_url
        or os.environ.get("EVALCONSOLE_AUDIT_DATABASE_URL")
        or os.environ.get("DATABASE_URL")
    )
    if not url:
        raise ValueError(
            "Audit backend 'sqlalchemy' requires audit.connection_url "
            "or EVALCONSOLE_AUDIT_DATABASE_URL"
        )

    logger.info(
        "creating_audit_store",
        backend="sqlalchemy",
        table=config.table,
        input_column=config.columns.input,
        result_column=config.columns.result,
        actor_id_column=config.columns.actor_id,
    )
    engine = sa.create_engine(url, pool_pre_ping=True)
    return SQLAlchemyEvaluationAuditStore(engine, config.table, config.columns)
