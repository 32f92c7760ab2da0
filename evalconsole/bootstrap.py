"""Bootstrap module for wiring a SessionFactory from configuration.

Handles:
- Configuring structured logging
- Creating the process-wide session registry
- Creating the audit store (or none when auditing is disabled)

Example usage:

    from evalconsole.bootstrap import bootstrap

    factory = bootstrap()

    session = factory.from_capture(environ)
    if session is not None:
        render_error_page(session.describe())
"""

from evalconsole.audit.factory import create_audit_store
from evalconsole.config import Settings, get_settings
from evalconsole.console.factory import SessionFactory
from evalconsole.console.registries import InMemorySessionRegistry
from evalconsole.observability.logging import get_logger, setup_logging

logger = get_logger(__name__)


def bootstrap(settings: Settings | None = None) -> SessionFactory:
    """Build a SessionFactory with a fresh registry.

    Args:
        settings: Settings to use, loaded from config/*.toml when omitted

    Returns:
        SessionFactory bound to a new InMemorySessionRegistry
    """
    if settings is None:
        settings = get_settings()

    log_config = settings.observability.logging
    setup_logging(
        level=log_config.level,
        format=log_config.format,
        redact_pii=log_config.redact_pii,
    )

    registry = InMemorySessionRegistry()
    audit_store = create_audit_store(settings.audit)

    logger.info(
        "evalconsole_bootstrapped",
        app_name=settings.app_name,
        audit_enabled=audit_store is not None,
    )
    return SessionFactory(registry, audit_store=audit_store)
