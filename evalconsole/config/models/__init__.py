"""Configuration model exports.

    from evalconsole.config.models import AuditStorageConfig, ObservabilityConfig
"""

from evalconsole.config.models.audit import AuditColumnsConfig, AuditStorageConfig
from evalconsole.config.models.observability import (
    LoggingConfig,
    ObservabilityConfig,
)

__all__ = [
    "AuditColumnsConfig",
    "AuditStorageConfig",
    "LoggingConfig",
    "ObservabilityConfig",
]
