"""Audit storage configuration models."""

from typing import Literal

from pydantic import BaseModel, Field

AuditBackendType = Literal["inmemory", "sqlalchemy"]


class AuditColumnsConfig(BaseModel):
    """Column names of the audit table."""

    input: str = Field(default="input", description="Column receiving the submitted code")
    result: str = Field(default="result", description="Column receiving the evaluator output")
    actor_id: str = Field(default="user_id", description="Column receiving the actor id")


class AuditStorageConfig(BaseModel):
    """Evaluation history persistence.

    Disabled by default; when disabled no record is written and
    evaluation has no side effect beyond its output.
    """

    enabled: bool = Field(default=False, description="Persist every evaluation")
    backend: AuditBackendType = Field(default="sqlalchemy", description="Backend type")
    connection_url: str | None = Field(
        default=None,
        description="SQLAlchemy database URL (from env var when unset)",
    )
    table: str = Field(
        default="console_evaluations",
        min_length=1,
        description="Table receiving one row per evaluation",
    )
    columns: AuditColumnsConfig = Field(
        default_factory=AuditColumnsConfig,
        description="Column name mapping",
    )
