"""EvaluationRecord model for audit domain."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class EvaluationRecord(BaseModel):
    """Immutable audit record of one console evaluation."""

    model_config = ConfigDict(frozen=True)

    session_id: str = Field(..., description="Session the input was evaluated in")
    input: str = Field(..., description="Submitted code fragment")
    result: str = Field(..., description="Evaluator output")
    actor_id: str | None = Field(
        default=None, description="Identifier of the user who submitted the input"
    )
    recorded_at: datetime = Field(
        default_factory=utc_now, description="Evaluation time"
    )
