"""Domain models for weight tracking."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True)
class WeightLogRecord:
    """Body weight logged for a date, in the user's unit system."""

    id: UUID
    user_id: UUID
    weight: float
    logged_date: date
    notes: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class WeightProgress:
    """Progress summary over a window of weight logs."""

    latest_weight: float | None
    start_weight: float | None
    weight_change: float | None
    progress_to_goal: float | None
