"""Weight tracking service."""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.weights import WeightLogRecord, WeightProgress

PROGRESS_CAP = 100.0


class WeightLogRepository(Protocol):
    """Persistence interface for weight logs."""

    def upsert_weight_log(
        self, user_id: UUID, payload: dict[str, object]
    ) -> WeightLogRecord:
        """Insert or replace the user's weight for a date."""

    def list_weight_logs(self, user_id: UUID, since: date) -> list[WeightLogRecord]:
        """Return weight logs on or after a date, oldest first."""

    def get_weight_log(self, user_id: UUID, log_id: UUID) -> WeightLogRecord | None:
        """Return one of the user's weight logs."""

    def delete_weight_log(self, user_id: UUID, log_id: UUID) -> None:
        """Delete a weight log."""


@dataclass
class WeightLogService:
    """Service for logging body weight and summarizing progress."""

    repository: WeightLogRepository

    def log_weight(
        self,
        user_id: UUID,
        weight: float,
        logged_date: date,
        notes: str | None = None,
    ) -> WeightLogRecord:
        """Record the weight for a date, replacing any earlier value."""
        return self.repository.upsert_weight_log(
            user_id,
            {
                "weight": weight,
                "logged_date": logged_date.isoformat(),
                "notes": notes or None,
            },
        )

    def list_recent(
        self, user_id: UUID, days: int = 30, today: date | None = None
    ) -> list[WeightLogRecord]:
        """Return the last ``days`` of weight logs, oldest first."""
        since = (today or date.today()) - timedelta(days=days)
        logs = self.repository.list_weight_logs(user_id, since)
        return sorted(logs, key=lambda log: log.logged_date)

    def delete(self, user_id: UUID, log_id: UUID) -> bool:
        """Delete one of the user's weight logs."""
        if self.repository.get_weight_log(user_id, log_id) is None:
            return False
        self.repository.delete_weight_log(user_id, log_id)
        return True


def progress(
    logs: list[WeightLogRecord], target_weight: float | None
) -> WeightProgress:
    """Summarize weight change across logs sorted by date.

    Progress to goal is the share of the start-to-target distance covered,
    clamped to 0-100. It is None without a target or when start equals target.
    """
    if not logs:
        return WeightProgress(None, None, None, None)
    start = logs[0].weight
    latest = logs[-1].weight
    progress_to_goal = None
    if target_weight is not None and start != target_weight:
        covered = (start - latest) / (start - target_weight) * 100
        progress_to_goal = min(PROGRESS_CAP, max(0.0, covered))
    return WeightProgress(
        latest_weight=latest,
        start_weight=start,
        weight_change=latest - start,
        progress_to_goal=progress_to_goal,
    )
