"""Supabase repository for weight logs."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from macro_tracker.domain.weights import WeightLogRecord
from macro_tracker.services.weights import WeightLogRepository


@dataclass
class SupabaseWeightLogRepository(WeightLogRepository):
    """Supabase implementation for weight logs."""

    client: Client

    def upsert_weight_log(
        self, user_id: UUID, payload: dict[str, object]
    ) -> WeightLogRecord:
        """Insert or replace the weight for ``(user_id, logged_date)``."""
        response = (
            self.client.table("weight_logs")
            .upsert(
                {"user_id": str(user_id), **payload},
                on_conflict="user_id,logged_date",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save weight log")
        return _parse_log(response.data[0])

    def list_weight_logs(self, user_id: UUID, since: date) -> list[WeightLogRecord]:
        """Return weight logs on or after ``since``."""
        response = (
            self.client.table("weight_logs")
            .select("*")
            .eq("user_id", str(user_id))
            .gte("logged_date", since.isoformat())
            .order("logged_date", desc=False)
            .execute()
        )
        return [_parse_log(row) for row in response.data or []]

    def get_weight_log(self, user_id: UUID, log_id: UUID) -> WeightLogRecord | None:
        """Return one of the user's weight logs."""
        response = (
            self.client.table("weight_logs")
            .select("*")
            .eq("id", str(log_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_log(response.data[0])

    def delete_weight_log(self, user_id: UUID, log_id: UUID) -> None:
        """Delete one of the user's weight logs."""
        self.client.table("weight_logs").delete().eq("id", str(log_id)).eq(
            "user_id", str(user_id)
        ).execute()


def _parse_log(row: dict[str, object]) -> WeightLogRecord:
    created_raw = row.get("created_at")
    return WeightLogRecord(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        weight=float(row.get("weight", 0.0)),
        logged_date=date.fromisoformat(str(row["logged_date"])),
        notes=row.get("notes"),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
    )
