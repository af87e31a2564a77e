"""Tests for the weight log service."""

from datetime import date
from uuid import uuid4

import pytest

from macro_tracker.domain.weights import WeightLogRecord
from macro_tracker.services.weights import WeightLogService, progress
from tests.conftest import InMemoryWeightLogRepository


def _log(weight: float, logged_date: date) -> WeightLogRecord:
    return WeightLogRecord(
        id=uuid4(), user_id=uuid4(), weight=weight, logged_date=logged_date
    )


def test_log_weight_replaces_same_day_entry(user_id) -> None:
    repository = InMemoryWeightLogRepository()
    service = WeightLogService(repository)

    first = service.log_weight(user_id, 80.0, date(2026, 3, 1))
    second = service.log_weight(user_id, 79.5, date(2026, 3, 1), notes="after run")

    assert len(repository.logs) == 1
    assert second.id == first.id
    assert second.weight == 79.5
    assert second.notes == "after run"


def test_list_recent_filters_window_and_sorts(user_id, other_user_id) -> None:
    service = WeightLogService(InMemoryWeightLogRepository())
    service.log_weight(user_id, 78.0, date(2026, 3, 20))
    service.log_weight(user_id, 80.0, date(2026, 3, 1))
    service.log_weight(user_id, 82.0, date(2026, 1, 1))
    service.log_weight(other_user_id, 60.0, date(2026, 3, 10))

    logs = service.list_recent(user_id, days=30, today=date(2026, 3, 21))

    assert [log.weight for log in logs] == [80.0, 78.0]


def test_delete_is_scoped_to_owner(user_id, other_user_id) -> None:
    service = WeightLogService(InMemoryWeightLogRepository())
    log = service.log_weight(user_id, 80.0, date(2026, 3, 1))

    assert service.delete(other_user_id, log.id) is False
    assert service.delete(user_id, log.id) is True
    assert service.delete(user_id, log.id) is False


def test_progress_toward_target() -> None:
    logs = [_log(80.0, date(2026, 3, 1)), _log(77.5, date(2026, 3, 15))]

    summary = progress(logs, target_weight=70.0)

    assert summary.start_weight == 80.0
    assert summary.latest_weight == 77.5
    assert summary.weight_change == pytest.approx(-2.5)
    assert summary.progress_to_goal == pytest.approx(25.0)


def test_progress_is_clamped() -> None:
    overshoot = [_log(80.0, date(2026, 3, 1)), _log(68.0, date(2026, 3, 15))]
    wrong_way = [_log(80.0, date(2026, 3, 1)), _log(82.0, date(2026, 3, 15))]

    assert progress(overshoot, target_weight=70.0).progress_to_goal == 100.0
    assert progress(wrong_way, target_weight=70.0).progress_to_goal == 0.0


def test_progress_without_target_or_logs() -> None:
    logs = [_log(80.0, date(2026, 3, 1))]

    assert progress(logs, target_weight=None).progress_to_goal is None
    assert progress(logs, target_weight=80.0).progress_to_goal is None
    assert progress([], target_weight=70.0).latest_weight is None
