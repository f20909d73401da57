"""Pytest configuration and fixtures for backlog-daily-report tests."""

from collections.abc import Callable
from typing import Any

import pytest

from daily_report.exceptions import ActivitySourceError
from daily_report.models.activity import Activity
from daily_report.services.activity_sources.base import ActivitySource

TARGET_DATE = "2024-05-01"

PROJECTS = {
    "ABC": {"id": 1, "projectKey": "ABC", "name": "Alpha"},
    "XYZ": {"id": 2, "projectKey": "XYZ", "name": "Xylophone"},
    "DAILY_REPORT": {"id": 3, "projectKey": "DAILY_REPORT", "name": "Daily reports"},
}


def activity_payload(
    activity_id: int,
    project_key: str = "ABC",
    comment: str | None = None,
    changes: list[dict[str, Any]] | None = None,
    created: str = f"{TARGET_DATE}T10:00:00Z",
    activity_type: int = 2,
    user_id: int = 42,
    summary: str | None = "Fix login",
) -> dict[str, Any]:
    """Build an activity in the shape the Backlog API returns."""
    project = PROJECTS.get(
        project_key, {"id": 99, "projectKey": project_key, "name": project_key.title()}
    )
    content: dict[str, Any] = {"id": 500 + activity_id, "key_id": activity_id, "summary": summary}
    if comment is not None:
        content["comment"] = {"id": 900 + activity_id, "content": comment}
    if changes is not None:
        content["changes"] = changes
    return {
        "id": activity_id,
        "project": project,
        "type": activity_type,
        "content": content,
        "createdUser": {"id": user_id, "userId": "taro", "name": "Taro"},
        "created": created,
    }


def change(field: str, field_text: str | None = None, old: str = "a", new: str = "b") -> dict:
    """Build a change record."""
    return {
        "field": field,
        "field_text": field_text,
        "old_value": old,
        "new_value": new,
        "type": "standard",
    }


@pytest.fixture
def make_activity() -> Callable[..., Activity]:
    """Factory fixture returning parsed Activity models."""

    def _make(activity_id: int = 1, **kwargs: Any) -> Activity:
        return Activity.model_validate(activity_payload(activity_id, **kwargs))

    return _make


class FakeActivitySource(ActivitySource):
    """In-memory activity source recording every fetch."""

    key = "fake"
    label = "Fake"

    def __init__(self, activities: list[Activity], error: Exception | None = None):
        self.activities = activities
        self.error = error
        self.calls: list[tuple[int, int]] = []

    def validate(self) -> list[str]:
        return []

    def fetch_user_activities(self, user_id: int, count: int) -> list[Activity]:
        self.calls.append((user_id, count))
        if self.error is not None:
            raise self.error
        return list(self.activities[:count])


@pytest.fixture
def scenario_activities(make_activity: Callable[..., Activity]) -> list[Activity]:
    """Three activities on the target date plus one from the previous day.

    1: comment on ABC, 2: lone due-date change on ABC,
    3: status change on XYZ, 4: comment on ABC a day earlier.
    """
    return [
        make_activity(1, project_key="ABC", comment="Investigated the login bug", activity_type=3),
        make_activity(2, project_key="ABC", changes=[change("dueDate")]),
        make_activity(3, project_key="XYZ", changes=[change("status", "Status", "Open", "Done")]),
        make_activity(
            4, project_key="ABC", comment="Yesterday's note", created="2024-04-30T23:59:00Z"
        ),
    ]


@pytest.fixture
def fake_source(scenario_activities: list[Activity]) -> FakeActivitySource:
    """Fake source serving the scenario activities."""
    return FakeActivitySource(scenario_activities)


@pytest.fixture
def failing_source() -> FakeActivitySource:
    """Fake source whose fetch always fails."""
    return FakeActivitySource([], error=ActivitySourceError("rate limited", {"status": 429}))
