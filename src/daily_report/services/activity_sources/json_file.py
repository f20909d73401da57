"""Activity source backed by a local JSON export."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from daily_report.config.messages import ERROR_MESSAGES
from daily_report.exceptions import ActivitySourceError
from daily_report.models.activity import Activity
from daily_report.services.activity_sources.base import ActivitySource, parse_activities

logger = logging.getLogger(__name__)


class JsonFileActivitySource(ActivitySource):
    """Reads activities from a JSON file holding an array of Backlog payloads.

    Useful for offline runs and for replaying a saved API response. Records
    created by other users are dropped; records without a creator are kept.
    Malformed records are skipped with a warning.
    """

    key = "file"
    label = "JSON file"

    def __init__(self, path: Path):
        self.path = path

    def validate(self) -> list[str]:
        if not self.path.is_file():
            return [ERROR_MESSAGES["file_not_found"].format(path=self.path)]
        return []

    def fetch_user_activities(self, user_id: int, count: int) -> list[Activity]:
        try:
            with open(self.path, encoding="utf-8") as f:
                payload = json.load(f)
        except FileNotFoundError as e:
            raise ActivitySourceError(
                ERROR_MESSAGES["file_not_found"].format(path=self.path)
            ) from e
        except (OSError, json.JSONDecodeError) as e:
            raise ActivitySourceError(
                ERROR_MESSAGES["invalid_payload"].format(source=self.path), {"error": str(e)}
            ) from e

        activities = [
            activity
            for activity in parse_activities(payload, str(self.path))
            if activity.created_user is None or activity.created_user.id == user_id
        ]
        logger.debug(f"Loaded {len(activities)} activities for user {user_id} from {self.path}")
        return activities[:count]
