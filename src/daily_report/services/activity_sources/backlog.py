"""Backlog REST API activity source."""

from __future__ import annotations

import logging

import httpx

from daily_report.config.messages import ERROR_MESSAGES
from daily_report.config.settings import BacklogSettings
from daily_report.constants import (
    BACKLOG_API_KEY_PARAM,
    BACKLOG_COUNT_PARAM,
    BACKLOG_USER_ACTIVITIES_PATH,
)
from daily_report.exceptions import ActivitySourceError
from daily_report.models.activity import Activity
from daily_report.services.activity_sources.base import ActivitySource, parse_activities

logger = logging.getLogger(__name__)


class BacklogActivitySource(ActivitySource):
    """Fetches user activities from the Backlog API v2.

    Retries and rate-limit handling are left to the caller; a failed
    request raises ActivitySourceError immediately.
    """

    key = "backlog"
    label = "Backlog"

    def __init__(self, settings: BacklogSettings | None = None):
        self.settings = settings or BacklogSettings()

    def validate(self) -> list[str]:
        issues = []
        if not self.settings.space_url:
            issues.append(ERROR_MESSAGES["space_url_missing"])
        if self.settings.api_key is None or not self.settings.api_key.get_secret_value():
            issues.append(ERROR_MESSAGES["api_key_missing"])
        return issues

    def _url(self, user_id: int) -> str:
        base = self.settings.space_url.rstrip("/")
        return base + BACKLOG_USER_ACTIVITIES_PATH.format(user_id=user_id)

    def fetch_user_activities(self, user_id: int, count: int) -> list[Activity]:
        issues = self.validate()
        if issues:
            raise ActivitySourceError("; ".join(issues))

        api_key = self.settings.api_key.get_secret_value() if self.settings.api_key else ""
        params: dict[str, str | int] = {
            BACKLOG_API_KEY_PARAM: api_key,
            BACKLOG_COUNT_PARAM: count,
        }
        url = self._url(user_id)
        logger.debug(f"Fetching up to {count} activities for user {user_id} from {url}")

        try:
            response = httpx.get(url, params=params, timeout=self.settings.timeout_seconds)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            raise ActivitySourceError(
                ERROR_MESSAGES["fetch_failed"].format(user_id=user_id),
                {"status": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            raise ActivitySourceError(
                ERROR_MESSAGES["fetch_failed"].format(user_id=user_id),
                {"error": type(e).__name__},
            ) from e
        except ValueError as e:
            raise ActivitySourceError(
                ERROR_MESSAGES["invalid_payload"].format(source=self.label)
            ) from e

        activities = parse_activities(payload, self.label)
        logger.debug(f"Received {len(activities)} activities for user {user_id}")
        return activities
