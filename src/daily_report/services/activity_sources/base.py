"""Base classes for activity sources."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from pydantic import ValidationError

from daily_report.config.messages import ERROR_MESSAGES, WARNING_MESSAGES
from daily_report.exceptions import ActivitySourceError
from daily_report.models.activity import Activity

logger = logging.getLogger(__name__)


class ActivitySource(ABC):
    """Abstract base class for activity sources.

    Sources return activities in whatever order the upstream service uses;
    callers must not rely on ordering beyond filtering by day.
    """

    key: str
    label: str

    @abstractmethod
    def validate(self) -> list[str]:
        """Validate source configuration.

        Returns:
            List of validation issues (empty list if valid)
        """

    @abstractmethod
    def fetch_user_activities(self, user_id: int, count: int) -> list[Activity]:
        """Fetch a user's most recent activities.

        Args:
            user_id: Numeric user id on the tracking service
            count: Maximum number of activities to return

        Returns:
            Parsed activities

        Raises:
            ActivitySourceError: If the activities cannot be retrieved
        """


def parse_activities(payload: Any, source: str) -> list[Activity]:
    """Parse a list of upstream activity payloads.

    Records that fail validation are skipped with a warning so that one
    malformed record never costs the rest of the batch.

    Args:
        payload: Decoded JSON array of activity objects
        source: Source name used in error messages

    Returns:
        Parsed activities in payload order

    Raises:
        ActivitySourceError: If the payload is not a list
    """
    if not isinstance(payload, list):
        raise ActivitySourceError(
            ERROR_MESSAGES["invalid_payload"].format(source=source),
            {"type": type(payload).__name__},
        )

    activities = []
    for index, item in enumerate(payload):
        try:
            activities.append(Activity.model_validate(item))
        except ValidationError as e:
            logger.warning(
                WARNING_MESSAGES["skipped_malformed_activity"].format(
                    index=index, error=e.error_count()
                )
            )
    return activities
