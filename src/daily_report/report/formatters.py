"""Timestamp formatting for reports."""

from abc import ABC, abstractmethod
from datetime import datetime

from daily_report.models.enums import DateStyle


class DateFormatter(ABC):
    """Renders an activity's creation timestamp."""

    @abstractmethod
    def format(self, created: str) -> str:
        """Format an ISO-8601 timestamp string."""


class DefaultDateFormatter(DateFormatter):
    """Formats timestamps according to a DateStyle.

    Timestamps are rendered in the timezone the source sent them in.
    Values that are not valid ISO-8601 are returned unchanged.
    """

    def __init__(self, style: DateStyle = DateStyle.TIME):
        self.style = style

    def format(self, created: str) -> str:
        pattern = self.style.pattern
        if pattern is None:
            return created
        try:
            return datetime.fromisoformat(created).strftime(pattern)
        except ValueError:
            return created
