"""Enum types for backlog-daily-report."""

from enum import Enum


class ReportFormat(str, Enum):
    """Output format of a rendered report."""

    PLAIN = "plain"
    MARKDOWN = "markdown"
    HTML = "html"

    @classmethod
    def values(cls) -> list[str]:
        """Return list of all formats."""
        return [f.value for f in cls]


class DateStyle(str, Enum):
    """How activity timestamps are rendered in a report."""

    TIME = "time"  # 14:05
    DATETIME = "datetime"  # 2024-05-01 14:05
    ISO = "iso"  # timestamp exactly as received

    @classmethod
    def values(cls) -> list[str]:
        """Return list of all date styles."""
        return [s.value for s in cls]

    @property
    def pattern(self) -> str | None:
        """strftime pattern for the style (None keeps the raw value)."""
        patterns = {
            "time": "%H:%M",
            "datetime": "%Y-%m-%d %H:%M",
            "iso": None,
        }
        return patterns[self.value]
