"""Custom exceptions for backlog-daily-report.

All errors raised by the library inherit from DailyReportError, so callers
can catch everything report-related with a single except clause.

Exception hierarchy:
    DailyReportError (base)
    ├── ConfigurationError
    ├── ActivitySourceError
    └── PipelineError
        ├── SourceUnavailableError
        └── InvalidDateError
"""

from pathlib import Path
from typing import Any


class DailyReportError(Exception):
    """Base exception for all daily report errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize error.

        Args:
            message: Error description.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class ConfigurationError(DailyReportError):
    """Raised when the configuration file cannot be loaded or is invalid."""

    def __init__(
        self,
        message: str,
        config_file: Path | None = None,
        key: str | None = None,
    ):
        """Initialize configuration error.

        Args:
            message: Error description.
            config_file: Path to the problematic config file.
            key: The configuration key that caused the error.
        """
        details = {}
        if config_file:
            details["config_file"] = str(config_file)
        if key:
            details["key"] = key
        super().__init__(message, details)
        self.config_file = config_file
        self.key = key


class ActivitySourceError(DailyReportError):
    """Raised by an activity source when activities cannot be retrieved.

    Covers network failures, authentication and rate-limit responses, and
    payloads that cannot be parsed.
    """


class PipelineError(DailyReportError):
    """Raised when a pipeline run fails.

    Carries the user, the requested date and the stage that failed so the
    host can attribute the failure in its own logs.
    """

    def __init__(
        self,
        message: str,
        user_id: int | None = None,
        date: str | None = None,
        stage: str | None = None,
    ):
        details: dict[str, Any] = {}
        if user_id is not None:
            details["user_id"] = user_id
        if date is not None:
            details["date"] = date
        if stage:
            details["stage"] = stage
        super().__init__(message, details)
        self.user_id = user_id
        self.date = date
        self.stage = stage


class SourceUnavailableError(PipelineError):
    """Raised when the activity fetch fails. Never retried by the pipeline."""


class InvalidDateError(PipelineError):
    """Raised when the requested report date cannot be normalized."""
