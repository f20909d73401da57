"""Runtime configuration settings for backlog-daily-report.

This module uses Pydantic Settings for values that come from the
environment rather than the YAML config file (credentials, endpoints).
Settings can be overridden via environment variables with the
DAILY_REPORT_BACKLOG_ prefix, or a .env file in the working directory.
"""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from daily_report.constants import DEFAULT_BACKLOG_TIMEOUT_SECONDS


class BacklogSettings(BaseSettings):
    """Backlog API connection settings.

    Example:
        DAILY_REPORT_BACKLOG_SPACE_URL=https://example.backlog.com
        DAILY_REPORT_BACKLOG_API_KEY=...
    """

    model_config = SettingsConfigDict(env_prefix="DAILY_REPORT_BACKLOG_")

    space_url: str = Field(
        default="",
        description="Base URL of the Backlog space, e.g. https://example.backlog.com",
    )
    api_key: SecretStr | None = Field(
        default=None,
        description="Backlog personal API key",
    )
    timeout_seconds: float = Field(
        default=DEFAULT_BACKLOG_TIMEOUT_SECONDS,
        description="HTTP request timeout in seconds",
    )
