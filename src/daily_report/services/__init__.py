"""Services for backlog-daily-report business logic."""

from daily_report.services.activity_service import (
    ActivityService,
    normalize_date,
)
from daily_report.services.config_service import ConfigService, get_config_service

__all__ = [
    "ActivityService",
    "normalize_date",
    "ConfigService",
    "get_config_service",
]
