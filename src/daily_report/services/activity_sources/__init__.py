"""Activity source implementations."""

from daily_report.services.activity_sources.backlog import BacklogActivitySource
from daily_report.services.activity_sources.base import ActivitySource
from daily_report.services.activity_sources.json_file import JsonFileActivitySource

__all__ = ["ActivitySource", "BacklogActivitySource", "JsonFileActivitySource"]
