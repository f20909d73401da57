"""Data models for backlog-daily-report"""

from .activity import (
    Activity,
    ActivityResult,
    Change,
    Comment,
    Content,
    Project,
    ProjectActivitiesMap,
    User,
)
from .config import AppConfig, DailyReportsConfig, Member, ReportGeneratorConfig
from .enums import DateStyle, ReportFormat

__all__ = [
    "Activity",
    "ActivityResult",
    "Change",
    "Comment",
    "Content",
    "Project",
    "ProjectActivitiesMap",
    "User",
    "AppConfig",
    "DailyReportsConfig",
    "Member",
    "ReportGeneratorConfig",
    "DateStyle",
    "ReportFormat",
]
