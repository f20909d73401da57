"""Constants for backlog-daily-report.

This module contains:
- VERSION: Package version
- Default field names used to classify change sets
- Backlog activity type labels
- Pipeline limits and defaults

For paths, messages, and runtime settings, import from:
- daily_report.config.paths
- daily_report.config.messages
- daily_report.config.settings

For type-safe enums, import from:
- daily_report.models.enums
"""

from daily_report import __version__

# =============================================================================
# Version
# =============================================================================

VERSION = __version__

# =============================================================================
# Change Classification
# =============================================================================

# Due date related fields. Backlog reports these under several names
# depending on the API version and the user's language.
MILESTONE_FIELDS: tuple[str, ...] = (
    "milestone",
    "limitDate",
    "dueDate",
    "period",
    "date",
    "期限日",
)

# Assignee related fields
ASSIGNEE_FIELDS: tuple[str, ...] = (
    "assigner",
    "assignee",
    "担当者",
    "担当",
)

# Projects whose activities are never reported (the daily report project itself)
DEFAULT_EXCLUDED_PROJECT_KEYS: tuple[str, ...] = ("DAILY_REPORT",)

# =============================================================================
# Pipeline Defaults
# =============================================================================

# Upper bound on activities requested per fetch (Backlog API maximum)
DEFAULT_ACTIVITY_COUNT = 100
MAX_ACTIVITY_COUNT = 100

DEFAULT_TIMEZONE = "UTC"
DATE_FORMAT = "%Y-%m-%d"
# Accepted in addition to ISO-8601; strptime allows unpadded month and day
DATE_INPUT_FORMATS = ("%Y-%m-%d", "%Y/%m/%d")

# =============================================================================
# Backlog API
# =============================================================================

BACKLOG_USER_ACTIVITIES_PATH = "/api/v2/users/{user_id}/activities"
BACKLOG_API_KEY_PARAM = "apiKey"
BACKLOG_COUNT_PARAM = "count"
DEFAULT_BACKLOG_TIMEOUT_SECONDS = 30.0

# Activity type codes as documented by the Backlog API
ACTIVITY_TYPE_LABELS: dict[int, str] = {
    1: "Issue created",
    2: "Issue updated",
    3: "Comment added",
    4: "Issue deleted",
    5: "Wiki page created",
    6: "Wiki page updated",
    7: "Wiki page deleted",
    8: "File added",
    9: "File updated",
    10: "File deleted",
    11: "SVN commit",
    12: "Git push",
    13: "Git repository created",
    14: "Issues bulk updated",
    15: "Project member added",
    16: "Project member removed",
    17: "Comment notification",
    18: "Pull request created",
    19: "Pull request updated",
    20: "Pull request comment",
    21: "Pull request deleted",
    22: "Milestone created",
    23: "Milestone updated",
    24: "Milestone deleted",
    25: "Project group added",
    26: "Project group removed",
}
UNKNOWN_ACTIVITY_LABEL = "Activity"
