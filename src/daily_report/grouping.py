"""Grouping helpers for filtered activities."""

from collections.abc import Iterable

from daily_report.models.activity import Activity, ProjectActivitiesMap


def group_by_project(activities: Iterable[Activity]) -> ProjectActivitiesMap:
    """Partition activities by project key.

    Keys appear in order of first occurrence and each list keeps the input
    order, so concatenating the groups yields every input activity once.

    Args:
        activities: Activities in filtering order

    Returns:
        Mapping of project key to that project's activities
    """
    grouped: ProjectActivitiesMap = {}
    for activity in activities:
        grouped.setdefault(activity.project.project_key, []).append(activity)
    return grouped
