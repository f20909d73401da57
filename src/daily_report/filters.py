"""Composable activity filters.

A filter is a pure predicate over one Activity. Atomic filters test a single
property of the record; AndFilter, OrFilter and NotFilter combine other
filters into arbitrary boolean expressions without knowing their internals.

Example:
    >>> keep = (HasCommentFilter() | MeaningfulChangeFilter()) & ExcludeProjectFilter(["OPS"])
    >>> [a for a in activities if keep.evaluate(a)]
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from daily_report.constants import (
    ASSIGNEE_FIELDS,
    DEFAULT_EXCLUDED_PROJECT_KEYS,
    MILESTONE_FIELDS,
)
from daily_report.models.activity import Activity, Change
from daily_report.models.config import AppConfig


class ActivityFilter(ABC):
    """Base class for all activity filters."""

    @abstractmethod
    def evaluate(self, activity: Activity) -> bool:
        """Return True if the activity satisfies this filter."""

    @abstractmethod
    def describe(self) -> str:
        """Short description of the expression, used in debug logs."""

    def __and__(self, other: "ActivityFilter") -> "AndFilter":
        return AndFilter([self, other])

    def __or__(self, other: "ActivityFilter") -> "OrFilter":
        return OrFilter([self, other])

    def __invert__(self) -> "NotFilter":
        return NotFilter(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.describe()}>"


# =============================================================================
# Atomic filters
# =============================================================================


class HasCommentFilter(ActivityFilter):
    """Passes activities carrying a comment with a non-blank body."""

    def evaluate(self, activity: Activity) -> bool:
        comment = activity.content.comment
        return comment is not None and bool(comment.text)

    def describe(self) -> str:
        return "has_comment"


class ExcludeProjectFilter(ActivityFilter):
    """Rejects activities from the given projects.

    Keys are compared exactly; ``"daily_report"`` does not exclude
    ``"DAILY_REPORT"``.
    """

    def __init__(self, excluded_keys: Iterable[str] = DEFAULT_EXCLUDED_PROJECT_KEYS):
        self.excluded_keys = frozenset(excluded_keys)

    def evaluate(self, activity: Activity) -> bool:
        return activity.project.project_key not in self.excluded_keys

    def describe(self) -> str:
        return f"project not in {sorted(self.excluded_keys)}"


class MeaningfulChangeFilter(ActivityFilter):
    """Passes activities whose changes are not only due-date or assignee edits.

    A lone change to a milestone or assignee field is not meaningful. With
    several changes, the set is not meaningful only when every change is a
    milestone change, or every change is an assignee change; a mixed set
    passes. Activities without changes never pass.
    """

    def __init__(
        self,
        milestone_fields: Iterable[str] = MILESTONE_FIELDS,
        assignee_fields: Iterable[str] = ASSIGNEE_FIELDS,
    ):
        self.milestone_fields = frozenset(milestone_fields)
        self.assignee_fields = frozenset(assignee_fields)

    def evaluate(self, activity: Activity) -> bool:
        changes = activity.content.changes
        if not changes:
            return False
        return not self._is_non_meaningful(changes)

    def describe(self) -> str:
        return "meaningful_change"

    def _is_non_meaningful(self, changes: list[Change]) -> bool:
        if len(changes) == 1:
            change = changes[0]
            return self._matches(change, self.milestone_fields) or self._matches(
                change, self.assignee_fields
            )

        only_milestone = all(self._matches(c, self.milestone_fields) for c in changes)
        only_assignee = all(self._matches(c, self.assignee_fields) for c in changes)
        return only_milestone or only_assignee

    @staticmethod
    def _matches(change: Change, fields: frozenset[str]) -> bool:
        # Either the machine id or the localized label may identify the field
        return change.field in fields or (change.field_text or "") in fields


# =============================================================================
# Combinators
# =============================================================================


class AndFilter(ActivityFilter):
    """Passes when every child passes. No children: always passes."""

    def __init__(self, filters: Iterable[ActivityFilter]):
        self.filters = tuple(filters)

    def evaluate(self, activity: Activity) -> bool:
        return all(f.evaluate(activity) for f in self.filters)

    def describe(self) -> str:
        if not self.filters:
            return "true"
        return "(" + " AND ".join(f.describe() for f in self.filters) + ")"


class OrFilter(ActivityFilter):
    """Passes when at least one child passes. No children: never passes."""

    def __init__(self, filters: Iterable[ActivityFilter]):
        self.filters = tuple(filters)

    def evaluate(self, activity: Activity) -> bool:
        return any(f.evaluate(activity) for f in self.filters)

    def describe(self) -> str:
        if not self.filters:
            return "false"
        return "(" + " OR ".join(f.describe() for f in self.filters) + ")"


class NotFilter(ActivityFilter):
    """Negates its child."""

    def __init__(self, filter_to_negate: ActivityFilter):
        self.filter = filter_to_negate

    def evaluate(self, activity: Activity) -> bool:
        return not self.filter.evaluate(activity)

    def describe(self) -> str:
        return f"NOT {self.filter.describe()}"


def build_default_filter(config: AppConfig | None = None) -> ActivityFilter:
    """Build the standard filter: (comment OR meaningful change) AND not excluded.

    Args:
        config: Application configuration supplying the field and project
            lists (built-in defaults when omitted)

    Returns:
        The composed filter
    """
    config = config or AppConfig()
    return AndFilter(
        [
            OrFilter(
                [
                    HasCommentFilter(),
                    MeaningfulChangeFilter(config.milestone_fields, config.assignee_fields),
                ]
            ),
            ExcludeProjectFilter(config.excluded_project_keys),
        ]
    )
