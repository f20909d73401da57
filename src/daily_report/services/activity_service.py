"""Activity pipeline: fetch, narrow to one day, filter, group, report.

Architecture:
    CLI / host → ActivityService → ActivitySource → Backlog API
                                 → ActivityFilter
                                 → ReportGenerator

The filter and the report generator are strategies: both can be passed at
construction and replaced between runs. The service keeps no state from one
run to the next, so repeated calls with the same inputs return equal results.

Example:
    >>> service = ActivityService(BacklogActivitySource(), config=config)
    >>> result = service.get_meaningful_activities(12345, "2024-05-01")
    >>> print(result.report)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import date as date_type
from datetime import datetime
from zoneinfo import ZoneInfo

from daily_report.config.messages import ERROR_MESSAGES, WARNING_MESSAGES
from daily_report.constants import DATE_FORMAT, DATE_INPUT_FORMATS
from daily_report.exceptions import (
    ActivitySourceError,
    InvalidDateError,
    SourceUnavailableError,
)
from daily_report.filters import ActivityFilter, build_default_filter
from daily_report.grouping import group_by_project
from daily_report.models.activity import ActivityResult
from daily_report.models.config import AppConfig, Member, ReportGeneratorConfig
from daily_report.report.generators import (
    ReportGenerator,
    TemplateReportGenerator,
    supports_configuration,
)
from daily_report.services.activity_sources.base import ActivitySource

logger = logging.getLogger(__name__)

DateInput = date_type | datetime | str | None


def normalize_date(
    value: DateInput,
    timezone: str,
    now: Callable[[], datetime] | None = None,
) -> str:
    """Reduce a date-like value to a ``YYYY-MM-DD`` string.

    Args:
        value: Date, datetime or date string (ISO-8601, or YYYY-M-D and
            YYYY/M/D); None means today
        timezone: Timezone for "today" and for converting aware datetimes.
            Naive values are taken as already being in this timezone.
        now: Clock returning the current aware datetime (for tests)

    Returns:
        The calendar day

    Raises:
        ValueError: If a string value is not a recognised date
    """
    tz = ZoneInfo(timezone)
    if value is None:
        current = now() if now else datetime.now(tz)
        value = current
    elif isinstance(value, str):
        value = _parse_date_string(value.strip())

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(tz)
        return value.date().strftime(DATE_FORMAT)
    return value.strftime(DATE_FORMAT)


def _parse_date_string(text: str) -> datetime:
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for pattern in DATE_INPUT_FORMATS:
        try:
            return datetime.strptime(text, pattern)
        except ValueError:
            continue
    raise ValueError(f"Unrecognised date: {text!r}")


class ActivityService:
    """Builds a day's meaningful-activity report for one user."""

    def __init__(
        self,
        source: ActivitySource,
        config: AppConfig | None = None,
        activity_filter: ActivityFilter | None = None,
        report_generator: ReportGenerator | None = None,
        report_config: ReportGeneratorConfig | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize the service.

        Args:
            source: Where activities are fetched from
            config: Application configuration (defaults when omitted)
            activity_filter: Filter to apply; defaults to
                (comment OR meaningful change) AND not excluded project
            report_generator: Generator to use; defaults to a
                TemplateReportGenerator built from report_config
            report_config: Report options for the default generator;
                falls back to config.report
            clock: Returns the current time, used when no date is given
        """
        self.source = source
        self.config = config or AppConfig()
        self._clock = clock
        self._filter = activity_filter or build_default_filter(self.config)
        if report_generator is not None:
            self._report_generator = report_generator
        else:
            self._report_generator = TemplateReportGenerator(report_config or self.config.report)

    @property
    def activity_filter(self) -> ActivityFilter:
        """Filter applied by the next run."""
        return self._filter

    @property
    def report_generator(self) -> ReportGenerator:
        """Generator used by the next run."""
        return self._report_generator

    def set_filter(self, activity_filter: ActivityFilter) -> None:
        """Replace the active filter."""
        self._filter = activity_filter

    def set_report_generator(self, generator: ReportGenerator) -> None:
        """Replace the active report generator."""
        self._report_generator = generator

    def configure_report(self, report_config: ReportGeneratorConfig) -> bool:
        """Apply new report options to the active generator.

        Generators that cannot be reconfigured are left untouched and a
        warning is logged.

        Returns:
            True if the options were applied, False otherwise
        """
        generator = self._report_generator
        if not supports_configuration(generator):
            logger.warning(
                WARNING_MESSAGES["generator_not_configurable"].format(
                    generator=type(generator).__name__
                )
            )
            return False
        generator.configure(report_config)  # type: ignore[attr-defined]
        return True

    def get_meaningful_activities(self, user_id: int, date: DateInput = None) -> ActivityResult:
        """Collect and report a user's meaningful activities for one day.

        Args:
            user_id: Numeric user id on the tracking service
            date: Report day; today (in the configured timezone) when omitted

        Returns:
            ActivityResult with the filtered activities, their grouping by
            project key, and the rendered report

        Raises:
            InvalidDateError: If date cannot be normalized
            SourceUnavailableError: If the activity fetch fails
        """
        try:
            day = normalize_date(date, self.config.timezone, self._clock)
        except ValueError as e:
            raise InvalidDateError(
                ERROR_MESSAGES["invalid_date"].format(date=date),
                user_id=user_id,
                date=str(date),
                stage="normalize_date",
            ) from e

        logger.info(f"Collecting activities for user {user_id} on {day}")

        try:
            fetched = self.source.fetch_user_activities(user_id, self.config.activity_count)
        except ActivitySourceError as e:
            raise SourceUnavailableError(
                f"{ERROR_MESSAGES['fetch_failed'].format(user_id=user_id)}: {e}",
                user_id=user_id,
                date=day,
                stage="fetch",
            ) from e

        # Days are compared as sent by the source; the source owns timezone handling
        on_day = [activity for activity in fetched if activity.created_day == day]
        selected = [activity for activity in on_day if self._filter.evaluate(activity)]
        grouped = group_by_project(selected)
        report = self._report_generator.generate(selected, day)

        logger.debug(
            f"User {user_id} on {day}: fetched={len(fetched)} on_day={len(on_day)} "
            f"kept={len(selected)} projects={list(grouped)} filter={self._filter.describe()}"
        )

        return ActivityResult(
            date=day,
            activities=selected,
            grouped_by_project=grouped,
            report=report,
        )

    def collect_reports(
        self, members: Iterable[Member] | None = None, date: DateInput = None
    ) -> list[tuple[Member, ActivityResult]]:
        """Run the pipeline for several members.

        Args:
            members: Members to report on; defaults to the configured team
            date: Report day shared by every member

        Returns:
            (member, result) pairs in member order

        Raises:
            SourceUnavailableError: On the first member whose fetch fails
        """
        if members is None:
            members = self.config.daily_reports.members
        return [(member, self.get_meaningful_activities(member.id, date)) for member in members]
