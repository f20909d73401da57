"""Report generators.

Generators turn an ordered sequence of already-filtered activities into
report text. They never decide which activities are included.

Two variants exist:
- ReportGenerator: fixed output, cannot be reconfigured.
- ConfigurableReportGenerator: additionally exposes configure().

Callers that want to reconfigure a generator check supports_configuration()
first; ActivityService.configure_report does this and degrades to a logged
warning for fixed generators.

Example:
    >>> generator = TemplateReportGenerator(ReportGeneratorConfig(format=ReportFormat.PLAIN))
    >>> print(generator.generate(result.activities))
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from daily_report.grouping import group_by_project
from daily_report.models.activity import Activity
from daily_report.models.config import ReportGeneratorConfig
from daily_report.models.enums import ReportFormat
from daily_report.report.formatters import DateFormatter, DefaultDateFormatter
from daily_report.report.templates import (
    HtmlTemplate,
    MarkdownTemplate,
    ReportTemplate,
    TextTemplate,
)

logger = logging.getLogger(__name__)

TEMPLATES: dict[ReportFormat, type[ReportTemplate]] = {
    ReportFormat.PLAIN: TextTemplate,
    ReportFormat.MARKDOWN: MarkdownTemplate,
    ReportFormat.HTML: HtmlTemplate,
}

ELLIPSIS = "…"


class ReportGenerator(ABC):
    """Base class for report generators."""

    @abstractmethod
    def generate(self, activities: Sequence[Activity], date: str | None = None) -> str:
        """Render activities into report text.

        Args:
            activities: Filtered activities in report order
            date: Report day shown in the title; when omitted, the day of
                the first activity is used

        Returns:
            Report text; identical input yields identical output
        """


class ConfigurableReportGenerator(ReportGenerator):
    """Report generator whose options can be replaced between runs."""

    @property
    @abstractmethod
    def config(self) -> ReportGeneratorConfig:
        """Options currently in effect."""

    @abstractmethod
    def configure(self, config: ReportGeneratorConfig) -> None:
        """Replace the options used by subsequent generate() calls."""


def supports_configuration(generator: ReportGenerator) -> bool:
    """Whether the generator accepts configure()."""
    return isinstance(generator, ConfigurableReportGenerator)


def excerpt(text: str, max_length: int) -> str:
    """Collapse whitespace and truncate text to max_length characters."""
    flat = " ".join(text.split())
    if len(flat) <= max_length:
        return flat
    return flat[: max_length - 1].rstrip() + ELLIPSIS


def render_report(
    activities: Sequence[Activity],
    template: ReportTemplate,
    formatter: DateFormatter,
    options: ReportGeneratorConfig,
    date: str | None = None,
) -> str:
    """Render activities with the given template, formatter and options."""
    if date is None and activities:
        date = activities[0].created_day
    lines = [template.title(options.title, date)]

    if not activities:
        lines.append(template.empty(options.empty_message))
        return template.join(lines)

    if options.group_by_project:
        for group in group_by_project(activities).values():
            lines.append(template.project_heading(group[0].project, len(group)))
            for activity in group:
                lines.extend(_render_activity(activity, template, formatter, options))
    else:
        for activity in activities:
            lines.extend(_render_activity(activity, template, formatter, options))

    return template.join(lines)


def _render_activity(
    activity: Activity,
    template: ReportTemplate,
    formatter: DateFormatter,
    options: ReportGeneratorConfig,
) -> list[str]:
    lines = [template.activity_line(activity, formatter.format(activity.created))]
    comment = activity.content.comment
    if options.include_comments and comment is not None and comment.text:
        lines.append(template.comment(excerpt(comment.text, options.max_comment_length)))
    if options.include_changes:
        lines.extend(template.change(change) for change in activity.content.changes)
    return lines


class MarkdownReportGenerator(ReportGenerator):
    """Markdown report with the built-in layout. Not reconfigurable."""

    def __init__(self) -> None:
        self._template = MarkdownTemplate()
        self._formatter = DefaultDateFormatter()
        self._options = ReportGeneratorConfig()

    def generate(self, activities: Sequence[Activity], date: str | None = None) -> str:
        return render_report(activities, self._template, self._formatter, self._options, date)


class TemplateReportGenerator(ConfigurableReportGenerator):
    """Generator driven by a ReportGeneratorConfig.

    The config selects the template (plain, markdown, html) and the date
    style; an explicit template or formatter overrides that selection.
    """

    def __init__(
        self,
        config: ReportGeneratorConfig | None = None,
        template: ReportTemplate | None = None,
        date_formatter: DateFormatter | None = None,
    ):
        self._config = config or ReportGeneratorConfig()
        self._custom_template = template
        self._custom_formatter = date_formatter

    @property
    def config(self) -> ReportGeneratorConfig:
        return self._config

    @property
    def template(self) -> ReportTemplate:
        """Template used for the current config."""
        if self._custom_template is not None:
            return self._custom_template
        return TEMPLATES[self._config.format]()

    @property
    def date_formatter(self) -> DateFormatter:
        """Date formatter used for the current config."""
        if self._custom_formatter is not None:
            return self._custom_formatter
        return DefaultDateFormatter(self._config.date_style)

    def configure(self, config: ReportGeneratorConfig) -> None:
        logger.debug(
            f"Report generator reconfigured: format={config.format.value} "
            f"date_style={config.date_style.value}"
        )
        self._config = config

    def generate(self, activities: Sequence[Activity], date: str | None = None) -> str:
        return render_report(
            activities, self.template, self.date_formatter, self._config, date
        )
