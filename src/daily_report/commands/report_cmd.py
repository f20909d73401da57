"""Report command: run the activity pipeline and print the reports."""

import logging
from pathlib import Path
from typing import Any

import typer
from rich.text import Text

from daily_report.config.messages import ERROR_MESSAGES, INFO_MESSAGES
from daily_report.config.settings import BacklogSettings
from daily_report.exceptions import DailyReportError
from daily_report.models.config import Member, ReportGeneratorConfig
from daily_report.models.enums import DateStyle, ReportFormat
from daily_report.services.activity_service import ActivityService
from daily_report.services.activity_sources import (
    ActivitySource,
    BacklogActivitySource,
    JsonFileActivitySource,
)
from daily_report.services.config_service import get_config_service
from daily_report.utils import get_console, print_error, print_info, print_panel

logger = logging.getLogger(__name__)


def _build_source(input_file: Path | None) -> ActivitySource:
    if input_file is not None:
        return JsonFileActivitySource(input_file)
    return BacklogActivitySource(BacklogSettings())


def _report_overrides(
    base: ReportGeneratorConfig,
    report_format: ReportFormat | None,
    date_style: DateStyle | None,
) -> ReportGeneratorConfig:
    update: dict[str, Any] = {}
    if report_format is not None:
        update["format"] = report_format
    if date_style is not None:
        update["date_style"] = date_style
    return base.model_copy(update=update) if update else base


def run_command(
    user_id: int | None = None,
    date: str | None = None,
    report_format: ReportFormat | None = None,
    date_style: DateStyle | None = None,
    input_file: Path | None = None,
    config_file: Path | None = None,
    as_json: bool = False,
) -> None:
    """Build and print reports for one user or for every configured member.

    Raises:
        typer.Exit: With code 1 on configuration, source or pipeline errors
    """
    try:
        config = get_config_service(config_path=config_file).load_config()
    except DailyReportError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    source = _build_source(input_file)
    issues = source.validate()
    if issues:
        for issue in issues:
            print_error(issue)
        raise typer.Exit(code=1)

    if user_id is not None:
        members = [Member(id=user_id, name=str(user_id))]
    else:
        members = list(config.daily_reports.members)
    if not members:
        print_error(ERROR_MESSAGES["no_members"])
        raise typer.Exit(code=1)

    service = ActivityService(
        source,
        config=config,
        report_config=_report_overrides(config.report, report_format, date_style),
    )

    try:
        results = service.collect_reports(members, date)
    except DailyReportError as e:
        logger.debug("Pipeline failed", exc_info=True)
        print_error(str(e))
        raise typer.Exit(code=1)

    if as_json:
        payload = [
            {"userId": member.id, "name": member.name, **result.to_dict()}
            for member, result in results
        ]
        get_console().print_json(data=payload)
        return

    for member, result in results:
        title = INFO_MESSAGES["report_heading"].format(name=member.name, date=result.date)
        if not result.activities:
            print_info(INFO_MESSAGES["no_activity"].format(name=member.name, date=result.date))
        print_panel(Text(result.report), title=title)
