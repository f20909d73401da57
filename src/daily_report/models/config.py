"""Configuration models for backlog-daily-report."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from daily_report.constants import (
    ASSIGNEE_FIELDS,
    DEFAULT_ACTIVITY_COUNT,
    DEFAULT_EXCLUDED_PROJECT_KEYS,
    DEFAULT_TIMEZONE,
    MAX_ACTIVITY_COUNT,
    MILESTONE_FIELDS,
)
from daily_report.exceptions import ConfigurationError
from daily_report.models.enums import DateStyle, ReportFormat


class ReportGeneratorConfig(BaseModel):
    """Options governing the shape of a rendered report."""

    model_config = ConfigDict(frozen=True)

    format: ReportFormat = Field(default=ReportFormat.MARKDOWN, description="Output format")
    date_style: DateStyle = Field(
        default=DateStyle.TIME, description="How activity timestamps are rendered"
    )
    title: str = Field(default="Daily Report", description="Report title")
    group_by_project: bool = Field(default=True, description="Emit one section per project")
    include_changes: bool = Field(default=True, description="List field changes")
    include_comments: bool = Field(default=True, description="Include comment excerpts")
    max_comment_length: int = Field(
        default=200, ge=1, description="Comment excerpts are truncated past this length"
    )
    empty_message: str = Field(
        default="No meaningful activity.", description="Body used when nothing was selected"
    )


class Member(BaseModel):
    """A team member whose activity is reported."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Backlog numeric user id")
    name: str = Field(description="Display name")
    issue_type_id: int | None = Field(
        default=None, description="Issue type used when filing the member's report"
    )
    parent_issue_id: int | None = Field(
        default=None, description="Parent issue the member's reports are filed under"
    )


class DailyReportsConfig(BaseModel):
    """Where reports are delivered. Passed through untouched by the pipeline."""

    model_config = ConfigDict(frozen=True)

    project_id: int | None = Field(default=None, description="Backlog project receiving reports")
    members: list[Member] = Field(default_factory=list, description="Reported team members")


class AppConfig(BaseModel):
    """Process-wide configuration. Loaded once at start-up, never mutated."""

    model_config = ConfigDict(frozen=True)

    excluded_project_keys: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDED_PROJECT_KEYS),
        description="Project keys whose activities are never reported (case-sensitive)",
    )
    milestone_fields: list[str] = Field(
        default_factory=lambda: list(MILESTONE_FIELDS),
        description="Field ids or labels treated as due-date changes",
    )
    assignee_fields: list[str] = Field(
        default_factory=lambda: list(ASSIGNEE_FIELDS),
        description="Field ids or labels treated as assignee changes",
    )
    timezone: str = Field(
        default=DEFAULT_TIMEZONE,
        description="Timezone used to resolve 'today' when no report date is given",
    )
    activity_count: int = Field(
        default=DEFAULT_ACTIVITY_COUNT,
        ge=1,
        le=MAX_ACTIVITY_COUNT,
        description="Activities requested per fetch",
    )
    daily_reports: DailyReportsConfig = Field(
        default_factory=DailyReportsConfig, description="Report delivery target"
    )
    report: ReportGeneratorConfig = Field(
        default_factory=ReportGeneratorConfig, description="Default report options"
    )

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone {value!r}") from e
        return value

    @classmethod
    def load(cls, config_path: Path) -> "AppConfig":
        """Load configuration from file.

        A missing or empty file yields the defaults.

        Raises:
            ConfigurationError: If the file is not valid YAML or fails validation
        """
        if not config_path.exists():
            return cls()

        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Could not read configuration: {e}", config_file=config_path
            ) from e

        if not data:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Configuration must be a mapping", config_file=config_path
            )

        try:
            return cls(**data)
        except ValidationError as e:
            first = e.errors()[0]
            key = ".".join(str(part) for part in first["loc"])
            raise ConfigurationError(
                f"Invalid configuration: {first['msg']}", config_file=config_path, key=key
            ) from e

    def save(self, config_path: Path) -> None:
        """Save configuration to file."""

        # Keep short lists inline, longer ones multi-line
        class InlineListDumper(yaml.SafeDumper):
            pass

        def represent_list(dumper: yaml.SafeDumper, data: list[Any]) -> yaml.nodes.Node:
            if len(data) <= 3:
                return dumper.represent_sequence("tag:yaml.org,2002:seq", data, flow_style=True)
            return dumper.represent_sequence("tag:yaml.org,2002:seq", data, flow_style=False)

        InlineListDumper.add_representer(list, represent_list)

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            yaml.dump(
                self.model_dump(mode="json", exclude_none=True),
                f,
                Dumper=InlineListDumper,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
