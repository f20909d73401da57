"""Activity models for Backlog user activity payloads.

Models are immutable and parse the upstream camelCase payload through
aliases. Unknown keys are ignored, and optional structures that are missing
or null parse as empty so that one malformed record never fails a batch.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from daily_report.constants import ACTIVITY_TYPE_LABELS, UNKNOWN_ACTIVITY_LABEL

_MODEL_CONFIG = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class Change(BaseModel):
    """A single field change recorded on an issue update."""

    model_config = _MODEL_CONFIG

    field: str = ""
    field_text: str | None = None
    old_value: str | None = None
    new_value: str | None = None
    type: str = "standard"

    @property
    def label(self) -> str:
        """Display label for the changed field."""
        return self.field_text or self.field


class Comment(BaseModel):
    """Comment attached to an activity."""

    model_config = _MODEL_CONFIG

    id: int | None = None
    content: str | None = None

    @property
    def text(self) -> str:
        """Comment body with surrounding whitespace removed."""
        return (self.content or "").strip()


class Content(BaseModel):
    """Activity payload. Comment and changes may each be absent."""

    model_config = _MODEL_CONFIG

    id: int | None = None
    key_id: int | None = None
    summary: str | None = None
    description: str | None = None
    comment: Comment | None = None
    changes: list[Change] = Field(default_factory=list)

    @field_validator("changes", mode="before")
    @classmethod
    def _none_changes_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class Project(BaseModel):
    """Project an activity belongs to."""

    model_config = _MODEL_CONFIG

    id: int
    project_key: str = Field(alias="projectKey")
    name: str = ""


class User(BaseModel):
    """User that created an activity."""

    model_config = _MODEL_CONFIG

    id: int
    user_id: str | None = Field(default=None, alias="userId")
    name: str = ""


class Activity(BaseModel):
    """One recorded event on the project-tracking service."""

    model_config = _MODEL_CONFIG

    id: int
    project: Project
    type: int
    content: Content = Field(default_factory=Content)
    created_user: User | None = Field(default=None, alias="createdUser")
    created: str

    @field_validator("content", mode="before")
    @classmethod
    def _none_content_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def type_label(self) -> str:
        """Readable name of the activity type."""
        return ACTIVITY_TYPE_LABELS.get(self.type, UNKNOWN_ACTIVITY_LABEL)

    @property
    def created_day(self) -> str:
        """Calendar-day part of the creation timestamp, as sent by the source."""
        return self.created.split("T")[0]

    @property
    def issue_key(self) -> str | None:
        """Issue key such as ``ABC-12`` when the payload carries one."""
        if self.content.key_id is None:
            return None
        return f"{self.project.project_key}-{self.content.key_id}"


ProjectActivitiesMap = dict[str, list[Activity]]


class ActivityResult(BaseModel):
    """Outcome of one pipeline run."""

    model_config = _MODEL_CONFIG

    date: str
    activities: list[Activity] = Field(default_factory=list)
    grouped_by_project: ProjectActivitiesMap = Field(
        default_factory=dict, alias="groupedByProject"
    )
    report: str = ""

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping using the upstream camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
