"""Report templates.

A template decides how each piece of a report is written out: the title,
a project heading, one line per activity, the comment excerpt and change
lines below it, and the message used when nothing was selected. Templates
know nothing about which activities were selected or how they are ordered.

Each variant is a Jinja2 layout in ``layouts/`` defining one macro per
piece (title, project_heading, activity_line, comment, change, empty,
document). HTML layouts are autoescaped. A custom layouts directory is
searched before the packaged one, so a file with the same name overrides
the built-in layout.
"""

from abc import ABC, abstractmethod
from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from daily_report.models.activity import Activity, Change, Project

LAYOUTS_DIR = Path(__file__).parent / "layouts"

NO_VALUE = "(none)"


@lru_cache(maxsize=8)
def _create_environment(search_path: tuple[str, ...]) -> Environment:
    """Create the Jinja2 environment for a layout search path."""
    loader = FileSystemLoader(list(search_path))
    return Environment(
        loader=loader,
        trim_blocks=True,
        lstrip_blocks=True,
        autoescape=select_autoescape(enabled_extensions=("html",), default_for_string=False),
    )


class ReportTemplate(ABC):
    """Base class for report templates."""

    def __init__(self, layouts_dir: Path | None = None):
        search_path = [str(LAYOUTS_DIR)]
        if layouts_dir is not None:
            search_path.insert(0, str(layouts_dir))
        self.env = _create_environment(tuple(search_path))

    @property
    @abstractmethod
    def layout(self) -> str:
        """Name of the Jinja2 layout file."""

    def _render(self, macro: str, **context: object) -> str:
        module = self.env.get_template(self.layout).module
        return str(getattr(module, macro)(**context))

    def title(self, text: str, date: str | None) -> str:
        """Report title line."""
        return self._render("title", text=text, date=date)

    def project_heading(self, project: Project, count: int) -> str:
        """Heading introducing one project's activities."""
        return self._render(
            "project_heading", name=project.name, key=project.project_key, count=count
        )

    def activity_line(self, activity: Activity, timestamp: str) -> str:
        """Summary line for one activity."""
        return self._render(
            "activity_line",
            timestamp=timestamp,
            label=activity.type_label,
            key=activity.issue_key or "",
            summary=activity.content.summary or "",
        )

    def comment(self, excerpt: str) -> str:
        """Comment excerpt shown below an activity."""
        return self._render("comment", excerpt=excerpt)

    def change(self, change: Change) -> str:
        """One field change shown below an activity."""
        return self._render(
            "change",
            label=change.label,
            old=change.old_value or NO_VALUE,
            new=change.new_value or NO_VALUE,
        )

    def empty(self, message: str) -> str:
        """Body used when there are no activities."""
        return self._render("empty", message=message)

    def join(self, lines: list[str]) -> str:
        """Assemble rendered lines into the final report."""
        return self._render("document", body="\n".join(lines))


class TextTemplate(ReportTemplate):
    """Plain text, suitable for chat messages and logs."""

    layout = "report.txt"


class MarkdownTemplate(ReportTemplate):
    """Markdown, the default for issue bodies."""

    layout = "report.md"


class HtmlTemplate(ReportTemplate):
    """HTML fragment. Every value taken from an activity is escaped."""

    layout = "report.html"
