"""Rich console helpers for CLI output."""

from rich.console import Console, RenderableType
from rich.panel import Panel

_console = Console()
_err_console = Console(stderr=True)


def get_console() -> Console:
    """Return the shared stdout console."""
    return _console


def print_success(message: str) -> None:
    """Print a success message."""
    _console.print(f"[green]✓[/green] {message}")


def print_info(message: str) -> None:
    """Print an informational message."""
    _console.print(f"[cyan]ℹ[/cyan] {message}")


def print_warning(message: str) -> None:
    """Print a warning to stderr."""
    _err_console.print(f"[yellow]⚠[/yellow] {message}")


def print_error(message: str) -> None:
    """Print an error to stderr."""
    _err_console.print(f"[red]✗[/red] {message}")


def print_panel(content: RenderableType, title: str | None = None, style: str = "cyan") -> None:
    """Print content inside a bordered panel.

    Strings are parsed as rich markup; pass a rich Text for literal output.
    """
    _console.print(Panel(content, title=title, border_style=style))
