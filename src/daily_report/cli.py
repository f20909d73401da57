"""Main CLI entry point for backlog-daily-report."""

import logging
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from daily_report.commands.config_cmd import check_command, init_command
from daily_report.commands.report_cmd import run_command
from daily_report.config.messages import PROJECT_TAGLINE
from daily_report.config.paths import ENV_FILE
from daily_report.constants import VERSION
from daily_report.models.enums import DateStyle, ReportFormat
from daily_report.utils import print_error, print_panel

# Load .env file from current directory if it exists
load_dotenv(Path.cwd() / ENV_FILE, verbose=False)

app = typer.Typer(
    name="daily-report",
    help=PROJECT_TAGLINE,
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


@app.command("init")
def init(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing configuration file",
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file to create (default: ./daily-report.yaml)",
    ),
) -> None:
    """Create a daily-report.yaml with the default settings."""
    init_command(force=force, config_file=config_file)


@app.command("check")
def check() -> None:
    """Check that the Backlog space URL and API key are set."""
    check_command()


@app.command("run")
def run(
    user_id: int | None = typer.Option(
        None,
        "--user-id",
        "-u",
        help="Backlog user id (default: every member in the configuration)",
    ),
    date: str | None = typer.Option(
        None,
        "--date",
        "-d",
        help=(
            "Report day as YYYY-MM-DD, YYYY-M-D or YYYY/M/D "
            "(default: today in the configured timezone)"
        ),
    ),
    report_format: ReportFormat | None = typer.Option(
        None,
        "--format",
        "-f",
        case_sensitive=False,
        help="Report format: plain, markdown, html",
    ),
    date_style: DateStyle | None = typer.Option(
        None,
        "--date-style",
        case_sensitive=False,
        help="Timestamp style: time, datetime, iso",
    ),
    input_file: Path | None = typer.Option(
        None,
        "--input",
        "-i",
        help="Read activities from a saved JSON response instead of the Backlog API",
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (default: ./daily-report.yaml)",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the structured result as JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log pipeline details to stderr",
    ),
) -> None:
    """Build the daily activity report.

    Fetches the day's activities, keeps those with a comment or a meaningful
    change outside excluded projects, and prints one report per user.
    """
    _configure_logging(verbose)
    run_command(
        user_id=user_id,
        date=date,
        report_format=report_format,
        date_style=date_style,
        input_file=input_file,
        config_file=config_file,
        as_json=as_json,
    )


@app.command("version")
def version() -> None:
    """Show version information."""
    print_panel(
        f"[bold cyan]backlog-daily-report[/bold cyan] version [green]{VERSION}[/green]\n\n"
        f"{PROJECT_TAGLINE}",
        title="Version",
        style="cyan",
    )


def cli_main() -> None:
    """Main entry point for the CLI.

    This is the function that gets called when running 'daily-report'.
    It handles exceptions and provides user-friendly error messages.
    """
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        if isinstance(e, typer.Exit):
            sys.exit(e.exit_code)

        from daily_report.config.messages import ERROR_MESSAGES

        print_error(ERROR_MESSAGES["generic_error"].format(error=str(e)))
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
