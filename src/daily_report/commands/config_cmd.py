"""Configuration commands: create the config file and check credentials."""

from pathlib import Path

import typer

from daily_report.config.messages import ERROR_MESSAGES, SUCCESS_MESSAGES
from daily_report.config.settings import BacklogSettings
from daily_report.services.activity_sources import BacklogActivitySource
from daily_report.services.config_service import get_config_service
from daily_report.utils import print_error, print_info, print_success


def init_command(force: bool = False, config_file: Path | None = None) -> None:
    """Write the default configuration file.

    Raises:
        typer.Exit: With code 1 if the file exists and force is not set
    """
    service = get_config_service(config_path=config_file)
    if service.config_exists() and not force:
        print_error(ERROR_MESSAGES["config_exists"].format(path=service.config_path))
        raise typer.Exit(code=1)

    service.create_default_config()
    print_success(SUCCESS_MESSAGES["config_created"].format(path=service.config_path))


def check_command() -> None:
    """Validate the Backlog connection settings.

    Raises:
        typer.Exit: With code 1 if settings are incomplete
    """
    settings = BacklogSettings()
    issues = BacklogActivitySource(settings).validate()
    if issues:
        print_error("Backlog settings are incomplete:")
        for issue in issues:
            print_info(f"   • {issue}")
        raise typer.Exit(code=1)

    print_success(SUCCESS_MESSAGES["source_valid"].format(space_url=settings.space_url))
