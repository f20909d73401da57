"""Configuration service for backlog-daily-report.

Locates, loads and writes the application configuration file
(daily-report.yaml in the project directory).

Configuration Hierarchy:
    1. Built-in defaults (in constants.py)
    2. Project config (daily-report.yaml)
    3. Environment variables (Backlog credentials, see config/settings.py)
    4. Command-line arguments (highest priority)

Typical Usage:
    >>> service = ConfigService(project_root=Path.cwd())
    >>> config = service.load_config()
    >>> config.excluded_project_keys
    ['DAILY_REPORT']
"""

import logging
from pathlib import Path

from daily_report.config.paths import CONFIG_FILE
from daily_report.models.config import AppConfig

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for managing configuration."""

    def __init__(self, project_root: Path | None = None, config_path: Path | None = None):
        """Initialize config service.

        Args:
            project_root: Project root directory (defaults to current directory)
            config_path: Explicit config file; overrides the project default
        """
        self.project_root = project_root or Path.cwd()
        self.config_path = config_path or self.project_root / CONFIG_FILE

    def load_config(self) -> AppConfig:
        """Load configuration from file.

        Returns:
            AppConfig (defaults if the file does not exist)

        Raises:
            ConfigurationError: If the file exists but is invalid
        """
        if not self.config_exists():
            logger.debug(f"No configuration at {self.config_path}, using defaults")
        return AppConfig.load(self.config_path)

    def save_config(self, config: AppConfig) -> None:
        """Save configuration to file."""
        config.save(self.config_path)

    def create_default_config(self) -> AppConfig:
        """Write the default configuration and return it."""
        config = AppConfig()
        self.save_config(config)
        logger.info(f"Wrote default configuration to {self.config_path}")
        return config

    def config_exists(self) -> bool:
        """Check if configuration file exists."""
        return self.config_path.is_file()


def get_config_service(
    project_root: Path | None = None, config_path: Path | None = None
) -> ConfigService:
    """Get a ConfigService instance.

    Args:
        project_root: Project root directory (defaults to current directory)
        config_path: Explicit config file path

    Returns:
        ConfigService instance
    """
    return ConfigService(project_root, config_path)
