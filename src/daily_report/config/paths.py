"""Path constants for backlog-daily-report."""

# Application configuration, looked up in the working directory
CONFIG_FILE = "daily-report.yaml"

# Local environment overrides loaded by the CLI
ENV_FILE = ".env"
