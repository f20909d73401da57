"""UI messages and strings for backlog-daily-report."""

# =============================================================================
# Project Metadata
# =============================================================================

PROJECT_TAGLINE = "Daily activity reports from Backlog"

# =============================================================================
# Success Messages
# =============================================================================

SUCCESS_MESSAGES = {
    "config_created": "Created configuration at {path}",
    "source_valid": "Backlog settings look good ({space_url})",
}

# =============================================================================
# Error Messages
# =============================================================================

ERROR_MESSAGES = {
    "generic_error": "An error occurred: {error}",
    "config_exists": "Configuration already exists at {path}. Use --force to overwrite.",
    "no_members": "No user given and no members configured under daily_reports.members",
    "space_url_missing": "Backlog space URL is not set (DAILY_REPORT_BACKLOG_SPACE_URL)",
    "api_key_missing": "Backlog API key is not set (DAILY_REPORT_BACKLOG_API_KEY)",
    "fetch_failed": "Failed to fetch activities for user {user_id}",
    "invalid_date": "Invalid report date: {date!r}",
    "invalid_payload": "Unexpected activity payload from {source}",
    "file_not_found": "Activity file not found: {path}",
    "config_invalid": "Invalid configuration file",
}

# =============================================================================
# Warning Messages
# =============================================================================

WARNING_MESSAGES = {
    "generator_not_configurable": (
        "Report generator {generator} does not support configuration; ignoring new settings"
    ),
    "skipped_malformed_activity": "Skipping malformed activity record at index {index}: {error}",
}

# =============================================================================
# Info Messages
# =============================================================================

INFO_MESSAGES = {
    "report_heading": "{name} ({date})",
    "no_activity": "No meaningful activity for {name} on {date}",
}
