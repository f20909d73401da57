"""Utility helpers for backlog-daily-report."""

from daily_report.utils.console import (
    get_console,
    print_error,
    print_info,
    print_panel,
    print_success,
    print_warning,
)

__all__ = [
    "get_console",
    "print_error",
    "print_info",
    "print_panel",
    "print_success",
    "print_warning",
]
