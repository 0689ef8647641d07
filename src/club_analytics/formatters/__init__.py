"""Output formatting utilities."""

from club_analytics.formatters.console import format_report_for_console, sanitize_for_console

__all__ = ["format_report_for_console", "sanitize_for_console"]
