"""
Default formatter

Interpolates context values into message placeholders and normalizes the
remaining context. The result is another LogEntry.
"""

from typing import Any

from simple_logger.core.log_entry import LogEntry
from simple_logger.formatters.normalizing_formatter import NormalizingFormatter


class DefaultFormatter(NormalizingFormatter):
    """
    Format a log entry into a LogEntry with an interpolated message and a
    normalized, JSON-safe context.

    Example:
        formatter = DefaultFormatter()
        entry = LogEntry("info", "User {user} logged in", {"user": "bob", "ip": "::1"})
        formatter.format(entry).message   # "User bob logged in"
        formatter.format(entry).context   # {"ip": "::1"}
    """

    def set_remove_context_keys_once_mapped(self, remove: bool) -> "DefaultFormatter":
        """Set whether context keys consumed by placeholders are dropped."""
        self.config.remove_context_keys_once_mapped = remove
        return self

    def format(self, entry: LogEntry) -> LogEntry:
        """
        Format log entry.

        Args:
            entry: Log entry to format

        Returns:
            New LogEntry; level, timestamp, channel and extra are unchanged
        """
        context = dict(entry.context)
        message = self.interpolate(entry.message, context)

        if not self.config.remove_context_keys_once_mapped:
            context = dict(entry.context)

        return entry.with_message_and_context(message, self.normalize_data(context))

    def stringify_json_serializable(self, value: Any) -> str:
        """Render JSON-serializable values as compact JSON."""
        return self.safe_json_encode(self.normalize_json_serializable(value))

    def __repr__(self) -> str:
        """String representation."""
        return f"DefaultFormatter(config={self.config})"
