"""
JSON formatter for structured logging

Formats log entries as JSON objects
"""

from typing import Optional

from simple_logger.core.log_entry import LogEntry
from simple_logger.formatters.default_formatter import DefaultFormatter
from simple_logger.formatters.formatter_config import FormatterConfig


class JSONFormatter(DefaultFormatter):
    """
    Format log entries as JSON objects.

    Produces structured log output suitable for log aggregation systems.
    """

    def __init__(
        self,
        config: Optional[FormatterConfig] = None,
        include_context: bool = True,
        include_extra: bool = True,
    ):
        """
        Initialize JSON formatter.

        Args:
            config: Normalization settings
            include_context: Include remaining context fields in output
            include_extra: Include injector-provided extra fields in output

        Example:
            # One compact JSON document per entry
            formatter = JSONFormatter()

            # Message and level only
            formatter = JSONFormatter(include_context=False, include_extra=False)
        """
        super().__init__(config)
        self.include_context = include_context
        self.include_extra = include_extra

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as JSON.

        Args:
            entry: Log entry to format

        Returns:
            JSON string
        """
        formatted = super().format(entry)

        log_dict = formatted.to_dict()

        if not (self.include_context and log_dict["context"]):
            del log_dict["context"]

        if self.include_extra and log_dict["extra"]:
            log_dict["extra"] = self.normalize_data(log_dict["extra"])
        else:
            del log_dict["extra"]

        return self.safe_json_encode(log_dict)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"JSONFormatter(context={self.include_context}, "
            f"extra={self.include_extra})"
        )
