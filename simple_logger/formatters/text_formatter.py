"""
Text formatter with customizable template

Formats log entries into single lines using a template string
"""

from typing import Any, Mapping, Optional

from simple_logger.core.log_entry import LogEntry
from simple_logger.formatters.default_formatter import DefaultFormatter
from simple_logger.formatters.formatter_config import FormatterConfig


class TextFormatter(DefaultFormatter):
    """
    Format log entries using a customizable template.

    The message is interpolated first; leftover context and extra data are
    appended as compact JSON.
    """

    DEFAULT_TEMPLATE = "[{timestamp}] [{level}] [{channel}] {message} {context} {extra}"

    def __init__(
        self,
        template: Optional[str] = None,
        timestamp_format: str = "%Y-%m-%d %H:%M:%S.%f",
        config: Optional[FormatterConfig] = None,
    ):
        """
        Initialize text formatter.

        Args:
            template: Format template with placeholders.
                     Available placeholders:
                     - {timestamp}: Timestamp
                     - {level}: Level label, e.g. WARNING
                     - {channel}: Channel name
                     - {message}: Interpolated message
                     - {context}: Remaining context as JSON, empty if none
                     - {extra}: Extra data as JSON, empty if none
            timestamp_format: strftime format for timestamps
            config: Normalization settings

        Example:
            formatter = TextFormatter("{level} - {message}")
        """
        super().__init__(config)
        self.template = template or self.DEFAULT_TEMPLATE
        self.timestamp_format = timestamp_format

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry using the template.

        Args:
            entry: Log entry to format

        Returns:
            Formatted string
        """
        formatted = super().format(entry)

        timestamp_str = formatted.timestamp.strftime(self.timestamp_format)
        if self.timestamp_format.endswith("%f"):
            timestamp_str = timestamp_str[:-3]  # Milliseconds

        format_dict = {
            "timestamp": timestamp_str,
            "level": formatted.level.label,
            "channel": formatted.channel_name,
            "message": formatted.message,
            "context": self._render_mapping(formatted.context),
            "extra": self._render_mapping(self.normalize_data(dict(formatted.extra))),
        }

        try:
            return self.template.format(**format_dict).rstrip()
        except (KeyError, IndexError, AttributeError, ValueError) as e:
            # Unknown placeholder or malformed template
            return f"[FORMAT ERROR: {e}] {formatted.message}"

    def _render_mapping(self, data: Mapping[str, Any]) -> str:
        return self.safe_json_encode(dict(data)) if data else ""

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(template='{self.template}')"
