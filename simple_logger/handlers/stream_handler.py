"""Stream handler with ANSI colors"""

import sys
from typing import Optional, TextIO, Union

from simple_logger.core.log_entry import LogEntry
from simple_logger.core.log_level import LogLevel
from simple_logger.formatters.base_formatter import BaseFormatter
from simple_logger.formatters.text_formatter import TextFormatter
from simple_logger.handlers.abstract_handler import AbstractHandler


class StreamHandler(AbstractHandler):
    """Write log lines to a text stream with optional colors."""

    def __init__(
        self,
        min_level: Union[LogLevel, str] = LogLevel.DEBUG,
        stream: Optional[TextIO] = None,
        formatter: Optional[BaseFormatter] = None,
        colored: bool = False,
    ):
        """
        Initialize stream handler.

        Args:
            min_level: Minimum level this handler writes
            stream: Output stream (default: sys.stderr)
            formatter: Formatter producing the line (default: TextFormatter)
            colored: Wrap lines in ANSI color codes
        """
        super().__init__(min_level, formatter or TextFormatter())
        self.stream = stream or sys.stderr
        self.colored = colored

    def process(self, entry: LogEntry) -> None:
        """Write log entry to the stream."""
        msg = self.formatter.format(entry)
        if isinstance(msg, LogEntry):
            msg = str(msg)

        if self.colored:
            msg = f"{entry.level.color_code}{msg}{entry.level.reset_code}"

        self.stream.write(msg + "\n")
        self.stream.flush()

    def flush(self) -> None:
        """Flush stream."""
        self.stream.flush()
