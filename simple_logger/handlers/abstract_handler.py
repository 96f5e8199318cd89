"""
Level-threshold handler base

Supplies minimum-level filtering and formatter plumbing; concrete sinks
only implement process().
"""

from abc import abstractmethod
from typing import Optional, Union

from simple_logger.core.log_entry import LogEntry
from simple_logger.core.log_level import LogLevel
from simple_logger.formatters.base_formatter import BaseFormatter
from simple_logger.formatters.default_formatter import DefaultFormatter
from simple_logger.handlers.base_handler import BaseHandler


class AbstractHandler(BaseHandler):
    """
    Handler that only processes entries at or above a minimum level.
    """

    def __init__(
        self,
        min_level: Union[LogLevel, str] = LogLevel.DEBUG,
        formatter: Optional[BaseFormatter] = None,
    ):
        """
        Initialize handler.

        Args:
            min_level: Minimum level (inclusive) this handler processes
            formatter: Formatter applied by process() (default: DefaultFormatter)

        Raises:
            InvalidArgumentError: If min_level is not a known level
        """
        super().__init__()
        self.min_level = LogLevel.from_value(min_level)
        self.formatter = formatter or DefaultFormatter()

    def handle(self, entry: LogEntry) -> None:
        if self.should_log(entry):
            self.process(entry)

    def should_handle(self, entry: LogEntry) -> bool:
        return self.should_log(entry)

    def should_log(self, entry: LogEntry) -> bool:
        """Check the entry's level against the handler's minimum level."""
        return entry.level.is_at_least(self.min_level)

    def set_formatter(self, formatter: BaseFormatter) -> "AbstractHandler":
        """Set formatter; returns self for method chaining."""
        self.formatter = formatter
        return self

    def get_formatter(self) -> BaseFormatter:
        return self.formatter

    @abstractmethod
    def process(self, entry: LogEntry) -> None:
        """
        Write the log entry to the storage medium.

        Args:
            entry: Log entry that passed the level threshold
        """
        pass

    def __repr__(self) -> str:
        """String representation."""
        return f"{type(self).__name__}(min_level={self.min_level})"
