"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from typing import Any

from simple_logger.core.log_entry import LogEntry


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters convert LogEntry objects into a handler-specific
    representation: another LogEntry, a string, a structured payload.
    """

    @abstractmethod
    def format(self, entry: LogEntry) -> Any:
        """
        Format a log entry.

        Args:
            entry: The log entry to format

        Returns:
            Formatted representation of the log entry
        """
        pass

    def __call__(self, entry: LogEntry) -> Any:
        """Allow formatters to be callable."""
        return self.format(entry)
