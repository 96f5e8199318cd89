"""
Base handler interface

Every sink registered with a Logger must extend BaseHandler.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Sequence

from simple_logger.core.exceptions import InvalidArgumentError
from simple_logger.core.log_entry import LogEntry

Injector = Callable[[LogEntry], LogEntry]


class BaseHandler(ABC):
    """
    Abstract base class for log handlers.

    Handlers decide whether to accept a log entry and, if so, persist or
    forward it. Each handler keeps its own ordered list of injectors which
    the Logger applies before asking the handler about an entry.
    """

    def __init__(self):
        self._injectors: List[Injector] = []

    @abstractmethod
    def handle(self, entry: LogEntry) -> None:
        """
        Handle a log entry.

        Args:
            entry: The log entry to handle

        Raises:
            Exception: Any handler-specific write failure. The Logger
                catches it, so implementations need not.
        """
        pass

    @abstractmethod
    def should_handle(self, entry: LogEntry) -> bool:
        """
        Determine if the handler should handle a log entry.

        Args:
            entry: The log entry to check

        Returns:
            True if the entry should be handled, False otherwise
        """
        pass

    def get_injectors(self) -> List[Injector]:
        """Return the handler's injectors in registration order."""
        return list(self._injectors)

    def add_injector(self, injector: Injector) -> "BaseHandler":
        """
        Add an injector applied to entries before they reach this handler.

        Args:
            injector: Callable taking a LogEntry and returning a LogEntry

        Returns:
            Self for method chaining
        """
        if not callable(injector):
            raise InvalidArgumentError("injector must be callable")

        self._injectors.append(injector)
        return self


class BatchHandler(BaseHandler):
    """
    Handler able to process many log entries in a single call.

    BufferHandler prefers handle_batch over per-entry handle calls when
    the wrapped handler extends this class.
    """

    @abstractmethod
    def handle_batch(self, entries: Sequence[LogEntry]) -> None:
        """
        Process a batch of log entries.

        Args:
            entries: Log entries in the order they were logged
        """
        pass
