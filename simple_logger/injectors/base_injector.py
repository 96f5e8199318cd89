"""
Base injector interface

Injectors enrich a log entry's ``extra`` data. Any callable taking and
returning a LogEntry can be used as an injector; this base class covers
the common case of adding a single keyed value.
"""

from abc import ABC, abstractmethod
from typing import Any

from simple_logger.core.log_entry import LogEntry


class BaseInjector(ABC):
    """
    Abstract base class for keyed injectors.

    Subclasses set ``key`` and implement get_data().
    """

    key: str = ""

    def get_key(self) -> str:
        """Key under which the injected data is stored in ``extra``."""
        return self.key

    @abstractmethod
    def get_data(self, entry: LogEntry) -> Any:
        """
        Return the data to inject.

        Args:
            entry: The log entry being enriched

        Returns:
            Value stored under get_key()
        """
        pass

    def __call__(self, entry: LogEntry) -> LogEntry:
        """Return a copy of entry with the injected data merged into extra."""
        return entry.with_extra({self.get_key(): self.get_data(entry)})

    def __repr__(self) -> str:
        """String representation."""
        return f"{type(self).__name__}(key={self.key!r})"
