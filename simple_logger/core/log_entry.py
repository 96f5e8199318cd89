"""
Log entry data structure

An immutable record of a single log event. Entries are passed through
injectors, formatters and handlers; because they cannot be modified in
place, no handler can interfere with what another handler receives.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from simple_logger.core.log_level import LogLevel

DEFAULT_CHANNEL = "default"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, init=False)
class LogEntry:
    """
    Log entry data structure.

    Contains all information about a single log message. Use the
    ``with_*`` methods to derive modified copies.
    """

    level: LogLevel
    message: str
    context: Mapping[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=_utc_now)
    channel_name: str = DEFAULT_CHANNEL
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __init__(
        self,
        level: Union[LogLevel, str],
        message: str,
        context: Optional[Mapping[str, Any]] = None,
        timestamp: Optional[datetime] = None,
        channel_name: str = DEFAULT_CHANNEL,
        extra: Optional[Mapping[str, Any]] = None,
    ):
        # Frozen dataclass: fields are set through object.__setattr__
        object.__setattr__(self, "level", LogLevel.from_value(level))
        object.__setattr__(self, "message", message)
        object.__setattr__(self, "context", MappingProxyType(dict(context or {})))
        object.__setattr__(
            self, "timestamp", _utc_now() if timestamp is None else timestamp
        )
        object.__setattr__(self, "channel_name", channel_name)
        object.__setattr__(self, "extra", MappingProxyType(dict(extra or {})))

    def with_message(self, message: str) -> "LogEntry":
        """Return a copy with a different message."""
        return replace(self, message=message)

    def with_context(self, context: Mapping[str, Any]) -> "LogEntry":
        """Return a copy with the context replaced."""
        return replace(self, context=context)

    def with_channel_name(self, channel_name: str) -> "LogEntry":
        """Return a copy with a different channel name."""
        return replace(self, channel_name=channel_name)

    def with_extra(self, extra: Mapping[str, Any]) -> "LogEntry":
        """
        Return a copy with extra data merged in.

        Keys in ``extra`` replace existing keys of the same name; every other
        existing key is kept.

        Args:
            extra: Extra data to merge

        Returns:
            New LogEntry instance
        """
        merged = dict(self.extra)
        merged.update(extra)
        return replace(self, extra=merged)

    def with_message_and_context(
        self, message: str, context: Mapping[str, Any]
    ) -> "LogEntry":
        """Return a copy with both message and context replaced."""
        return replace(self, message=message, context=context)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "timestamp": self.timestamp.isoformat(),
            "level": str(self.level),
            "channel": self.channel_name,
            "message": self.message,
            "context": dict(self.context),
            "extra": dict(self.extra),
        }

    def __str__(self) -> str:
        """String representation."""
        return (
            f"[{self.timestamp.strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]}] "
            f"[{self.level.label:9}] "
            f"[{self.channel_name}] "
            f"{self.message}"
        )
