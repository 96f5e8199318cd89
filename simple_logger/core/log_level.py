"""
Log level enumeration

PSR-3 style severity levels ordered by numeric priority.
"""

from enum import IntEnum
from typing import Any, Dict, Union

from simple_logger.core.exceptions import InvalidArgumentError


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Member values are the level priorities. The gaps between them are
    uneven and must stay exactly as listed.
    """

    EMERGENCY = 100
    ALERT = 70
    CRITICAL = 60
    ERROR = 50
    WARNING = 40
    NOTICE = 35
    INFO = 30
    DEBUG = 10

    def __str__(self) -> str:
        """Canonical lowercase level name."""
        return self.name.lower()

    @property
    def priority(self) -> int:
        """Numeric priority of this level."""
        return int(self.value)

    @property
    def label(self) -> str:
        """Uppercase label, e.g. ``WARNING``."""
        return self.name

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        """Check whether value is a LogLevel or a known lowercase level name."""
        return isinstance(value, cls) or (
            isinstance(value, str) and value in LEVEL_FROM_NAME
        )

    @classmethod
    def from_value(cls, value: Union["LogLevel", str]) -> "LogLevel":
        """
        Convert a level name to LogLevel.

        Args:
            value: Lowercase level name or an existing LogLevel

        Returns:
            LogLevel enum value

        Raises:
            InvalidArgumentError: If value is not a known level
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value in LEVEL_FROM_NAME:
            return LEVEL_FROM_NAME[value]
        raise InvalidArgumentError(f'Invalid log level "{value}".')

    def is_lower_than(self, other: Union["LogLevel", str]) -> bool:
        return self.priority < LogLevel.from_value(other).priority

    def is_higher_than(self, other: Union["LogLevel", str]) -> bool:
        return self.priority > LogLevel.from_value(other).priority

    def is_at_least(self, other: Union["LogLevel", str]) -> bool:
        return self.priority >= LogLevel.from_value(other).priority

    def is_at_most(self, other: Union["LogLevel", str]) -> bool:
        return self.priority <= LogLevel.from_value(other).priority

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        colors = {
            LogLevel.DEBUG: "\033[36m",      # Cyan
            LogLevel.INFO: "\033[32m",       # Green
            LogLevel.NOTICE: "\033[34m",     # Blue
            LogLevel.WARNING: "\033[33m",    # Yellow
            LogLevel.ERROR: "\033[31m",      # Red
            LogLevel.CRITICAL: "\033[35m",   # Magenta
            LogLevel.ALERT: "\033[1;35m",    # Bold magenta
            LogLevel.EMERGENCY: "\033[1;31m",  # Bold red
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


# Mapping from level name to level
LEVEL_FROM_NAME: Dict[str, LogLevel] = {
    level.name.lower(): level for level in LogLevel
}
