"""
Main Logger class - synchronous dispatch pipeline

Validates the level, builds a LogEntry, applies injectors and fans the
entry out to every handler. A failing injector or handler never stops the
other handlers from receiving the entry.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo
from typing import Any, Callable, List, Mapping, Optional, Sequence, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from simple_logger.core.exceptions import InvalidArgumentError
from simple_logger.core.log_entry import LogEntry
from simple_logger.core.log_level import LogLevel
from simple_logger.handlers.base_handler import BaseHandler, Injector

logger = logging.getLogger(__name__)

ExceptionHandler = Callable[[Exception, Optional[BaseHandler]], Any]


class Logger:
    """Main logger class: one channel, one or more handlers."""

    def __init__(
        self,
        channel_name: str,
        handlers: Union[BaseHandler, Sequence[BaseHandler]],
        injectors: Union[Injector, Sequence[Injector], None] = None,
    ):
        """
        Initialize logger.

        Args:
            channel_name: Name stored on every entry this logger creates
            handlers: A handler or a non-empty sequence of handlers
            injectors: Callable or sequence of callables applied to every
                entry before any handler sees it

        Raises:
            InvalidArgumentError: If no handlers are given, a handler does
                not extend BaseHandler or an injector is not callable
        """
        handlers = list(handlers) if isinstance(handlers, (list, tuple)) else [handlers]

        if not handlers:
            raise InvalidArgumentError(
                "At least one handler must be provided for the logger channel."
            )

        for handler in handlers:
            if not isinstance(handler, BaseHandler):
                raise InvalidArgumentError(
                    "Invalid Handler provided. All handlers must extend "
                    f"{BaseHandler.__name__}, got {type(handler).__name__}."
                )

        if injectors is None:
            injectors = []
        elif not isinstance(injectors, (list, tuple)):
            injectors = [injectors]
        injectors = list(injectors)

        for injector in injectors:
            if not callable(injector):
                raise InvalidArgumentError(
                    f"Invalid injector provided: {type(injector).__name__} is not callable."
                )

        self._channel_name = channel_name
        self._handlers: List[BaseHandler] = handlers
        self._injectors: List[Injector] = injectors
        self._exception_handler: Optional[ExceptionHandler] = None
        # UTC by default; see set_timezone()
        self._timezone: tzinfo = timezone.utc

    @property
    def channel_name(self) -> str:
        return self._channel_name

    def get_handlers(self) -> List[BaseHandler]:
        """Return the handlers in dispatch order."""
        return list(self._handlers)

    def get_injectors(self) -> List[Injector]:
        """Return the logger-wide injectors in application order."""
        return list(self._injectors)

    def log(
        self,
        level: Union[LogLevel, str],
        message: Any,
        context: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """
        Log a message.

        Args:
            level: LogLevel or lowercase level name
            message: Log message; converted with str() if needed
            context: Context data for placeholders and structured output

        Raises:
            InvalidArgumentError: If level is not a known level
        """
        if not LogLevel.is_valid(level):
            shown = level if isinstance(level, str) else type(level).__name__
            raise InvalidArgumentError(f'Invalid log level provided: "{shown}".')

        entry = LogEntry(
            level=level,
            message=message if isinstance(message, str) else str(message),
            context=context,
            timestamp=datetime.now(self._timezone),
            channel_name=self._channel_name,
        )

        entry = self._apply_injectors(entry, self._injectors, None)

        for handler in self._handlers:
            handler_entry = self._apply_injectors(
                entry, handler.get_injectors(), handler
            )
            try:
                if handler.should_handle(handler_entry):
                    handler.handle(handler_entry)
            except Exception as e:
                self._handle_exception(e, handler)

    def _apply_injectors(
        self,
        entry: LogEntry,
        injectors: Sequence[Injector],
        handler: Optional[BaseHandler],
    ) -> LogEntry:
        for injector in injectors:
            try:
                result = injector(entry)
            except Exception as e:
                self._handle_exception(e, handler)
                continue

            if isinstance(result, LogEntry):
                entry = result
        return entry

    def emergency(self, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        """Log emergency message."""
        self.log(LogLevel.EMERGENCY, message, context)

    def alert(self, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        """Log alert message."""
        self.log(LogLevel.ALERT, message, context)

    def critical(self, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        """Log critical message."""
        self.log(LogLevel.CRITICAL, message, context)

    def error(self, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, message, context)

    def warning(self, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        """Log warning message."""
        self.log(LogLevel.WARNING, message, context)

    def notice(self, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        """Log notice message."""
        self.log(LogLevel.NOTICE, message, context)

    def info(self, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, message, context)

    def debug(self, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, message, context)

    def set_exception_handler(self, callback: Optional[ExceptionHandler]) -> None:
        """
        Set the callback receiving injector and handler failures.

        Args:
            callback: Called with ``(error, handler)``; ``handler`` is None
                when a logger-wide injector failed. None discards failures.
        """
        if callback is not None and not callable(callback):
            raise InvalidArgumentError("exception handler must be callable or None")

        self._exception_handler = callback

    def set_timezone(self, tz: Union[str, tzinfo]) -> None:
        """
        Set the timezone for entries created from now on.

        Args:
            tz: IANA timezone name (e.g. "Europe/Paris") or a tzinfo

        Raises:
            InvalidArgumentError: If the timezone name cannot be resolved
        """
        if isinstance(tz, tzinfo):
            self._timezone = tz
            return

        try:
            self._timezone = ZoneInfo(tz)
        except (ZoneInfoNotFoundError, ValueError, TypeError) as e:
            raise InvalidArgumentError(f'Unknown timezone "{tz}".') from e

    def get_timezone(self) -> tzinfo:
        return self._timezone

    def flush(self) -> None:
        """Flush every handler that supports flushing."""
        for handler in self._handlers:
            if hasattr(handler, "flush"):
                handler.flush()

    def _handle_exception(self, error: Exception, handler: Optional[BaseHandler]) -> None:
        if self._exception_handler is not None:
            self._exception_handler(error, handler)
        else:
            logger.debug(
                "Discarding %s from %r on channel %s",
                type(error).__name__,
                handler,
                self._channel_name,
            )

    def __repr__(self) -> str:
        """String representation."""
        return f"Logger(channel={self._channel_name!r}, handlers={len(self._handlers)})"
