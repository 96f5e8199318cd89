"""Logger builder pattern"""

from datetime import tzinfo
from typing import List, Optional, Union

from simple_logger.core.exceptions import InvalidArgumentError
from simple_logger.core.log_entry import DEFAULT_CHANNEL
from simple_logger.core.log_level import LogLevel
from simple_logger.core.logger import ExceptionHandler, Logger
from simple_logger.handlers.base_handler import BaseHandler, Injector
from simple_logger.handlers.buffer_handler import BufferHandler
from simple_logger.handlers.stream_handler import StreamHandler


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._name = DEFAULT_CHANNEL
        self._handlers: List[BaseHandler] = []
        self._injectors: List[Injector] = []
        self._timezone: Optional[Union[str, tzinfo]] = None
        self._exception_handler: Optional[ExceptionHandler] = None

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set channel name."""
        self._name = name
        return self

    def with_handler(self, handler: BaseHandler) -> "LoggerBuilder":
        """Add a handler; handlers run in the order they are added."""
        self._handlers.append(handler)
        return self

    def with_console(
        self,
        min_level: Union[LogLevel, str] = LogLevel.DEBUG,
        colored: bool = True,
    ) -> "LoggerBuilder":
        """Add a StreamHandler writing to stderr."""
        self._handlers.append(StreamHandler(min_level=min_level, colored=colored))
        return self

    def with_buffer(self, buffer_limit: int = 100) -> "LoggerBuilder":
        """
        Wrap the most recently added handler in a BufferHandler.

        Args:
            buffer_limit: Entries buffered before an automatic flush

        Returns:
            Self for method chaining

        Example:
            logger = (LoggerBuilder()
                .with_name("app")
                .with_handler(SlowHandler())
                .with_buffer(50)
                .build())
        """
        if not self._handlers:
            raise InvalidArgumentError("with_buffer() requires a handler to wrap")

        self._handlers[-1] = BufferHandler(self._handlers[-1], buffer_limit=buffer_limit)
        return self

    def with_injector(self, injector: Injector) -> "LoggerBuilder":
        """Add a logger-wide injector."""
        self._injectors.append(injector)
        return self

    def with_timezone(self, tz: Union[str, tzinfo]) -> "LoggerBuilder":
        """Set the timezone used for entry timestamps."""
        self._timezone = tz
        return self

    def with_exception_handler(self, callback: ExceptionHandler) -> "LoggerBuilder":
        """Set the callback receiving injector and handler failures."""
        self._exception_handler = callback
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        logger = Logger(self._name, self._handlers, self._injectors)

        if self._timezone is not None:
            logger.set_timezone(self._timezone)

        if self._exception_handler is not None:
            logger.set_exception_handler(self._exception_handler)

        return logger
