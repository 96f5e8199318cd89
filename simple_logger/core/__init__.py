"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Dispatch pipeline
- LoggerBuilder: Builder pattern for logger construction
- LogEntry: Immutable log entry
- LogLevel: Log level enumeration
- InvalidArgumentError, LoggerError: Error taxonomy
"""

from simple_logger.core.exceptions import InvalidArgumentError, LoggerError
from simple_logger.core.log_level import LogLevel
from simple_logger.core.log_entry import LogEntry
from simple_logger.core.logger import Logger
from simple_logger.core.logger_builder import LoggerBuilder

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "LogLevel",
    "InvalidArgumentError",
    "LoggerError",
]
