"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Python Simple Logger - A structured, PSR-3 style logging library
with pluggable handlers, injectors and a normalizing formatter.
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

import logging

from simple_logger.core.exceptions import InvalidArgumentError, LoggerError
from simple_logger.core.log_level import LogLevel
from simple_logger.core.log_entry import LogEntry
from simple_logger.core.logger import Logger
from simple_logger.core.logger_builder import LoggerBuilder

# Import submodules (not all classes by default)
from simple_logger import formatters
from simple_logger import handlers
from simple_logger import injectors

# Library diagnostics stay silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "LogLevel",
    "InvalidArgumentError",
    "LoggerError",
    "formatters",
    "handlers",
    "injectors",
]
