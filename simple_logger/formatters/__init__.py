"""
Log formatters module

Provides the normalization engine and formatter implementations.
"""

from simple_logger.formatters.base_formatter import BaseFormatter
from simple_logger.formatters.formatter_config import FormatterConfig
from simple_logger.formatters.normalizing_formatter import (
    MAX_DEPTH_MARKER,
    NormalizingFormatter,
)
from simple_logger.formatters.default_formatter import DefaultFormatter
from simple_logger.formatters.json_formatter import JSONFormatter
from simple_logger.formatters.text_formatter import TextFormatter

__all__ = [
    "BaseFormatter",
    "FormatterConfig",
    "MAX_DEPTH_MARKER",
    "NormalizingFormatter",
    "DefaultFormatter",
    "JSONFormatter",
    "TextFormatter",
]
