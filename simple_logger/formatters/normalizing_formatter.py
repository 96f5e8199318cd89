"""
Normalization engine shared by formatters

Turns arbitrary runtime values into depth-bounded, length-bounded and
JSON-safe representations, and interpolates ``{key}`` placeholders into
log messages.
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
import io
import json
import logging
import os
import re
import socket
import traceback
from collections.abc import Iterable, Mapping, Sequence, Set
from datetime import date, datetime, time
from typing import Any, Dict, Optional, Tuple

from simple_logger.formatters.base_formatter import BaseFormatter
from simple_logger.formatters.formatter_config import FormatterConfig

logger = logging.getLogger(__name__)

MAX_DEPTH_MARKER = "[...max depth reached...]"
TRUNCATION_MARKER = "..."

_RESOURCE_TYPES = (io.IOBase, socket.socket)
_TEMPORAL_TYPES = (datetime, date, time)


def class_name(value: Any) -> str:
    """Dotted class name of value; builtins are left unqualified."""
    cls = type(value)
    if cls.__module__ in ("builtins", "__main__"):
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def _defines_str(value: Any) -> bool:
    # Containers are arrays, even when their type has its own __str__
    if isinstance(value, (Mapping, Sequence, Set)):
        return False
    return any("__str__" in vars(klass) for klass in type(value).__mro__[:-1])


def _is_closure(value: Any) -> bool:
    return inspect.isroutine(value) or isinstance(value, functools.partial)


def _previous_exception(exception: BaseException) -> Optional[BaseException]:
    if exception.__cause__ is not None:
        return exception.__cause__
    if exception.__suppress_context__:
        return None
    return exception.__context__


def _visible_attributes(value: Any) -> Dict[str, Any]:
    attributes = {}
    for klass in reversed(type(value).__mro__):
        slots = vars(klass).get("__slots__", ())
        for name in (slots,) if isinstance(slots, str) else slots:
            if hasattr(value, name):
                attributes[name] = getattr(value, name)
    attributes.update(getattr(value, "__dict__", {}))
    return {k: v for k, v in attributes.items() if not k.startswith("_")}


class NormalizingFormatter(BaseFormatter):
    """
    Base formatter providing the normalization engine.

    Subclasses implement format() and may override
    stringify_json_serializable() to render JSON-serializable values
    inside messages.

    A value counts as JSON-serializable when it exposes ``__json__()`` or
    ``to_dict()``, or when it is a dataclass instance.
    """

    def __init__(self, config: Optional[FormatterConfig] = None):
        """
        Initialize formatter.

        Args:
            config: Normalization settings (default: FormatterConfig.default()).
                The formatter keeps its own copy.
        """
        self.config = dataclasses.replace(config or FormatterConfig.default())
        self.config.base_path = self.config.base_path.rstrip(os.sep)

    # -- configuration -------------------------------------------------

    def set_include_stack_trace(self, include: bool) -> "NormalizingFormatter":
        self.config.include_stack_trace = include
        return self

    def set_include_stack_trace_in_context(
        self, include: bool
    ) -> "NormalizingFormatter":
        self.config.include_stack_trace_in_context = include
        return self

    def set_base_path(self, base_path: str) -> "NormalizingFormatter":
        """Set the prefix stripped from exception file paths."""
        self.config.base_path = base_path.rstrip(os.sep)
        return self

    def set_max_recursion_depth(self, depth: int) -> "NormalizingFormatter":
        """Set maximum normalization depth; 0 or less disables the limit."""
        self.config.max_recursion_depth = max(0, depth)
        return self

    def set_max_string_length(self, length: int) -> "NormalizingFormatter":
        """Set maximum stringified length; 0 or less disables the limit."""
        self.config.max_string_length = max(0, length)
        return self

    def set_skip_json_serializable(self, skip: bool) -> "NormalizingFormatter":
        self.config.skip_json_serializable = skip
        return self

    # -- interpolation -------------------------------------------------

    def interpolate(self, message: str, context: Dict[str, Any]) -> str:
        """
        Replace ``{key}`` placeholders in message with context values.

        Context keys consumed by a placeholder are deleted from ``context``.

        Args:
            message: Message with potential placeholders
            context: Context data, modified in place

        Returns:
            Interpolated message
        """
        if not context or "{" not in message:
            return message

        replacements = {}
        for key in list(context):
            if not isinstance(key, str):
                continue

            placeholder = "{" + key + "}"
            if placeholder in message:
                replacements[placeholder] = self.stringify_value(context.pop(key))

        if not replacements:
            return message

        # Longest placeholders first, replaced in one pass
        pattern = re.compile(
            "|".join(
                re.escape(p) for p in sorted(replacements, key=len, reverse=True)
            )
        )
        return pattern.sub(lambda match: replacements[match.group(0)], message)

    # -- stringification -----------------------------------------------

    def stringify_value(self, value: Any) -> str:
        """
        Convert any value to a string representation.

        Args:
            value: Value to convert

        Returns:
            String representation of the value
        """
        if value is None:
            return "null"

        if isinstance(value, bool):
            return "true" if value else "false"

        if isinstance(value, (str, int, float, bytes, bytearray)):
            return self._truncate(self._scalar_text(value))

        if isinstance(value, _RESOURCE_TYPES):
            return f"[resource:{type(value).__name__}]"

        if isinstance(value, _TEMPORAL_TYPES):
            return value.isoformat()

        if isinstance(value, BaseException):
            return self.stringify_exception(value)

        if self.is_json_serializable(value):
            return self.stringify_json_serializable(value)

        if _defines_str(value):
            return str(value)

        if _is_closure(value):
            return "[closure]"

        if isinstance(value, (Mapping, Sequence, Set)):
            return f"[array:{len(value)}]"

        if hasattr(value, "__dict__") or hasattr(type(value), "__slots__"):
            return f"[object:{class_name(value)}]"

        return "[unknown]"

    def stringify_exception(self, exception: BaseException) -> str:
        """
        Format an exception as a one-line summary.

        Produces ``Class(code): message in file:line``. The code segment is
        left out when the exception carries no code, the location when the
        exception was never raised.
        """
        code = self._exception_code(exception)
        formatted = class_name(exception)
        if code:
            formatted += f"({code})"
        formatted += f": {exception}"

        file_name, line = self._exception_location(exception)
        if file_name:
            formatted += f" in {self.normalize_path(file_name)}:{line}"

        if self.config.include_stack_trace:
            trace = self.stringify_stack_trace(exception)
            if trace:
                formatted += "\nStack trace:\n" + trace

        return formatted

    def stringify_stack_trace(self, exception: BaseException) -> str:
        """Format the exception's traceback with the base path removed."""
        if exception.__traceback__ is None:
            return ""

        trace = "".join(traceback.format_tb(exception.__traceback__)).rstrip("\n")
        if self.config.base_path:
            trace = trace.replace(self.config.base_path + os.sep, "")
        return trace

    def stringify_json_serializable(self, value: Any) -> str:
        """
        Stringify a JSON-serializable value for use inside a message.

        Treated as a plain object by default; subclasses may render it as
        JSON instead.
        """
        return f"[object:{class_name(value)}]"

    # -- normalization -------------------------------------------------

    def normalize_data(self, data: Any, depth: int = 0) -> Any:
        """
        Normalize data for safe logging.

        Args:
            data: Data to normalize
            depth: Current recursion depth

        Returns:
            Normalized data
        """
        max_depth = self.config.max_recursion_depth
        if max_depth > 0 and depth > max_depth:
            return MAX_DEPTH_MARKER

        if data is None or isinstance(data, (str, int, float)):
            return data

        if isinstance(data, (bytes, bytearray)):
            return self._scalar_text(data)

        if isinstance(data, _RESOURCE_TYPES):
            return f"[resource:{type(data).__name__}]"

        if isinstance(data, _TEMPORAL_TYPES):
            return data.isoformat()

        if isinstance(data, BaseException):
            return self.normalize_exception(data)

        if _is_closure(data):
            return "[closure]"

        if self.is_json_serializable(data):
            if self.config.skip_json_serializable:
                return data
            return self.normalize_json_serializable(data, depth + 1)

        if _defines_str(data):
            return str(data)

        if (
            isinstance(data, (Mapping, Iterable))
            or hasattr(data, "__dict__")
            or hasattr(type(data), "__slots__")
        ):
            return self.normalize_iterable(data, depth + 1)

        return "[unserializable]"

    def normalize_exception(
        self, exception: BaseException, _seen: Optional[set] = None
    ) -> Dict[str, Any]:
        """
        Normalize an exception to a dictionary.

        The ``previous`` key holds the normalized cause (or implicit
        context) and is absent when there is none.
        """
        file_name, line = self._exception_location(exception)
        data: Dict[str, Any] = {
            "class": class_name(exception),
            "message": str(exception),
            "code": self._exception_code(exception),
            "file": self.normalize_path(file_name),
            "line": line,
        }

        if self.config.include_stack_trace_in_context:
            data["trace"] = self.stringify_stack_trace(exception)

        seen = _seen if _seen is not None else set()
        seen.add(id(exception))
        previous = _previous_exception(exception)
        if previous is not None and id(previous) not in seen:
            data["previous"] = self.normalize_exception(previous, seen)

        return data

    def normalize_iterable(self, data: Any, depth: int = 0) -> Any:
        """
        Normalize mappings, iterables and plain objects.

        Mappings and objects become dicts, other iterables become lists.
        """
        if isinstance(data, Mapping):
            return {
                self._normalize_key(key): self.normalize_data(value, depth)
                for key, value in data.items()
            }

        if isinstance(data, Iterable):
            return [self.normalize_data(value, depth) for value in data]

        return {
            key: self.normalize_data(value, depth)
            for key, value in _visible_attributes(data).items()
        }

    def normalize_json_serializable(self, data: Any, depth: int = 0) -> Any:
        return self.normalize_data(self.json_serialize(data), depth)

    def normalize_path(self, path: str) -> str:
        """
        Strip the configured base path from a file path.

        Paths outside the base path are returned unchanged.
        """
        base_path = self.config.base_path
        if not base_path or not path.startswith(base_path):
            return path

        return path[len(base_path):].lstrip(os.sep)

    # -- JSON ----------------------------------------------------------

    @staticmethod
    def is_json_serializable(value: Any) -> bool:
        if isinstance(value, type):
            return False
        return (
            callable(getattr(value, "__json__", None))
            or callable(getattr(value, "to_dict", None))
            or dataclasses.is_dataclass(value)
        )

    @staticmethod
    def json_serialize(value: Any) -> Any:
        """Return the serializable form of a JSON-serializable value."""
        if callable(getattr(value, "__json__", None)):
            return value.__json__()
        if callable(getattr(value, "to_dict", None)):
            return value.to_dict()
        return {
            field.name: getattr(value, field.name)
            for field in dataclasses.fields(value)
        }

    def safe_json_encode(self, data: Any) -> str:
        """
        Safely encode data as JSON.

        Args:
            data: Data to encode

        Returns:
            JSON string, or a JSON object describing the encoding error
        """
        try:
            return json.dumps(
                data,
                ensure_ascii=False,
                separators=(",", ":"),
                allow_nan=False,
                default=self._json_default,
            )
        except (TypeError, ValueError) as exc:
            logger.debug("JSON encoding failed: %s", exc)
            return json.dumps({"jsonError": str(exc)})

    def _json_default(self, value: Any) -> Any:
        # Values left in place by skip_json_serializable
        if self.is_json_serializable(value):
            return self.normalize_data(self.json_serialize(value))
        raise TypeError(f"Object of type {class_name(value)} is not JSON serializable")

    # -- helpers -------------------------------------------------------

    def _truncate(self, text: str) -> str:
        limit = self.config.max_string_length
        if 0 < limit < len(text):
            return text[:limit] + TRUNCATION_MARKER
        return text

    @staticmethod
    def _scalar_text(value: Any) -> str:
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).decode("utf-8", errors="replace")
        return str(value)

    @staticmethod
    def _normalize_key(key: Any) -> Any:
        if key is None or isinstance(key, (str, int, float)):
            return key
        return str(key)

    @staticmethod
    def _exception_code(exception: BaseException) -> Any:
        code = getattr(exception, "code", None)
        if code is None:
            code = getattr(exception, "errno", None)
        if code is None:
            return 0
        return code if isinstance(code, (int, str)) else str(code)

    @staticmethod
    def _exception_location(exception: BaseException) -> Tuple[str, int]:
        if exception.__traceback__ is None:
            return "", 0
        frame = traceback.extract_tb(exception.__traceback__)[-1]
        return frame.filename, frame.lineno or 0
