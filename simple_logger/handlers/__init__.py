"""Handlers module - log sinks and decorators"""

from simple_logger.handlers.base_handler import BaseHandler, BatchHandler
from simple_logger.handlers.abstract_handler import AbstractHandler
from simple_logger.handlers.buffer_handler import BufferHandler
from simple_logger.handlers.stream_handler import StreamHandler

__all__ = [
    "BaseHandler",
    "BatchHandler",
    "AbstractHandler",
    "BufferHandler",
    "StreamHandler",
]
