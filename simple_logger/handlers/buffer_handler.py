"""
Buffer handler

Decorator that buffers log entries and delivers them to the wrapped
handler in batches. Useful when the wrapped handler performs costly
operations per call.
"""

from __future__ import annotations

import atexit
import functools
import logging
import weakref
from typing import TYPE_CHECKING, List

from simple_logger.handlers.base_handler import BaseHandler, BatchHandler

if TYPE_CHECKING:
    from simple_logger.core.log_entry import LogEntry

logger = logging.getLogger(__name__)


def _flush_at_exit(handler_ref: "weakref.ref[BufferHandler]") -> None:
    handler = handler_ref()
    if handler is not None:
        handler._shutdown_flush()


class BufferHandler(BaseHandler):
    """
    Handler that buffers entries before delegating to another handler.

    Entries are delivered when the buffer reaches ``buffer_limit``, when
    flush() or close() is called, or at interpreter exit when
    ``flush_on_shutdown`` is set. The exit hook only holds a weak
    reference, so entries still buffered in a handler that is garbage
    collected without close() are lost.

    Thread Safety:
        The buffer is not synchronized. Serialize access externally when
        sharing a BufferHandler between threads.

    Example:
        handler = BufferHandler(StreamHandler(), buffer_limit=50)
        logger = Logger("app", handler)
    """

    def __init__(
        self,
        handler: BaseHandler,
        buffer_limit: int = 0,
        flush_on_shutdown: bool = True,
    ):
        """
        Initialize buffer handler.

        Args:
            handler: Handler to wrap
            buffer_limit: Buffer size that triggers an automatic flush.
                0 delivers every entry immediately.
            flush_on_shutdown: Register flush() to run at interpreter exit
        """
        super().__init__()
        self.handler = handler
        self.buffer_limit = max(0, buffer_limit)
        self.flush_on_shutdown = flush_on_shutdown

        self._buffer: List["LogEntry"] = []
        self._closed = False

        self._exit_hook = functools.partial(_flush_at_exit, weakref.ref(self))
        if self.flush_on_shutdown:
            atexit.register(self._exit_hook)

    def handle(self, entry: "LogEntry") -> None:
        """
        Add entry to the buffer, flushing when the limit is reached.

        Args:
            entry: Log entry to buffer
        """
        self._buffer.append(entry)

        if len(self._buffer) >= self.buffer_limit:
            self.flush()

    def should_handle(self, entry: "LogEntry") -> bool:
        """Delegate to the wrapped handler."""
        return self.handler.should_handle(entry)

    def flush(self) -> None:
        """
        Deliver buffered entries to the wrapped handler.

        Uses handle_batch() when the wrapped handler is a BatchHandler,
        otherwise handle() per entry in logging order. The buffer is
        emptied even if the wrapped handler raises.
        """
        if not self._buffer:
            return

        batch = self._buffer
        self._buffer = []

        if isinstance(self.handler, BatchHandler):
            self.handler.handle_batch(batch)
        else:
            for entry in batch:
                self.handler.handle(entry)

    def close(self) -> None:
        """Flush remaining entries and drop the exit hook."""
        if self.flush_on_shutdown and not self._closed:
            atexit.unregister(self._exit_hook)
        self._closed = True
        self.flush()

    def _shutdown_flush(self) -> None:
        """Exit hook; runs at most once."""
        if self._closed:
            return

        self._closed = True
        if self._buffer:
            logger.debug("Flushing %d buffered entries at exit", len(self._buffer))
        self.flush()

    def get_buffer_size(self) -> int:
        """
        Get current buffer size.

        Returns:
            Number of entries currently in buffer
        """
        return len(self._buffer)

    def __enter__(self) -> "BufferHandler":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        """String representation."""
        return f"BufferHandler(handler={self.handler!r}, buffer_limit={self.buffer_limit})"
