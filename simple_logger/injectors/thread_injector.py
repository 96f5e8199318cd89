"""
Thread and process injectors

Record which thread or process produced a log entry.
"""

import os
import threading
from typing import Any, Dict

from simple_logger.core.log_entry import LogEntry
from simple_logger.injectors.base_injector import BaseInjector


class ThreadInjector(BaseInjector):
    """
    Inject the current thread's id and name.

    Example:
        logger = Logger("app", handler, injectors=[ThreadInjector()])
        # entry.extra == {"thread": {"id": 140245, "name": "MainThread"}}
    """

    def __init__(self, key: str = "thread"):
        self.key = key

    def get_data(self, entry: LogEntry) -> Dict[str, Any]:
        return {
            "id": threading.get_ident(),
            "name": threading.current_thread().name,
        }


class ProcessInjector(BaseInjector):
    """Inject the current process id."""

    def __init__(self, key: str = "pid"):
        self.key = key

    def get_data(self, entry: LogEntry) -> int:
        return os.getpid()
