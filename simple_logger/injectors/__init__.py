"""
Log injectors module

Injectors are callables ``LogEntry -> LogEntry`` that add data to an
entry's ``extra`` mapping.
"""

from simple_logger.injectors.base_injector import BaseInjector
from simple_logger.injectors.thread_injector import ProcessInjector, ThreadInjector

__all__ = [
    "BaseInjector",
    "ThreadInjector",
    "ProcessInjector",
]
