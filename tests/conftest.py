"""Shared fixtures for logger tests"""

from unittest.mock import Mock

import pytest

from simple_logger.handlers import BaseHandler, BatchHandler


class RecordingHandler(BaseHandler):
    """Handler keeping every entry it receives."""

    def __init__(self, accept: bool = True):
        super().__init__()
        self.accept = accept
        self.entries = []

    def handle(self, entry):
        self.entries.append(entry)

    def should_handle(self, entry):
        return self.accept


class RecordingBatchHandler(BatchHandler):
    """Batch-capable handler keeping single entries and batches apart."""

    def __init__(self):
        super().__init__()
        self.entries = []
        self.batches = []

    def handle(self, entry):
        self.entries.append(entry)

    def handle_batch(self, entries):
        self.batches.append(list(entries))

    def should_handle(self, entry):
        return True


@pytest.fixture
def make_handler():
    """Factory for RecordingHandler instances."""
    return RecordingHandler


@pytest.fixture
def batch_handler():
    return RecordingBatchHandler()


@pytest.fixture
def make_mock_handler():
    """Factory for Mock handlers passing the BaseHandler isinstance check."""

    def factory(should_handle: bool = True):
        handler = Mock(spec=BaseHandler)
        handler.get_injectors.return_value = []
        handler.should_handle.return_value = should_handle
        return handler

    return factory
