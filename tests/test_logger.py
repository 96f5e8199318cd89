"""Tests for levels, entries and the logger pipeline"""

import dataclasses
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock, patch

import pytest

from simple_logger import (
    InvalidArgumentError,
    LogEntry,
    Logger,
    LoggerBuilder,
    LogLevel,
)
from simple_logger.handlers import BufferHandler, StreamHandler

PRIORITIES = [
    ("emergency", 100),
    ("alert", 70),
    ("critical", 60),
    ("error", 50),
    ("warning", 40),
    ("notice", 35),
    ("info", 30),
    ("debug", 10),
]


class TestLogLevel:
    """Test log level functionality."""

    @pytest.mark.parametrize("name,priority", PRIORITIES)
    def test_priority_table(self, name, priority):
        level = LogLevel.from_value(name)
        assert level.priority == priority
        assert str(level) == name
        assert level.label == name.upper()

    @pytest.mark.parametrize("name", ["bogus", "INFO", "warn", "", "fatal"])
    def test_invalid_names(self, name):
        with pytest.raises(InvalidArgumentError, match="Invalid log level"):
            LogLevel.from_value(name)

    def test_invalid_type(self):
        with pytest.raises(InvalidArgumentError):
            LogLevel.from_value(30)

    def test_from_level_instance(self):
        assert LogLevel.from_value(LogLevel.NOTICE) is LogLevel.NOTICE

    def test_ordering_follows_priority(self):
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.NOTICE < LogLevel.WARNING
        assert LogLevel.WARNING < LogLevel.ERROR
        assert LogLevel.ERROR < LogLevel.CRITICAL < LogLevel.ALERT
        assert LogLevel.ALERT < LogLevel.EMERGENCY

    def test_comparisons_are_consistent(self):
        for a in LogLevel:
            for b in LogLevel:
                assert a.is_lower_than(b) == (a.priority < b.priority)
                assert a.is_higher_than(b) == (a.priority > b.priority)
                assert a.is_at_least(b) == (not a.is_lower_than(b))
                assert a.is_at_most(b) == (not a.is_higher_than(b))

    def test_comparisons_accept_names(self):
        assert LogLevel.INFO.is_lower_than("warning")
        assert LogLevel.INFO.is_at_least("info")
        assert LogLevel.INFO.is_at_most("info")
        assert not LogLevel.INFO.is_at_most("debug")
        assert LogLevel.ALERT.is_higher_than("critical")

    def test_comparison_with_invalid_name(self):
        with pytest.raises(InvalidArgumentError):
            LogLevel.INFO.is_lower_than("loud")

    def test_is_valid(self):
        assert LogLevel.is_valid("debug")
        assert LogLevel.is_valid(LogLevel.ERROR)
        assert not LogLevel.is_valid("DEBUG")
        assert not LogLevel.is_valid(10)
        assert not LogLevel.is_valid(None)


class TestLogEntry:
    """Test log entry structure."""

    def test_create_entry(self):
        entry = LogEntry("info", "Test message")
        assert entry.level is LogLevel.INFO
        assert entry.message == "Test message"
        assert entry.context == {}
        assert entry.extra == {}
        assert entry.channel_name == "default"
        assert entry.timestamp.utcoffset() == timedelta(0)

    def test_invalid_level(self):
        with pytest.raises(InvalidArgumentError):
            LogEntry("verbose", "Test")

    def test_with_message_does_not_mutate(self):
        entry = LogEntry("info", "original")
        changed = entry.with_message("changed")

        assert entry.message == "original"
        assert changed.message == "changed"
        assert changed is not entry

    def test_with_context_and_channel(self):
        entry = LogEntry("info", "msg", {"a": 1})
        changed = entry.with_context({"b": 2}).with_channel_name("billing")

        assert entry.context == {"a": 1}
        assert entry.channel_name == "default"
        assert changed.context == {"b": 2}
        assert changed.channel_name == "billing"

    def test_with_message_and_context(self):
        entry = LogEntry("info", "msg", {"a": 1})
        changed = entry.with_message_and_context("other", {})

        assert (changed.message, dict(changed.context)) == ("other", {})
        assert (entry.message, dict(entry.context)) == ("msg", {"a": 1})

    def test_with_extra_merges(self):
        entry = LogEntry("info", "msg").with_extra({"a": 1, "b": 2})
        merged = entry.with_extra({"b": 3, "c": 4})

        assert merged.extra == {"a": 1, "b": 3, "c": 4}
        assert entry.extra == {"a": 1, "b": 2}

    def test_fields_are_frozen(self):
        entry = LogEntry("info", "msg", {"a": 1})

        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.message = "changed"
        with pytest.raises(TypeError):
            entry.context["a"] = 2

    def test_caller_context_is_copied(self):
        context = {"a": 1}
        entry = LogEntry("info", "msg", context)
        context["a"] = 2

        assert entry.context["a"] == 1

    def test_to_dict(self):
        ts = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)
        entry = LogEntry("debug", "Test", {"k": "v"}, ts, "app", {"x": 1})
        data = entry.to_dict()

        assert data == {
            "timestamp": "2025-01-01T12:00:00+00:00",
            "level": "debug",
            "channel": "app",
            "message": "Test",
            "context": {"k": "v"},
            "extra": {"x": 1},
        }


class TestLogger:
    """Test main logger functionality."""

    def test_create_with_single_handler(self, make_handler):
        logger = Logger("test-channel", make_handler())
        assert len(logger.get_handlers()) == 1

    def test_create_with_handler_list(self, make_handler):
        logger = Logger("test-channel", [make_handler(), make_handler()])
        assert len(logger.get_handlers()) == 2

    def test_no_handlers(self):
        with pytest.raises(InvalidArgumentError, match="At least one handler must be provided"):
            Logger("test-channel", [])

    def test_invalid_handler(self, make_handler):
        with pytest.raises(InvalidArgumentError, match="Invalid Handler provided"):
            Logger("test-channel", [make_handler(), object()])

    def test_invalid_injector(self, make_handler):
        with pytest.raises(InvalidArgumentError):
            Logger("test-channel", make_handler(), injectors=[lambda e: e, "not callable"])

    def test_passes_entry_to_handler(self, make_handler):
        handler = make_handler()
        logger = Logger("app", handler)

        logger.info("Test message", {"user_id": 123})

        assert len(handler.entries) == 1
        entry = handler.entries[0]
        assert entry.level is LogLevel.INFO
        assert entry.message == "Test message"
        assert entry.context == {"user_id": 123}
        assert entry.channel_name == "app"
        assert entry.extra == {}

    def test_calls_all_handlers(self, make_mock_handler):
        first, second = make_mock_handler(), make_mock_handler()
        logger = Logger("multichannel", [first, second])

        logger.warning("This message goes to both handlers.")

        first.handle.assert_called_once()
        second.handle.assert_called_once()

    def test_invalid_level_name(self, make_handler):
        logger = Logger("test", make_handler())

        with pytest.raises(InvalidArgumentError, match='Invalid log level provided: "bogus-level"'):
            logger.log("bogus-level", "x")

    def test_invalid_level_type(self, make_handler):
        logger = Logger("test", make_handler())

        with pytest.raises(InvalidArgumentError, match='"int"') as exc_info:
            logger.log(123, "x")
        assert "123" not in str(exc_info.value)

    def test_should_handle_false_skips_handler(self, make_mock_handler):
        rejecting = make_mock_handler(should_handle=False)
        accepting = make_mock_handler(should_handle=True)
        logger = Logger("app", [rejecting, accepting])

        logger.info("message")

        rejecting.handle.assert_not_called()
        accepting.handle.assert_called_once()

    def test_failing_handler_routed_to_callback(self, make_mock_handler):
        error = RuntimeError("Handler failed!")
        failing = make_mock_handler()
        failing.handle.side_effect = error
        healthy = make_mock_handler()
        callback = Mock()

        logger = Logger("exception-test", [failing, healthy])
        logger.set_exception_handler(callback)
        logger.error("This will trigger the exception.")

        callback.assert_called_once_with(error, failing)
        healthy.handle.assert_called_once()

    def test_failing_handler_without_callback(self, make_mock_handler):
        failing = make_mock_handler()
        failing.handle.side_effect = RuntimeError()
        healthy = make_mock_handler()

        logger = Logger("continue-on-fail", [failing, healthy])
        logger.warning("A handler will fail, but the next should still run.")

        healthy.handle.assert_called_once()

    def test_failing_should_handle_is_routed(self, make_mock_handler):
        error = ValueError("predicate failed")
        failing = make_mock_handler()
        failing.should_handle.side_effect = error
        callback = Mock()

        logger = Logger("app", failing)
        logger.set_exception_handler(callback)
        logger.info("message")

        failing.handle.assert_not_called()
        callback.assert_called_once_with(error, failing)

    def test_failing_logger_injector(self, make_mock_handler):
        error = ValueError("injector failed")
        first, second = make_mock_handler(), make_mock_handler()
        callback = Mock()

        logger = Logger("app", [first, second], injectors=Mock(side_effect=error))
        logger.set_exception_handler(callback)
        logger.info("message")

        callback.assert_called_once_with(error, None)
        first.handle.assert_called_once()
        second.handle.assert_called_once()

    def test_failing_handler_injector(self, make_handler):
        error = KeyError("missing")
        handler = make_handler()
        handler.add_injector(Mock(side_effect=error))
        callback = Mock()

        logger = Logger("app", handler)
        logger.set_exception_handler(callback)
        logger.info("message")

        callback.assert_called_once_with(error, handler)
        assert len(handler.entries) == 1

    def test_injector_order(self, make_handler):
        calls = []

        def injector(name, key, value):
            def inject(entry):
                calls.append(name)
                return entry.with_extra({key: value})
            return inject

        handler = make_handler()
        handler.add_injector(injector("h1", "b", "handler")).add_injector(
            injector("h2", "c", 3)
        )
        logger = Logger(
            "app", handler, injectors=[injector("p1", "a", 1), injector("p2", "b", 2)]
        )

        logger.info("message")

        assert calls == ["p1", "p2", "h1", "h2"]
        assert handler.entries[0].extra == {"a": 1, "b": "handler", "c": 3}

    def test_handler_injectors_are_isolated(self, make_handler):
        first, second = make_handler(), make_handler()
        first.add_injector(lambda entry: entry.with_extra({"only": "first"}))

        Logger("app", [first, second]).info("message")

        assert first.entries[0].extra == {"only": "first"}
        assert second.entries[0].extra == {}

    def test_injector_returning_non_entry_is_ignored(self, make_handler):
        handler = make_handler()
        logger = Logger("app", handler, injectors=lambda entry: None)

        logger.info("message")

        assert handler.entries[0].message == "message"

    @pytest.mark.parametrize("name", [name for name, _ in PRIORITIES])
    def test_convenience_methods(self, make_handler, name):
        logger = Logger("test", make_handler())

        with patch.object(logger, "log") as log:
            getattr(logger, name)("test message")

        log.assert_called_once_with(LogLevel.from_value(name), "test message", None)

    def test_message_is_stringified(self, make_handler):
        handler = make_handler()
        Logger("app", handler).info(42)

        assert handler.entries[0].message == "42"

    def test_default_timezone_is_utc(self, make_handler):
        handler = make_handler()
        Logger("app", handler).debug("message")

        assert handler.entries[0].timestamp.utcoffset() == timedelta(0)

    def test_set_timezone_by_name(self, make_handler):
        handler = make_handler()
        logger = Logger("timezone-test", handler)

        logger.debug("before")
        logger.set_timezone("America/New_York")
        logger.debug("after")

        before, after = handler.entries
        assert before.timestamp.utcoffset() == timedelta(0)
        assert str(after.timestamp.tzinfo) == "America/New_York"

    def test_set_timezone_object(self, make_handler):
        handler = make_handler()
        logger = Logger("app", handler)

        logger.set_timezone(timezone(timedelta(hours=2)))
        logger.debug("message")

        assert handler.entries[0].timestamp.utcoffset() == timedelta(hours=2)

    def test_set_invalid_timezone(self, make_handler):
        logger = Logger("app", make_handler())

        with pytest.raises(InvalidArgumentError, match="Mars/Olympus_Mons"):
            logger.set_timezone("Mars/Olympus_Mons")

    def test_set_exception_handler_requires_callable(self, make_handler):
        logger = Logger("app", make_handler())

        with pytest.raises(InvalidArgumentError):
            logger.set_exception_handler("not callable")

    def test_flush_delivers_buffered_entries(self, make_handler):
        inner = make_handler()
        logger = Logger("app", BufferHandler(inner, buffer_limit=10, flush_on_shutdown=False))

        logger.info("buffered")
        assert inner.entries == []

        logger.flush()
        assert [e.message for e in inner.entries] == ["buffered"]


class TestLoggerBuilder:
    """Test builder pattern."""

    def test_builder_pattern(self, make_handler):
        handler = make_handler()
        logger = (LoggerBuilder()
            .with_name("builder_test")
            .with_handler(handler)
            .with_timezone("Europe/Paris")
            .build())

        assert logger.channel_name == "builder_test"
        assert str(logger.get_timezone()) == "Europe/Paris"
        assert logger.get_handlers() == [handler]

    def test_build_without_handlers(self):
        with pytest.raises(InvalidArgumentError, match="At least one handler"):
            LoggerBuilder().with_name("empty").build()

    def test_with_buffer_wraps_last_handler(self, make_handler):
        inner = make_handler()
        logger = LoggerBuilder().with_handler(inner).with_buffer(2).build()

        buffered = logger.get_handlers()[0]
        assert isinstance(buffered, BufferHandler)
        assert buffered.handler is inner

        logger.info("one")
        logger.info("two")
        assert len(inner.entries) == 2
        buffered.close()

    def test_with_buffer_requires_handler(self):
        with pytest.raises(InvalidArgumentError):
            LoggerBuilder().with_buffer(10)

    def test_with_console(self):
        logger = LoggerBuilder().with_console(min_level="warning", colored=False).build()

        handler = logger.get_handlers()[0]
        assert isinstance(handler, StreamHandler)
        assert handler.min_level is LogLevel.WARNING

    def test_injectors_and_exception_handler(self, make_mock_handler):
        error = RuntimeError("sink down")
        handler = make_mock_handler()
        handler.handle.side_effect = error
        callback = Mock()

        logger = (LoggerBuilder()
            .with_handler(handler)
            .with_injector(lambda entry: entry.with_extra({"app": "demo"}))
            .with_exception_handler(callback)
            .build())
        logger.info("message")

        entry = handler.handle.call_args[0][0]
        assert entry.extra == {"app": "demo"}
        callback.assert_called_once_with(error, handler)
