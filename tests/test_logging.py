"""Tests for structured logging behavior."""

from __future__ import annotations

import json
import logging
import tempfile
from pathlib import Path
import unittest

from eventhub.hub import EventHub
from eventhub.logging_utils import JsonFormatter, configure_logging


def noop() -> None:
    return None


class HubLoggingTests(unittest.TestCase):
    """Validate structured debug events emitted by hubs and facades."""

    def test_registration_and_trigger_events_are_logged(self) -> None:
        hub = EventHub()
        with self.assertLogs("eventhub", level="DEBUG") as logs:
            hub.on("save", noop)
            hub.trigger("save")
            hub.off("save", noop)
            hub.off("*")
        messages = [record.getMessage() for record in logs.records]
        self.assertEqual(
            messages,
            ["hub.listener.added", "hub.trigger", "hub.listener.removed", "hub.reset"],
        )
        trigger_record = logs.records[1]
        self.assertEqual(trigger_record.event_name, "save")
        self.assertEqual(trigger_record.listener_count, 1)
        self.assertEqual(trigger_record.relay_count, 0)

    def test_facade_cleanup_logs_removed_count(self) -> None:
        hub = EventHub()
        with self.assertLogs("eventhub.facade", level="DEBUG") as logs:
            facade = hub.extend(object(), "panel")
            facade.on("open", noop)
            facade.on("close", noop)
            facade.cleanup()
        cleanup = [r for r in logs.records if r.getMessage() == "facade.cleanup"]
        self.assertEqual(len(cleanup), 1)
        self.assertEqual(cleanup[0].removed, 2)
        self.assertEqual(cleanup[0].prefix, "panel")

    def test_json_formatter_includes_structured_fields(self) -> None:
        formatter = JsonFormatter()
        record = logging.LogRecord(
            name="eventhub.hub",
            level=logging.DEBUG,
            pathname=__file__,
            lineno=1,
            msg="hub.trigger",
            args=(),
            exc_info=None,
        )
        record.event = "hub.trigger"
        record.event_name = "save"
        record.listener_count = 2

        data = json.loads(formatter.format(record))
        self.assertEqual(data["event"], "hub.trigger")
        self.assertEqual(data["event_name"], "save")
        self.assertEqual(data["listener_count"], 2)
        self.assertEqual(data["level"], "debug")
        self.assertEqual(data["logger"], "eventhub.hub")
        self.assertIn("timestamp", data)
        self.assertNotIn("pathname", data)


class ConfigureLoggingTests(unittest.TestCase):
    """Validate configure_logging() handler setup behavior."""

    def setUp(self) -> None:
        root = logging.getLogger()
        self._original_level = root.level
        self._original_handlers = list(root.handlers)

    def tearDown(self) -> None:
        root = logging.getLogger()
        for handler in root.handlers:
            if handler not in self._original_handlers:
                handler.close()
        root.setLevel(self._original_level)
        root.handlers.clear()
        root.handlers.extend(self._original_handlers)

    def _stream_handlers(self) -> list[logging.Handler]:
        return [
            h
            for h in logging.getLogger().handlers
            if isinstance(h, logging.StreamHandler)
            and not isinstance(h, logging.FileHandler)
        ]

    def test_configure_logging_sets_root_level(self) -> None:
        configure_logging({"level": "DEBUG", "structured": False, "log_to_file": False})
        self.assertEqual(logging.getLogger().level, logging.DEBUG)
        self.assertTrue(len(self._stream_handlers()) >= 1)

    def test_structured_flag_selects_formatter(self) -> None:
        configure_logging({"level": "INFO", "structured": True})
        formatters = [h.formatter for h in logging.getLogger().handlers]
        self.assertTrue(any(isinstance(f, JsonFormatter) for f in formatters))

        configure_logging({"level": "INFO", "structured": False})
        formatters = [h.formatter for h in logging.getLogger().handlers]
        self.assertFalse(any(isinstance(f, JsonFormatter) for f in formatters))

    def test_file_handler_created(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "nested" / "hub.log"
            configure_logging(
                {
                    "level": "DEBUG",
                    "structured": False,
                    "log_to_file": True,
                    "log_file_path": str(log_path),
                }
            )
            file_handlers = [
                h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)
            ]
            self.assertEqual(len(file_handlers), 1)
            self.assertTrue(log_path.exists())
            file_handlers[0].close()

    def test_stderr_handler_filters_to_package(self) -> None:
        configure_logging({"level": "DEBUG", "structured": False})
        handler = self._stream_handlers()[0]

        def make(name: str) -> logging.LogRecord:
            return logging.LogRecord(
                name=name,
                level=logging.WARNING,
                pathname="",
                lineno=0,
                msg="x",
                args=(),
                exc_info=None,
            )

        self.assertTrue(handler.filter(make("eventhub.hub")))
        self.assertTrue(handler.filter(make("eventhub")))
        self.assertFalse(handler.filter(make("eventhubby")))
        self.assertFalse(handler.filter(make("httpx")))


if __name__ == "__main__":
    unittest.main()
