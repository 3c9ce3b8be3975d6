# -*- coding: utf-8 -*-
"""Location: ./tests/unit/configalchemy/services/test_logging_service.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

Tests for the logging service.
"""

# Standard
import asyncio
import logging
import sys

# Third-Party
import orjson

# First-Party
from configalchemy.services.logging_service import JsonFormatter, LoggingService, ROOT_LOGGER_NAME


def _record(msg="hello", **extra):
    record = logging.LogRecord("configalchemy.test", logging.INFO, __file__, 10, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    def test_basic_fields(self):
        payload = orjson.loads(JsonFormatter().format(_record()))
        assert payload["message"] == "hello"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "configalchemy.test"
        assert "timestamp" in payload

    def test_context_fields_copied(self):
        payload = orjson.loads(JsonFormatter().format(_record(source="yaml", target="lua", code="OK", duration_ms=1.5)))
        assert (payload["source"], payload["target"], payload["code"], payload["duration_ms"]) == ("yaml", "lua", "OK", 1.5)

    def test_unknown_extras_ignored(self):
        payload = orjson.loads(JsonFormatter().format(_record(content="secret")))
        assert "content" not in payload

    def test_exception_included(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord("configalchemy", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())
        payload = orjson.loads(JsonFormatter().format(record))
        assert "ValueError: boom" in payload["exc_info"]


class TestLoggingService:
    def test_configure_installs_single_handler(self):
        service = LoggingService()
        root = logging.getLogger(ROOT_LOGGER_NAME)
        service.configure(level="DEBUG", log_format="json")
        service.configure(level="WARNING", log_format="text")
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_json_format_selected(self):
        service = LoggingService()
        service.configure(log_format="json")
        assert isinstance(logging.getLogger(ROOT_LOGGER_NAME).handlers[0].formatter, JsonFormatter)

    def test_initialize_and_shutdown(self):
        service = LoggingService()
        root = logging.getLogger(ROOT_LOGGER_NAME)
        asyncio.run(service.initialize())
        assert len(root.handlers) == 1
        asyncio.run(service.shutdown())
        assert root.handlers == []

    def test_shutdown_without_initialize(self):
        asyncio.run(LoggingService().shutdown())

    def test_get_logger(self):
        assert LoggingService().get_logger("configalchemy.x").name == "configalchemy.x"
