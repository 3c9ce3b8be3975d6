# -*- coding: utf-8 -*-
"""Location: ./configalchemy/services/logging_service.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

Logging Service.

Thin wrapper over the standard :mod:`logging` module that installs a single
stream handler on the ``configalchemy`` logger, formatted either as one JSON
object per line (serialized with orjson) or as plain text, depending on the
``LOG_FORMAT`` setting.

Submitted content is never passed to a logger; callers log formats, sizes,
durations and outcome codes only.

Examples:
    >>> service = LoggingService()
    >>> service.get_logger("configalchemy.test").name
    'configalchemy.test'
"""

# Standard
import logging
import sys
from typing import Any, Dict, Optional

# Third-Party
import orjson

# First-Party
from configalchemy.config import settings

ROOT_LOGGER_NAME = "configalchemy"

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Structured fields copied from ``extra=`` into JSON records
CONTEXT_FIELDS = ("source", "target", "code", "input_size", "output_size", "duration_ms")


class JsonFormatter(logging.Formatter):
    """Render log records as single-line JSON objects.

    Examples:
        >>> record = logging.LogRecord("configalchemy", logging.INFO, __file__, 1, "hello", None, None)
        >>> record.code = "OK"
        >>> payload = orjson.loads(JsonFormatter().format(record))
        >>> payload["message"], payload["level"], payload["code"]
        ('hello', 'INFO', 'OK')
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a record.

        Args:
            record: The record to format.

        Returns:
            str: JSON text.
        """
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=str).decode("utf-8")


class LoggingService:
    """Configure and hand out loggers for the service."""

    def __init__(self) -> None:
        """Create an unconfigured service."""
        self._handler: Optional[logging.Handler] = None

    def get_logger(self, name: str) -> logging.Logger:
        """Return a named logger.

        Args:
            name: Logger name, usually ``__name__``.

        Returns:
            logging.Logger: The logger.
        """
        return logging.getLogger(name)

    def configure(self, level: Optional[str] = None, log_format: Optional[str] = None) -> None:
        """Install the stream handler on the ``configalchemy`` logger.

        Calling it again replaces the previous handler.

        Args:
            level: Overrides ``settings.log_level``.
            log_format: Overrides ``settings.log_format``.
        """
        root = logging.getLogger(ROOT_LOGGER_NAME)
        if self._handler is not None:
            root.removeHandler(self._handler)

        handler = logging.StreamHandler(sys.stderr)
        if (log_format or settings.log_format) == "json":
            handler.setFormatter(JsonFormatter())
        else:
            handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT))

        root.addHandler(handler)
        root.setLevel(level or settings.log_level)
        root.propagate = False
        self._handler = handler

    async def initialize(self) -> None:
        """Configure logging at application startup."""
        self.configure()
        self.get_logger(__name__).debug(f"Logging initialized (level={settings.log_level}, format={settings.log_format})")

    async def shutdown(self) -> None:
        """Detach the handler at application shutdown."""
        if self._handler is None:
            return
        self._handler.flush()
        logging.getLogger(ROOT_LOGGER_NAME).removeHandler(self._handler)
        self._handler = None
