"""Structured JSON logging for the service."""

from __future__ import annotations

import json
import logging
import sys

SERVICE_NAME = "user-account"
LOGGER_NAME = "bankledger"


class _ServiceFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.service = SERVICE_NAME
        return True


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "level": record.levelname.lower(),
            "ts": record.created,
            "caller": f"{record.filename}:{record.lineno}",
            "msg": record.getMessage(),
        }
        for key in ("service", "error"):
            value = getattr(record, key, None)
            if value is not None:
                entry[key] = value
        if record.exc_info:
            entry["stacktrace"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class _JsonStreamHandler(logging.StreamHandler):
    pass


def load_logger() -> logging.Logger:
    """Return the service logger, writing JSON lines at INFO level to stderr."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    if not any(isinstance(f, _ServiceFilter) for f in logger.filters):
        logger.addFilter(_ServiceFilter())
    if not any(isinstance(h, _JsonStreamHandler) for h in logger.handlers):
        handler = _JsonStreamHandler(sys.stderr)
        handler.setFormatter(_JsonFormatter())
        logger.addHandler(handler)
    return logger