"""Shared application dependencies and their orderly shutdown."""

from __future__ import annotations

import errno
import logging
from dataclasses import dataclass
from typing import Any, Protocol

from bankledger.config import Config


class _Server(Protocol):
    def shutdown(self) -> None: ...


class _Database(Protocol):
    def dispose(self) -> None: ...


@dataclass
class Dependency:
    """Logger, database, configuration and web server shared by the handlers."""

    logger: logging.Logger
    db: _Database
    config: Config
    server: _Server | None = None

    def shutdown(self) -> int:
        """Stop the server, close the database and flush logs; return an exit code."""
        code = 0
        log = self.logger

        log.info("Gracefully shutting down web server...")
        try:
            if self.server is not None:
                self.server.shutdown()
        except Exception as exc:
            log.error("failed to close server", extra={"error": str(exc)})
            code = 1
        else:
            log.info("web server shutted down")

        log.info("Gracefully shutting down db connection...")
        try:
            self.db.dispose()
        except Exception as exc:
            log.error("failed to close database connection", extra={"error": str(exc)})
            code = 1
        else:
            log.info("success to close database connection")

        try:
            self._flush_log()
        except OSError as exc:
            if exc.errno == errno.ENOTTY:
                log.info("success to flush log")
            else:
                log.error("failed to flush log", extra={"error": str(exc)})
                code = 1
        else:
            log.info("success to flush log")

        return code

    def _flush_log(self) -> None:
        target: Any = getattr(self.logger, "logger", self.logger)
        for handler in getattr(target, "handlers", ()):
            handler.flush()