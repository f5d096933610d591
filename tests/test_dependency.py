import errno
import logging

import pytest
from sqlalchemy import create_engine

from bankledger.config import Config
from bankledger.dependency import Dependency


class _ListHandler(logging.Handler):
    def __init__(self, flush_error=None):
        super().__init__()
        self.records = []
        self.flush_error = flush_error

    def emit(self, record):
        self.records.append(record)

    def flush(self):
        if self.flush_error is not None:
            raise self.flush_error

    def messages(self):
        return [r.getMessage() for r in self.records]


class _Server:
    def __init__(self, error=None):
        self.stopped = False
        self.error = error

    def shutdown(self):
        if self.error is not None:
            raise self.error
        self.stopped = True


class _BrokenDb:
    def dispose(self):
        raise RuntimeError("close failed")


def _logger(name, handler):
    logger = logging.getLogger(f"tests.dependency.{name}")
    logger.handlers.clear()
    logger.setLevel(logging.INFO)
    logger.propagate = False
    logger.addHandler(handler)
    return logger


def test_clean_shutdown_returns_zero():
    handler = _ListHandler()
    server = _Server()
    deps = Dependency(_logger("clean", handler), create_engine("sqlite://"), Config(), server)
    assert deps.shutdown() == 0
    assert server.stopped is True
    assert "web server shutted down" in handler.messages()
    assert "success to close database connection" in handler.messages()
    assert handler.messages()[-1] == "success to flush log"


def test_server_failure_returns_one():
    handler = _ListHandler()
    deps = Dependency(
        _logger("server", handler), create_engine("sqlite://"), Config(), _Server(RuntimeError("busy"))
    )
    assert deps.shutdown() == 1
    assert "failed to close server" in handler.messages()
    assert "success to close database connection" in handler.messages()


def test_database_failure_returns_one():
    handler = _ListHandler()
    deps = Dependency(_logger("db", handler), _BrokenDb(), Config(), _Server())
    assert deps.shutdown() == 1
    assert "failed to close database connection" in handler.messages()


@pytest.mark.parametrize(
    ("flush_error", "expected_code", "expected_message"),
    [
        (OSError(errno.ENOTTY, "not a tty"), 0, "success to flush log"),
        (OSError(errno.EIO, "io error"), 1, "failed to flush log"),
    ],
)
def test_log_flush_errors(flush_error, expected_code, expected_message):
    handler = _ListHandler(flush_error)
    deps = Dependency(_logger("flush", handler), create_engine("sqlite://"), Config(), _Server())
    assert deps.shutdown() == expected_code
    assert handler.messages()[-1] == expected_message