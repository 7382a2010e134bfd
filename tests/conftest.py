"""Shared test fixtures for the flexilog test suite."""

import logging

import pytest

from flexilog import errors as _errors_mod
from flexilog import manager as _manager_mod
from flexilog.levels import TRACE_LEVEL
from flexilog.router import FlexiHandler


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: multi-threaded stress tests (run with --all)")


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------
LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE_LEVEL,
}


@pytest.fixture
def make_record():
    """Factory for LogRecords: make_record('app.db', 'debug', 'msg %s', 1)."""
    def _make(name="app", level="info", msg="hello", *args):
        levelno = LEVELS[level] if isinstance(level, str) else level
        return logging.LogRecord(
            name, levelno, "/src/app/module.py", 42, msg, args or None, None,
        )
    return _make


# ---------------------------------------------------------------------------
# Fatal exit
# ---------------------------------------------------------------------------
class FatalExit(BaseException):
    """Raised in place of os._exit() so tests can observe fatal paths."""

    def __init__(self, code):
        super().__init__(code)
        self.code = code


@pytest.fixture
def fatal_exit(monkeypatch):
    """Replace os._exit in flexilog.errors with a raising stub.

    Returns the exception class to use with pytest.raises.
    """
    def fake_exit(code):
        raise FatalExit(code)

    monkeypatch.setattr(_errors_mod.os, "_exit", fake_exit)
    return FatalExit


# ---------------------------------------------------------------------------
# Singleton state
# ---------------------------------------------------------------------------
@pytest.fixture
def fresh_manager(monkeypatch):
    """Start with no installed router; undo init() afterwards.

    Removes the handler from the root logger, closes any trace file, and
    restores the root level so other tests see a clean logging setup.
    """
    monkeypatch.delenv("FLEXILOG_SPEC", raising=False)
    root = logging.getLogger()
    saved_level = root.level
    saved = _manager_mod._router
    _manager_mod._router = None
    yield _manager_mod
    router = _manager_mod._router
    for handler in list(root.handlers):
        if isinstance(handler, FlexiHandler) and handler.router is router:
            root.removeHandler(handler)
    if router is not None and router.sink is not None:
        router.sink.close()
    root.setLevel(saved_level)
    _manager_mod._router = saved
