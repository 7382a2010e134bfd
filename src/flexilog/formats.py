"""
Logline formatters.

A formatter is any callable taking a ``logging.LogRecord`` and returning
the line to write, without the trailing newline. Two are provided:

    default_format   INFO [app.module] Task read from conf.json
    detailed_format  [2015-07-08 12:12:32:639785] INFO [app.module] app/module.py:26: Task read from conf.json

Both derive everything from the record, so formatting a record twice
gives the same string.
"""

import logging
import time

from .levels import from_logging_level


def level_name(record: logging.LogRecord) -> str:
    """Upper-case severity name (ERROR, WARN, INFO, DEBUG, TRACE)."""
    return from_logging_level(record.levelno).name


def default_format(record: logging.LogRecord) -> str:
    """Format as ``LEVEL [target] message``."""
    return f"{level_name(record)} [{record.name}] {record.getMessage()}"


def detailed_format(record: logging.LogRecord) -> str:
    """Format with timestamp (microseconds) and source location."""
    stamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(record.created))
    micros = int((record.created % 1) * 1_000_000)
    return (f"[{stamp}:{micros:06d}] {level_name(record)} [{record.name}] "
            f"{record.pathname}:{record.lineno}: {record.getMessage()}")
