"""
Severity levels for flexilog.

One totally ordered set serves both as a record's severity and as a
directive's ceiling:

    ←── quieter ──────────────────────────── louder ──→
     0      1      2      3      4      5
    off   error   warn   info  debug  trace

The emit rule is simple:

    record.level <= directive.level  →  record is enabled

Records never carry OFF; a directive at OFF disables everything it matches.

The ``logging`` module counts the other way round (higher = more severe),
so this module also owns the translation between the two scales.
"""

import logging
from enum import IntEnum


# Numeric value of the extra TRACE level registered with ``logging``
TRACE_LEVEL = 5

logging.addLevelName(TRACE_LEVEL, "TRACE")


class LevelFilter(IntEnum):
    """Ordered severity filter, OFF (nothing) through TRACE (everything)."""
    OFF = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    @classmethod
    def max(cls) -> "LevelFilter":
        """The most permissive filter."""
        return cls.TRACE

    @classmethod
    def parse(cls, token: str) -> "LevelFilter":
        """Parse a level token.

        Accepts the lowercase names (case-sensitive) or a decimal rank
        between 0 and 5.

        Raises:
            ValueError: if the token is not a level.
        """
        level = _NAMES.get(token)
        if level is not None:
            return level
        if token.isascii() and token.isdigit():
            rank = int(token)
            if rank <= cls.TRACE:
                return cls(rank)
        raise ValueError(f"not a log level: {token!r}")


_NAMES = {level.name.lower(): level for level in LevelFilter}


def from_logging_level(levelno: int) -> LevelFilter:
    """Map a ``logging`` numeric level onto the severity set.

    CRITICAL folds into ERROR; anything below DEBUG counts as TRACE.
    """
    if levelno >= logging.ERROR:
        return LevelFilter.ERROR
    if levelno >= logging.WARNING:
        return LevelFilter.WARN
    if levelno >= logging.INFO:
        return LevelFilter.INFO
    if levelno >= logging.DEBUG:
        return LevelFilter.DEBUG
    return LevelFilter.TRACE


def to_logging_level(level: LevelFilter) -> int:
    """Lowest ``logging`` level that a filter at ``level`` lets through.

    OFF maps above CRITICAL so that nothing passes.
    """
    return _LOGGING_LEVELS[level]


_LOGGING_LEVELS = {
    LevelFilter.OFF: logging.CRITICAL + 1,
    LevelFilter.ERROR: logging.ERROR,
    LevelFilter.WARN: logging.WARNING,
    LevelFilter.INFO: logging.INFO,
    LevelFilter.DEBUG: logging.DEBUG,
    LevelFilter.TRACE: TRACE_LEVEL,
}
