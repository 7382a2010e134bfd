"""
Exceptions and the fatal-exit path.

Parse-time problems are recovered with a warning. Installation mistakes
raise a FlexiLoggerError. Failures of the file sink are not recoverable:
``fatal()`` ends the process from whatever thread hit the failure.
"""

import os
import sys


# Exit status used when the logging infrastructure becomes unusable (EX_SOFTWARE)
EXIT_LOGGING_FAILURE = 70


class FlexiLoggerError(Exception):
    """Base class for errors raised by flexilog."""


class AlreadyInitializedError(FlexiLoggerError):
    """A global logger has already been installed in this process."""

    def __init__(self, message: str = "Logger initialization failed: already initialized"):
        super().__init__(message)


def warn(message: str) -> None:
    """Report a recovered anomaly on stderr."""
    print(f"warning: {message}", file=sys.stderr)


def fatal(message: str) -> None:
    """Report an unrecoverable sink failure and terminate the process.

    ``os._exit`` is used instead of ``sys.exit`` because the failure may
    surface on a worker thread, where SystemExit would only end that thread.
    """
    try:
        print(f"flexilog: {message}", file=sys.stderr, flush=True)
    except (OSError, ValueError):
        pass
    os._exit(EXIT_LOGGING_FAILURE)
