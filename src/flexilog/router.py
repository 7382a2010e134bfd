"""
RecordRouter — decides whether and where each record is written.

Routing order for every record:
    1. Directive table says disabled       →  dropped
    2. Exclusion pattern matches message    →  dropped
    3. Formatted line + newline goes to the trace file (write_to_file)
       or to stderr (otherwise)

With a trace file, ERROR and/or INFO messages can additionally be echoed,
unformatted, to stdout. Trace file failures are fatal; stderr failures
are ignored.

FlexiHandler plugs a router into the ``logging`` module.
"""

import logging
import sys
from typing import Optional, Pattern, TextIO

from .config import SinkConfig
from .directives import DirectiveTable
from .levels import LevelFilter, from_logging_level
from .sink import FileSink


class RecordRouter:
    """Filter, format and dispatch log records.

    All state is fixed at construction. The only shared mutable resource
    is the FileSink, which serializes its own writes.

    Args:
        directives: Directive table deciding enablement
        exclusion: Compiled pattern; matching messages are dropped
        config: Output options
        sink: Trace file; required when config.write_to_file is set
        stream: Fallback stream (default: sys.stderr at write time)
        console: Echo stream (default: sys.stdout at write time)
    """

    def __init__(
        self,
        directives: DirectiveTable,
        exclusion: Optional[Pattern[str]] = None,
        config: Optional[SinkConfig] = None,
        sink: Optional[FileSink] = None,
        stream: Optional[TextIO] = None,
        console: Optional[TextIO] = None,
    ):
        self.directives = directives
        self.exclusion = exclusion
        self.config = config if config is not None else SinkConfig()
        if self.config.write_to_file and sink is None:
            raise ValueError("write_to_file requires a FileSink")
        self.sink = sink
        self._stream = stream
        self._console = console

    def enabled(self, level: LevelFilter, target: str) -> bool:
        """Would a record at ``level`` for ``target`` pass the directives?"""
        return self.directives.enabled(level, target)

    def excluded(self, message: str) -> bool:
        """Does the exclusion pattern suppress ``message``?"""
        return self.exclusion is not None and self.exclusion.search(message) is not None

    def route(self, record: logging.LogRecord) -> None:
        """Emit ``record`` if enabled and not excluded."""
        level = from_logging_level(record.levelno)
        if not self.directives.enabled(level, record.name):
            return

        message = record.getMessage()
        if self.excluded(message):
            return

        line = self.config.formatter(record) + "\n"

        if self.config.write_to_file:
            if (self.config.echo_errors_to_console and level == LevelFilter.ERROR
                    or self.config.echo_info_to_console and level == LevelFilter.INFO):
                self._echo(message)
            self.sink.write(line)
        else:
            stream = self._stream if self._stream is not None else sys.stderr
            try:
                stream.write(line)
            except (OSError, ValueError):
                pass

    def _echo(self, message: str) -> None:
        console = self._console if self._console is not None else sys.stdout
        try:
            print(message, file=console)
        except (OSError, ValueError):
            pass


class FlexiHandler(logging.Handler):
    """``logging.Handler`` that hands every record to a RecordRouter.

    Unlike stock handlers it does not take the handler-wide lock around
    emit(); the FileSink does its own locking and stderr writes are left
    unserialized.
    """

    def __init__(self, router: RecordRouter):
        super().__init__(level=logging.NOTSET)
        self.router = router

    def handle(self, record: logging.LogRecord) -> bool:
        rv = self.filter(record)
        if isinstance(rv, logging.LogRecord):
            record = rv
        if rv:
            self.emit(record)
        return rv

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.router.route(record)
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)
