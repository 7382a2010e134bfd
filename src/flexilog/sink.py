"""
FileSink — the one shared, serialized trace file writer.

The file is opened once, line-buffered and in append mode, when the
logger is installed. Every write holds the sink's lock, so lines written
from concurrent threads never interleave. Any failure to open or write
the file ends the process (see errors.fatal).
"""

import threading
from typing import Optional, TextIO

from .errors import fatal


class FileSink:
    """Append-only, line-buffered, lock-serialized text file.

    Usage::

        sink = FileSink("myprog_2015-07-08_10-44-11.trc")
        sink.write("INFO [app] started\\n")
    """

    def __init__(self, path: str):
        self.path = path
        self._lock = threading.Lock()
        self._file: Optional[TextIO] = None
        try:
            self._file = open(path, "a", encoding="utf-8",
                              errors="backslashreplace", buffering=1)
        except OSError as e:
            fatal(f"cannot create trace file '{path}': {e}")

    def write(self, line: str) -> None:
        """Append one complete line (terminator included)."""
        with self._lock:
            try:
                self._file.write(line)
            except (OSError, ValueError) as e:
                fatal(f"File logger: write failed with {e}")

    def close(self) -> None:
        """Close the file. Not needed in normal operation."""
        with self._lock:
            if self._file is not None:
                self._file.close()

    @property
    def closed(self) -> bool:
        return self._file is None or self._file.closed
