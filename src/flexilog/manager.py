"""
Process-wide installation of the flexilog router.

Exactly one router may be installed per process. init() resolves the
spec, creates the trace file if requested, attaches a FlexiHandler to the
root logger and lowers/raises the root level to the most verbose level
any directive allows. A second init() raises AlreadyInitializedError and
leaves the installed logger in place.

Usage::

    import logging
    import flexilog

    flexilog.init(flexilog.SinkConfig(write_to_file=True), "info,app.db=debug")
    logging.getLogger("app.db").debug("connected")
"""

import logging
import threading
from typing import Optional

from .config import SinkConfig, resolve_spec, trace_file_path
from .errors import AlreadyInitializedError
from .levels import to_logging_level
from .router import FlexiHandler, RecordRouter
from .sink import FileSink


# =============================================================================
# Module-level singleton
# =============================================================================

_router: Optional[RecordRouter] = None
_init_lock = threading.Lock()


def init(config: Optional[SinkConfig] = None,
         loglevelspec: Optional[str] = None) -> RecordRouter:
    """Install flexilog as the process-wide logger.

    Call once at program startup.

    Args:
        config: Output options (default: SinkConfig(), i.e. stderr)
        loglevelspec: Spec string; None falls back to FLEXILOG_SPEC, then
            to errors-only

    Returns:
        The installed RecordRouter

    Raises:
        AlreadyInitializedError: if a router is already installed
    """
    global _router

    if config is None:
        config = SinkConfig()

    with _init_lock:
        if _router is not None:
            raise AlreadyInitializedError()

        directives, exclusion = resolve_spec(loglevelspec)

        sink = None
        if config.write_to_file:
            path = trace_file_path(config.directory)
            if config.print_message:
                print(f"Trace is written to {path}")
            sink = FileSink(path)

        router = RecordRouter(directives, exclusion, config, sink)
        handler = FlexiHandler(router)

        root = logging.getLogger()
        root.addHandler(handler)
        root.setLevel(to_logging_level(directives.max_level()))

        _router = router
        return router


def get_router() -> Optional[RecordRouter]:
    """Return the installed RecordRouter, or None before init()."""
    return _router


def is_initialized() -> bool:
    return _router is not None
