"""
flexilog — per-module log filtering and routing behind ``logging``.

Configure with a compact spec string (``"warn,app.db=debug/^heartbeat"``),
write to stderr or to a fresh trace file, and plug in your own logline
format.

Public API:
    init               — install the process-wide logger (once)
    get_router         — access the installed RecordRouter
    SinkConfig         — output options
    parse_spec         — parse a spec string
    DirectiveTable     — enablement lookup
    LogDirective       — one (name, level) rule
    LevelFilter        — ordered levels OFF..TRACE
    RecordRouter       — filter, format, dispatch
    FileSink           — serialized trace file writer
    default_format     — ``INFO [target] message``
    detailed_format    — timestamp and source location too
    trace              — function tracing decorator
    FlexiLoggerError, AlreadyInitializedError
"""

from flexilog._version import __version__, __app_name__
from flexilog.config import ENV_VAR, SinkConfig, resolve_spec, trace_file_path
from flexilog.directives import DirectiveTable, LogDirective
from flexilog.errors import AlreadyInitializedError, FlexiLoggerError
from flexilog.formats import default_format, detailed_format
from flexilog.levels import TRACE_LEVEL, LevelFilter
from flexilog.manager import get_router, init
from flexilog.router import FlexiHandler, RecordRouter
from flexilog.sink import FileSink
from flexilog.spec import parse_spec
from flexilog.trace import trace

__all__ = [
    "__version__", "__app_name__",
    "init", "get_router",
    "SinkConfig", "ENV_VAR", "resolve_spec", "trace_file_path",
    "parse_spec", "DirectiveTable", "LogDirective",
    "LevelFilter", "TRACE_LEVEL",
    "RecordRouter", "FlexiHandler", "FileSink",
    "default_format", "detailed_format",
    "trace",
    "FlexiLoggerError", "AlreadyInitializedError",
]
