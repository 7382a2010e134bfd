"""Configuration for flexilog.

Spec resolution (highest priority wins):
  1. Explicit spec string passed to init()
  2. FLEXILOG_SPEC environment variable
  3. Built-in default: errors only, for every module

Output options live in SinkConfig, a frozen dataclass handed to init()
once and never changed afterwards.
"""

import logging
import os
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Optional, Pattern, Tuple

from .directives import DirectiveTable, LogDirective
from .formats import default_format
from .levels import LevelFilter
from .spec import parse_spec


ENV_VAR = "FLEXILOG_SPEC"

TRACE_FILE_SUFFIX = ".trc"


@dataclass(frozen=True)
class SinkConfig:
    """Output options for the installed logger.

    Attributes:
        write_to_file: Write to a fresh trace file instead of stderr
        echo_errors_to_console: With a trace file, also print ERROR messages to stdout
        echo_info_to_console: With a trace file, also print INFO messages to stdout
        formatter: Callable turning a LogRecord into one line (no newline)
        print_message: With a trace file, announce its path on stdout
        directory: Where the trace file is created (None = current directory)
    """
    write_to_file: bool = False
    echo_errors_to_console: bool = True
    echo_info_to_console: bool = False
    formatter: Callable[[logging.LogRecord], str] = default_format
    print_message: bool = True
    directory: Optional[str] = None


def default_directives() -> DirectiveTable:
    """The table used when no spec is supplied anywhere."""
    return DirectiveTable([LogDirective(None, LevelFilter.ERROR)])


def resolve_spec(
    loglevelspec: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Tuple[DirectiveTable, Optional[Pattern[str]]]:
    """Resolve the directive table and exclusion pattern to install.

    Args:
        loglevelspec: Explicit spec; wins over the environment when not None
        environ: Environment mapping (default: os.environ)

    Returns:
        (DirectiveTable, compiled pattern or None)
    """
    if loglevelspec is not None:
        return parse_spec(loglevelspec)
    env = os.environ if environ is None else environ
    spec = env.get(ENV_VAR)
    if spec is not None:
        return parse_spec(spec)
    return default_directives(), None


def program_name(argv0: Optional[str] = None) -> str:
    """Stem of the running program's path, e.g. 'myprog' for /usr/bin/myprog.py."""
    if argv0 is None:
        argv0 = sys.argv[0] if sys.argv else ""
    return Path(argv0).stem or "python"


def trace_file_path(directory: Optional[str] = None, program: Optional[str] = None,
                    now: Optional[float] = None) -> str:
    """Build the trace file path: <program>_<YYYY-mm-dd_HH-MM-SS>.trc

    Args:
        directory: Parent directory (default: current directory)
        program: Program name (default: derived from sys.argv[0])
        now: Epoch timestamp (default: current time)
    """
    if program is None:
        program = program_name()
    stamp = time.strftime("_%Y-%m-%d_%H-%M-%S",
                          time.localtime(time.time() if now is None else now))
    filename = f"{program}{stamp}{TRACE_FILE_SUFFIX}"
    if directory is None:
        return filename
    return str(Path(directory) / filename)
