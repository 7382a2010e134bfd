"""
Parser for the log level specification language.

Spec syntax (compact, comma separated, optional trailing filter):
    DIRECTIVE[,DIRECTIVE...][/PATTERN]

    Each DIRECTIVE is one of:
        info                # global fallback at a level
        app.db              # module at the most verbose level
        app.db=             # same as above
        app.db=debug        # module at a level

    Levels are off, error, warn, info, debug, trace, or a rank 0..5.

    Examples:
        warn                        # everything at warn and above
        warn,app.db=trace           # plus all of app.db
        info/health.?check          # info, minus messages matching the regex

Bad segments are skipped with a warning. A spec with more than one '/'
is rejected entirely and yields an empty table: nothing is logged.
"""

import re
from typing import List, Optional, Pattern, Tuple

from .directives import DirectiveTable, LogDirective
from .errors import warn
from .levels import LevelFilter


def parse_spec(spec: str) -> Tuple[DirectiveTable, Optional[Pattern[str]]]:
    """Parse a spec string into a directive table and an exclusion pattern.

    Args:
        spec: Spec string like "info,app.db=debug/^heartbeat"

    Returns:
        (DirectiveTable, compiled pattern or None)
    """
    parts = spec.split('/')
    if len(parts) > 2:
        warn(f"invalid logging spec '{spec}', ignoring it (too many '/'s)")
        return DirectiveTable(), None

    directives = _parse_directives(parts[0])
    pattern = _compile_filter(parts[1]) if len(parts) == 2 else None
    return DirectiveTable(directives), pattern


def _parse_directives(mods: str) -> List[LogDirective]:
    directives = []
    for segment in mods.split(','):
        if not segment:
            continue
        directive = _parse_directive(segment)
        if directive is not None:
            directives.append(directive)
    return directives


def _parse_directive(segment: str) -> Optional[LogDirective]:
    """Parse one comma-separated segment; None means skip it."""
    pieces = segment.split('=')

    if len(pieces) == 1:
        # A lone level is a global fallback, anything else a module name
        try:
            return LogDirective(None, LevelFilter.parse(segment))
        except ValueError:
            return LogDirective(segment, LevelFilter.max())

    if len(pieces) == 2:
        name, level_token = pieces[0], pieces[1].strip()
        if not level_token:
            return LogDirective(name, LevelFilter.max())
        try:
            return LogDirective(name, LevelFilter.parse(level_token))
        except ValueError:
            warn(f"invalid logging spec '{level_token}', ignoring it")
            return None

    warn(f"invalid logging spec '{segment}', ignoring it")
    return None


def _compile_filter(expression: str) -> Optional[Pattern[str]]:
    try:
        return re.compile(expression)
    except re.error as e:
        warn(f"invalid regex filter - {e}")
        return None


def format_directives(table: DirectiveTable, pattern: Optional[Pattern[str]] = None) -> str:
    """Render a directive table back into spec syntax.

    Directives appear in table order. A table produced by parse_spec()
    renders to a spec that parses back to an equal table; the pattern
    source is appended verbatim.
    """
    segments = []
    for directive in table:
        level = directive.level.name.lower()
        if directive.name is None:
            segments.append(level)
        else:
            segments.append(f"{directive.name}={level}")
    text = ','.join(segments)
    if pattern is not None:
        text = f"{text}/{pattern.pattern}"
    return text
