"""flexilog check — would a record be emitted?

Exit status:
    0  the record would be written
    1  the record is disabled or excluded
    2  LEVEL is not a level
"""

import argparse
import sys

from flexilog.config import resolve_spec
from flexilog.levels import LevelFilter


def register(subparsers):
    """Register the 'check' subcommand."""
    p = subparsers.add_parser(
        "check",
        help="Check whether a record would be emitted",
        description=(
            "Check a record's TARGET (logger name) and LEVEL against the spec.\n"
            "With --message, also apply the spec's exclusion pattern."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("target", metavar="TARGET",
                   help="Logger name, e.g. app.db.pool")
    p.add_argument("level", metavar="LEVEL",
                   help="error, warn, info, debug, trace (or 1..5)")
    p.add_argument("--message", "-m", metavar="TEXT", default=None,
                   help="Message text to test against the exclusion pattern")
    p.set_defaults(func=run)


def run(args):
    """Execute the check command."""
    try:
        level = LevelFilter.parse(args.level)
    except ValueError as e:
        print(f"  ERROR: {e}", file=sys.stderr)
        return 2
    if level == LevelFilter.OFF:
        print("  ERROR: 'off' is a filter, not a record level", file=sys.stderr)
        return 2

    directives, exclusion = resolve_spec(args.spec)
    subject = f"{level.name.lower()} @ {args.target}"

    if not directives.enabled(level, args.target):
        print(f"  [SKIP] disabled: {subject}")
        return 1

    if (args.message is not None and exclusion is not None
            and exclusion.search(args.message)):
        print(f"  [SKIP] excluded by /{exclusion.pattern}/: {subject}")
        return 1

    print(f"  [OK] enabled: {subject}")
    return 0
