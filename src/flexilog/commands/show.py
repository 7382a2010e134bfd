"""flexilog show — print the directive table a spec resolves to.

Directives are listed in the order they are scanned when matching a
record: longest name first, the global fallback last. The first entry
whose name prefixes the target decides.
"""

import argparse

from flexilog.config import resolve_spec
from flexilog.spec import format_directives


def register(subparsers):
    """Register the 'show' subcommand."""
    p = subparsers.add_parser(
        "show",
        help="Show the directive table for a spec",
        description=(
            "Parse the spec (--spec, $FLEXILOG_SPEC or the default) and list\n"
            "its directives in matching order."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.set_defaults(func=run)


def format_table(directives, exclusion):
    """Render the table as aligned text, one directive per line."""
    rows = list(reversed(directives.directives))
    if not rows:
        lines = ["Directives: (none, every record is disabled)"]
    else:
        lines = ["Directives (matching order):"]
        width = max(len(d.name or "*") for d in rows)
        for d in rows:
            name = d.name if d.name is not None else "*"
            lines.append(f"  {name:<{width}}  {d.level.name.lower()}")
    if exclusion is not None:
        lines.append(f"Exclude: /{exclusion.pattern}/")
    lines.append(f"Spec: {format_directives(directives, exclusion)}")
    return "\n".join(lines)


def run(args):
    """Execute the show command."""
    directives, exclusion = resolve_spec(args.spec)
    print(format_table(directives, exclusion))
    return 0
