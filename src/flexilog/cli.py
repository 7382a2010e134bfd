"""Main CLI entry point for flexilog.

Inspect how a spec string would filter records without writing any code:

  flexilog --spec "warn,app.db=debug" show
  flexilog --spec "warn,app.db=debug" check app.db.pool debug

Implements a two-pass argument parser:
  1. First pass: extract global flags (--spec) from anywhere in argv
  2. Second pass: dispatch to the subcommand

Without --spec the FLEXILOG_SPEC environment variable is used, then the
built-in errors-only default.

Subcommands self-register via register(subparsers) convention.
"""

import argparse
import sys

from flexilog._version import __version__


# ---------------------------------------------------------------------------
# Global flags (can precede or follow the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--spec": {"aliases": ["-s"], "metavar": "SPEC", "default": None,
               "help": "Log level spec (default: $FLEXILOG_SPEC, then 'error')"},
}


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        global_parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    global_args, remaining = global_parser.parse_known_args(argv)
    return global_args, remaining


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules.

    Each module in flexilog.commands must export:
      register(subparsers) — add itself to the subparser
      run(args) — execute the command, returning an exit code
    """
    from flexilog.commands import check, show
    return [show, check]


def _build_parser(commands):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="flexilog",
        description="flexilog — inspect log level specs",
        epilog=(
            "Run 'flexilog <command> --help' for details on a specific command.\n"
            "\n"
            "The global --spec flag can appear before or after the subcommand."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"flexilog {__version__}",
    )

    # Add global flags to main parser too (for --help display)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    for cmd_module in commands:
        cmd_module.register(subparsers)

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for the flexilog CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success / record emitted).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    # Pass 2: parse subcommand + its args
    parser = _build_parser(_discover_commands())

    if not remaining:
        parser.print_help()
        return 0

    args = parser.parse_args(remaining)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    # Global flags win over the (always None) second-pass defaults
    for key, value in vars(global_args).items():
        if getattr(args, key, None) is None:
            setattr(args, key, value)

    try:
        return args.func(args) or 0
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
