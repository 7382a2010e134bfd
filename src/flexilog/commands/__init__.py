"""flexilog subcommands (see flexilog.cli)."""
