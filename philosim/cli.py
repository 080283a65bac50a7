"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys

from philosim.args import ArgumentError, parse_settings
from philosim.table import Table


def main(argv: list[str] | None = None) -> int:
    """Run the simulation; return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        settings = parse_settings(args)
    except ArgumentError as error:
        stream = sys.stderr if error.to_stderr else sys.stdout
        print(error.message, file=stream)
        return 1
    Table(settings, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())