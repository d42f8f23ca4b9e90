"""Command-line entry point for the dining simulation."""

from __future__ import annotations

import sys

from .parsing import ConfigError, parse_args
from .table import Table


def main(argv: list[str] | None = None) -> int:
    """Run the simulation: philosophers die eat sleep [meals]."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        settings = parse_args(args)
    except ConfigError as error:
        sys.stderr.write(str(error))
        return 1
    Table(settings).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())