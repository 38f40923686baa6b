#!/usr/bin/env python3
"""
Command-line interface for github-repo-stats.
"""

import argparse
import logging
import sys
from typing import Optional

from . import __version__
from .app import run, setup_logging
from .exceptions import RepoStatsError


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="github-repo-stats",
        description="Shows overall statistics of public repos of provided user"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "target",
        metavar="TARGET",
        help="Target github account to get statistics from"
    )
    parser.add_argument(
        "config",
        metavar="CONFIG",
        help="Config file containing your github username and token (in new lines)"
    )
    return parser


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        parser.print_help()
        return 1

    args = parser.parse_args(argv)
    setup_logging()
    logger = logging.getLogger(__name__)

    try:
        run(args.target, args.config)
        return 0
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 1
    except RepoStatsError as e:
        logger.error(f"Application error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
