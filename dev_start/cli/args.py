"""Command-line argument parsing for dev-start."""

import argparse
import os
import sys
from typing import List, Optional

from dev_start.__version__ import __version__

VERBOSE_FLAGS = ("--verbose", "-v")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="dev-start",
        allow_abbrev=False,
        description="Check a project's development environment and suggest fixes. "
        "Reads only; nothing is changed.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Explain every check, not just problems"
    )
    parser.add_argument("--version", action="version", version=f"dev-start {__version__}")
    parser.add_argument(
        "--debug", action="store_true", help="Log diagnostics to stderr for troubleshooting"
    )
    parser.add_argument(
        "--no-fetch",
        action="store_true",
        help="Skip fetching from the remote (no behind-remote check)",
    )
    parser.add_argument(
        "--fetch-timeout",
        type=float,
        default=10.0,
        metavar="SECONDS",
        help="Give up on the remote fetch after this many seconds (default: 10)",
    )
    parser.add_argument(
        "--path",
        default=os.getcwd(),
        help="Project directory to inspect (default: current directory)",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Verbose mode is on only when the first argument is a verbose flag.
    Unrecognised arguments are ignored, so any other first argument simply
    means the default terse report.
    """
    if argv is None:
        argv = sys.argv[1:]
    args, unknown = build_parser().parse_known_args(argv)
    args.verbose = bool(argv) and argv[0] in VERBOSE_FLAGS
    args.unknown = unknown
    return args
