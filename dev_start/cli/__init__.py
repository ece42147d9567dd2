"""Command-line interface for dev-start.

The entry point lives in dev_start.cli.main; this package also exposes
argument parsing.
"""

from .args import build_parser, parse_args

__all__ = ["build_parser", "parse_args"]
