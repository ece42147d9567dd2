"""Command-line entry point for dev-start"""

import sys
from typing import List, Optional

from rich.console import Console

from dev_start.cli.args import parse_args
from dev_start.config import Config
from dev_start.core import EnvironmentReporter
from dev_start.logging_config import get_logger, setup_logging

console = Console()
logger = get_logger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = None
    try:
        parsed_args = parse_args(argv)

        setup_logging(debug=parsed_args.debug)
        if parsed_args.unknown:
            logger.debug(f"Ignoring unrecognised arguments: {parsed_args.unknown}")

        config = Config(
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
            fetch=not parsed_args.no_fetch,
            fetch_timeout=parsed_args.fetch_timeout,
        )

        if parsed_args.debug:
            console.print("[yellow]Configuration:[/yellow]", highlight=False)
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}", highlight=False)

        reporter = EnvironmentReporter(parsed_args.path, config, output=console)
        return reporter.run()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if parsed_args is not None and parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
