"""Main CLI entry point."""

import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from aurora_term.cli.app import create_app, print_help
from aurora_term.config import Settings
from aurora_term.errors import AuroraTermError

logger = logging.getLogger(__name__)


def setup_logging(settings: Settings) -> None:
    """Send log records to stderr through rich at the configured level."""
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main CLI entry point.

    Usage errors and rejected input print the help text instead of
    failing; the exit code is always 0.
    """
    setup_logging(Settings.from_env())
    args = sys.argv[1:] if argv is None else argv
    app = create_app()

    try:
        app(args=args, prog_name="aurora-term", standalone_mode=False)
    except click.ClickException as e:
        logger.debug("Invalid arguments: %s", e.format_message())
        print_help(Console(highlight=False))
    except click.Abort:
        logger.debug("Aborted")
    except AuroraTermError as e:
        logger.error("%s", e)
        print_help(Console(highlight=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
