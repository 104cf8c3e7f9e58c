"""Command-line interface."""

from aurora_term.cli.main import main

__all__ = ["main"]
