"""Command-line interface for x3."""

from .commands import cli_main

__all__ = ["cli_main"]
