"""Command-line interface."""

from linekit.cli.main import cli

__all__ = ["cli"]
