"""CLI commands for dockwipe.

This package contains all subcommand implementations.
"""

from dockwipe.cli.commands import clean, config, reset

__all__ = ["clean", "config", "reset"]
