"""CLI package for dockwipe.

This package contains the Typer application (dockwipe.cli.main) and all
subcommands.
"""
