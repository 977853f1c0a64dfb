"""Allow running dockwipe with ``python -m dockwipe``."""

from dockwipe.cli.main import app

app()
