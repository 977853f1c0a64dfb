"""Unit tests for the main CLI application."""

import logging

from dockwipe import __version__
from dockwipe.cli.main import app, configure_logging
from typer.testing import CliRunner

runner = CliRunner()


class TestMainApp:
    """Tests for global options and help."""

    def test_version(self) -> None:
        """--version prints the version and exits 0."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self) -> None:
        """--help lists every subcommand."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for name in ("reset", "clean", "config"):
            assert name in result.output


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_verbose_enables_debug(self) -> None:
        """--verbose logs at DEBUG."""
        configure_logging(verbose=True)

        assert logging.getLogger().level == logging.DEBUG

    def test_default_is_warning(self) -> None:
        """Without --verbose only warnings are shown."""
        configure_logging(verbose=False)

        assert logging.getLogger().level == logging.WARNING
