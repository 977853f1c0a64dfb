"""Unit tests for the config commands."""

from pathlib import Path

import pytest
from dockwipe.cli.main import app
from dockwipe.core.config import DockwipeConfig, load_config
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    return tmp_path / "dockwipe"


class TestConfigInit:
    """Tests for dockwipe config init."""

    def test_writes_defaults(self, config_home: Path) -> None:
        """init writes a loadable default config."""
        result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 0
        assert load_config(config_home / "config.toml") == DockwipeConfig()

    def test_keeps_existing_without_force(self, config_home: Path) -> None:
        """An existing file is left untouched."""
        config_home.mkdir()
        path = config_home / "config.toml"
        path.write_text('[engine]\nname = "podman"\n')

        result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 0
        assert "already exists" in result.output
        assert load_config(path).engine.name == "podman"

    def test_force_overwrites(self, config_home: Path) -> None:
        """--force replaces an existing file."""
        config_home.mkdir()
        path = config_home / "config.toml"
        path.write_text('[engine]\nname = "podman"\n')

        result = runner.invoke(app, ["config", "init", "--force"])

        assert result.exit_code == 0
        assert load_config(path).engine.name == "docker"

    def test_custom_path(self, config_home: Path, tmp_path: Path) -> None:
        """--path writes elsewhere."""
        target = tmp_path / "other" / "dockwipe.toml"

        result = runner.invoke(app, ["config", "init", "--path", str(target)])

        assert result.exit_code == 0
        assert target.exists()
        assert not (config_home / "config.toml").exists()


class TestConfigShow:
    """Tests for dockwipe config show."""

    def test_shows_defaults(self, config_home: Path) -> None:
        """Without a file the built-in defaults are shown."""
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "built-in defaults" in result.output
        assert "max_attempts" in result.output

    def test_invalid_file_exits_one(self, config_home: Path) -> None:
        """A broken config file is an error."""
        config_home.mkdir()
        (config_home / "config.toml").write_text("[readiness]\nmax_attempts = 0\n")

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 1
