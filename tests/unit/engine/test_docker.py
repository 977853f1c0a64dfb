"""Unit tests for DockerEngineClient.

run_command is mocked; no docker daemon or systemd is touched.
"""

import subprocess
from unittest.mock import MagicMock, patch

import pytest
from dockwipe.engine.base import EngineError
from dockwipe.engine.docker import DockerEngineClient
from dockwipe.utils.shell import CommandResult


def _ok(stdout: str = "") -> CommandResult:
    return CommandResult(stdout=stdout, stderr="", returncode=0)


def _fail(stderr: str = "boom") -> CommandResult:
    return CommandResult(stdout="", stderr=stderr, returncode=1)


class TestDockerEngineClient:
    """Tests for DockerEngineClient class."""

    @pytest.fixture
    def client(self) -> DockerEngineClient:
        """Create a client with default services."""
        return DockerEngineClient()

    def test_name_and_services(self, client: DockerEngineClient) -> None:
        """Defaults describe a stock installation."""
        assert client.name == "docker"
        assert client.services == ["docker.socket", "docker", "containerd"]

    @patch("dockwipe.engine.docker.command_exists", return_value=False)
    def test_is_installed(self, _mock_exists: MagicMock, client: DockerEngineClient) -> None:
        """is_installed reflects the CLI on PATH."""
        assert client.is_installed() is False

    @patch("dockwipe.engine.docker.run_command")
    def test_info_success(self, mock_run: MagicMock, client: DockerEngineClient) -> None:
        """info is True when docker info exits 0."""
        mock_run.return_value = _ok()

        assert client.info() is True
        assert mock_run.call_args.args[0] == ["docker", "info"]

    @patch("dockwipe.engine.docker.run_command")
    def test_info_timeout(self, mock_run: MagicMock, client: DockerEngineClient) -> None:
        """A hanging daemon is not ready."""
        mock_run.side_effect = subprocess.TimeoutExpired(cmd=["docker", "info"], timeout=15)

        assert client.info() is False

    @patch("dockwipe.engine.docker.run_command")
    def test_info_missing_binary(self, mock_run: MagicMock, client: DockerEngineClient) -> None:
        """A missing CLI is not ready."""
        mock_run.side_effect = FileNotFoundError("docker")

        assert client.info() is False


class TestServiceControl:
    """Tests for start and stop."""

    @patch("dockwipe.engine.docker.run_command")
    def test_stop_in_order(self, mock_run: MagicMock) -> None:
        """Services are stopped in configured order."""
        mock_run.return_value = _ok()

        assert DockerEngineClient().stop() is True

        called = [c.args[0] for c in mock_run.call_args_list]
        assert called == [
            ["sudo", "systemctl", "stop", "docker.socket"],
            ["sudo", "systemctl", "stop", "docker"],
            ["sudo", "systemctl", "stop", "containerd"],
        ]

    @patch("dockwipe.engine.docker.run_command")
    def test_start_in_reverse_order(self, mock_run: MagicMock) -> None:
        """Services are started runtime first."""
        mock_run.return_value = _ok()

        DockerEngineClient().start()

        called = [c.args[0][3] for c in mock_run.call_args_list]
        assert called == ["containerd", "docker", "docker.socket"]

    @patch("dockwipe.engine.docker.run_command")
    def test_stop_continues_after_failure(self, mock_run: MagicMock) -> None:
        """A failed unit does not prevent stopping the others."""
        mock_run.side_effect = [_fail("not loaded"), _ok(), _ok()]

        assert DockerEngineClient().stop() is False
        assert mock_run.call_count == 3


class TestMutations:
    """Tests for container stop and prune commands."""

    @patch("dockwipe.engine.docker.run_command")
    def test_stop_all_containers(self, mock_run: MagicMock) -> None:
        """Every listed container id is stopped in one command."""
        mock_run.side_effect = [_ok("abc\ndef\n"), _ok()]

        assert DockerEngineClient().stop_all_containers() is True
        assert mock_run.call_args_list[1].args[0] == ["docker", "stop", "abc", "def"]

    @patch("dockwipe.engine.docker.run_command")
    def test_stop_all_containers_none(self, mock_run: MagicMock) -> None:
        """No containers is a success without a stop command."""
        mock_run.return_value = _ok("")

        assert DockerEngineClient().stop_all_containers() is True
        mock_run.assert_called_once()

    @patch("dockwipe.engine.docker.run_command")
    def test_prune_all(self, mock_run: MagicMock) -> None:
        """prune_all removes images and volumes too."""
        mock_run.return_value = _ok()

        assert DockerEngineClient().prune_all() is True
        assert mock_run.call_args.args[0] == [
            "docker", "system", "prune", "-a", "--volumes", "-f",
        ]

    @patch("dockwipe.engine.docker.run_command")
    def test_prune_build_cache_failure(self, mock_run: MagicMock) -> None:
        """A failing builder prune reports False."""
        mock_run.return_value = _fail()

        assert DockerEngineClient().prune_build_cache() is False
        assert mock_run.call_args.args[0] == ["docker", "builder", "prune", "-a", "-f"]


class TestListing:
    """Tests for JSON line listings."""

    @patch("dockwipe.engine.docker.run_command")
    def test_parses_json_lines(self, mock_run: MagicMock) -> None:
        """Each output line becomes a row."""
        mock_run.return_value = _ok(
            '{"Names":"web","Image":"nginx","Status":"Up","Ports":""}\n'
            "\n"
            '{"Names":"db","Image":"postgres","Status":"Exited","Ports":""}\n'
        )

        rows = DockerEngineClient().list_containers()

        assert [r["Names"] for r in rows] == ["web", "db"]
        assert mock_run.call_args.args[0] == ["docker", "ps", "-a", "--format", "{{json .}}"]

    @patch("dockwipe.engine.docker.run_command")
    def test_failure_raises(self, mock_run: MagicMock) -> None:
        """A failing listing raises EngineError with stderr."""
        mock_run.return_value = _fail("Cannot connect to the Docker daemon")

        with pytest.raises(EngineError, match="Cannot connect"):
            DockerEngineClient().list_images()

    @patch("dockwipe.engine.docker.run_command")
    def test_invalid_json_raises(self, mock_run: MagicMock) -> None:
        """Non-JSON output raises EngineError."""
        mock_run.return_value = _ok("not json\n")

        with pytest.raises(EngineError, match="Unexpected output"):
            DockerEngineClient().list_volumes()

    @patch("dockwipe.engine.docker.run_command")
    def test_unrunnable_raises(self, mock_run: MagicMock) -> None:
        """A missing binary raises EngineError."""
        mock_run.side_effect = FileNotFoundError("docker")

        with pytest.raises(EngineError, match="Cannot run"):
            DockerEngineClient().list_networks()
