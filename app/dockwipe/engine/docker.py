"""Docker engine client implementation.

Drives the Docker CLI and systemd to query and mutate engine state.
"""

import json
import logging
import subprocess

from dockwipe.engine.base import EngineClient, EngineError
from dockwipe.utils.shell import CommandResult, command_exists, run_command

logger = logging.getLogger(__name__)


class DockerEngineClient(EngineClient):
    """Engine client for Docker.

    Service control uses ``sudo systemctl``; everything else uses the
    ``docker`` CLI as the invoking user (which requires membership in the
    docker group).

    Args:
        binary: Engine CLI executable name.
        services: systemd units in stop order. Started in reverse order.
    """

    # Timeout for liveness and listing queries
    _QUERY_TIMEOUT: float = 15.0

    def __init__(
        self,
        binary: str = "docker",
        services: list[str] | None = None,
    ) -> None:
        self._binary = binary
        self._services = (
            list(services) if services is not None else ["docker.socket", "docker", "containerd"]
        )

    @property
    def name(self) -> str:
        """Return the engine CLI name."""
        return self._binary

    @property
    def services(self) -> list[str]:
        """Service units managed by this client, in stop order."""
        return list(self._services)

    def is_installed(self) -> bool:
        """Check if the docker CLI is available."""
        return command_exists(self._binary)

    def info(self) -> bool:
        """Probe the daemon with ``docker info``."""
        result = self._run([self._binary, "info"], timeout=self._QUERY_TIMEOUT)
        return result is not None and result.success

    def start(self) -> bool:
        """Start services in reverse stop order (runtime first)."""
        return self._systemctl("start", list(reversed(self._services)))

    def stop(self) -> bool:
        """Stop services; a unit that is already stopped is not an error."""
        return self._systemctl("stop", self._services)

    def stop_all_containers(self) -> bool:
        """Stop all containers returned by ``docker ps -aq``."""
        listing = self._run([self._binary, "ps", "-aq"], timeout=self._QUERY_TIMEOUT)
        if listing is None or not listing.success:
            return False

        container_ids = listing.stdout.split()
        if not container_ids:
            logger.debug("No containers to stop")
            return True

        result = self._run([self._binary, "stop", *container_ids], timeout=None)
        return result is not None and result.success

    def prune_all(self) -> bool:
        """Run ``docker system prune -a --volumes -f``."""
        result = self._run(
            [self._binary, "system", "prune", "-a", "--volumes", "-f"],
            timeout=None,
        )
        return result is not None and result.success

    def prune_build_cache(self) -> bool:
        """Run ``docker builder prune -a -f``."""
        result = self._run([self._binary, "builder", "prune", "-a", "-f"], timeout=None)
        return result is not None and result.success

    def list_containers(self) -> list[dict[str, str]]:
        """List containers with ``docker ps -a``."""
        return self._list(["ps", "-a"])

    def list_images(self) -> list[dict[str, str]]:
        """List images with ``docker images``."""
        return self._list(["images"])

    def list_volumes(self) -> list[dict[str, str]]:
        """List volumes with ``docker volume ls``."""
        return self._list(["volume", "ls"])

    def list_networks(self) -> list[dict[str, str]]:
        """List networks with ``docker network ls``."""
        return self._list(["network", "ls"])

    def _list(self, subcommand: list[str]) -> list[dict[str, str]]:
        """Run a listing subcommand with JSON line output.

        Args:
            subcommand: Docker subcommand and arguments, without --format.

        Returns:
            One dictionary per output line.

        Raises:
            EngineError: If the command fails or prints invalid JSON.
        """
        args = [self._binary, *subcommand, "--format", "{{json .}}"]
        result = self._run(args, timeout=self._QUERY_TIMEOUT)
        if result is None:
            msg = f"Cannot run {' '.join(args)}"
            raise EngineError(msg)
        if not result.success:
            msg = result.stderr.strip() or f"{' '.join(args)} failed"
            raise EngineError(msg)

        rows: list[dict[str, str]] = []
        for line in result.stdout.splitlines():
            if not line.strip():
                continue
            try:
                data = json.loads(line)
            except json.JSONDecodeError as e:
                msg = f"Unexpected output from {' '.join(args)}: {line!r}"
                raise EngineError(msg) from e
            rows.append({str(key): str(value) for key, value in data.items()})
        return rows

    def _systemctl(self, verb: str, services: list[str]) -> bool:
        """Run ``sudo systemctl <verb>`` for each service.

        Args:
            verb: systemctl verb ("start" or "stop").
            services: Units in invocation order.

        Returns:
            True if every invocation succeeded.
        """
        ok = True
        for service in services:
            result = self._run(["sudo", "systemctl", verb, service], timeout=None)
            if result is None or not result.success:
                stderr = result.stderr.strip() if result is not None else ""
                logger.info("systemctl %s %s failed: %s", verb, service, stderr or "not run")
                ok = False
        return ok

    @staticmethod
    def _run(args: list[str], timeout: float | None) -> CommandResult | None:
        """Run a command, mapping launch failures to None.

        Args:
            args: Command and arguments.
            timeout: Timeout in seconds, or None to block.

        Returns:
            CommandResult, or None if the command could not be run or timed out.
        """
        try:
            return run_command(args, timeout=timeout)
        except (FileNotFoundError, OSError) as e:
            logger.warning("Cannot execute %s: %s", args[0], e)
        except subprocess.TimeoutExpired:
            logger.warning("Command timed out: %s", " ".join(args))
        return None
