"""Abstract base class for container engine clients.

This module defines the narrow EngineClient interface dockwipe needs from a
container engine. The engine itself is an external collaborator: clients
invoke it, they never reimplement it.
"""

from abc import ABC, abstractmethod


class EngineError(Exception):
    """Raised when an engine query fails."""


class EngineClient(ABC):
    """Abstract base class for container engine clients.

    Mutating operations are best-effort and report success as a bool;
    nothing to remove counts as success. Listing operations raise
    EngineError on failure.

    Example:
        >>> client = DockerEngineClient()
        >>> if client.is_installed() and client.info():
        ...     for row in client.list_containers():
        ...         print(row["Names"])
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the engine name (e.g. "docker")."""

    @abstractmethod
    def is_installed(self) -> bool:
        """Check if the engine CLI is present on the system."""

    @abstractmethod
    def info(self) -> bool:
        """Probe engine liveness.

        Returns:
            True if the engine daemon answered an info query.
        """

    @abstractmethod
    def start(self) -> bool:
        """Start the engine services.

        Returns:
            True if every service start command succeeded.
        """

    @abstractmethod
    def stop(self) -> bool:
        """Stop the engine services.

        Returns:
            True if every service stop command succeeded.
        """

    @abstractmethod
    def stop_all_containers(self) -> bool:
        """Stop every container, running or not.

        Returns:
            True if all containers were stopped or none existed.
        """

    @abstractmethod
    def prune_all(self) -> bool:
        """Remove all stopped containers, unused images, volumes and networks.

        Returns:
            True if the prune command succeeded.
        """

    @abstractmethod
    def prune_build_cache(self) -> bool:
        """Remove the whole build cache.

        Returns:
            True if the prune command succeeded.
        """

    @abstractmethod
    def list_containers(self) -> list[dict[str, str]]:
        """List all containers.

        Raises:
            EngineError: If the engine cannot be queried.
        """

    @abstractmethod
    def list_images(self) -> list[dict[str, str]]:
        """List all images.

        Raises:
            EngineError: If the engine cannot be queried.
        """

    @abstractmethod
    def list_volumes(self) -> list[dict[str, str]]:
        """List all volumes.

        Raises:
            EngineError: If the engine cannot be queried.
        """

    @abstractmethod
    def list_networks(self) -> list[dict[str, str]]:
        """List all networks.

        Raises:
            EngineError: If the engine cannot be queried.
        """
