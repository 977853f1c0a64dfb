"""Abstract base class for package upgrade operators.

This module defines the UpgradeOperator interface that every supported
host package manager implements.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from dockwipe.utils.shell import command_exists, run_interactive

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpgradeResult:
    """Result of upgrading engine packages.

    Attributes:
        manager: Package manager that ran the upgrade.
        packages: Packages passed to the upgrade.
        returncode: Exit code of the first failing command, or 0.
    """

    manager: str
    packages: tuple[str, ...]
    returncode: int

    @property
    def success(self) -> bool:
        """Check if the upgrade completed successfully."""
        return self.returncode == 0


class UpgradeOperator(ABC):
    """Abstract base class for package upgrade operators.

    Operators run with an inherited terminal so sudo prompts and package
    manager progress reach the operator.

    Example:
        >>> operator = AptOperator()
        >>> if operator.is_available():
        ...     result = operator.upgrade(["docker-ce", "docker-ce-cli"])
        ...     print(result.success)
    """

    @property
    @abstractmethod
    def manager(self) -> str:
        """Return the executable probed for and used by this operator."""

    @abstractmethod
    def build_commands(self, packages: list[str]) -> list[list[str]]:
        """Build the commands that upgrade the given packages.

        Args:
            packages: Package names to upgrade.

        Returns:
            Commands executed in order, stopping at the first failure.
        """

    def is_available(self) -> bool:
        """Check if this package manager is available on the system."""
        return command_exists(self.manager)

    def upgrade(self, packages: list[str]) -> UpgradeResult:
        """Upgrade packages in place.

        Args:
            packages: Package names to upgrade.

        Returns:
            UpgradeResult for the whole run.

        Raises:
            RuntimeError: If the package manager is not available.
        """
        if not self.is_available():
            msg = f"{self.manager} package manager is not available on this system"
            raise RuntimeError(msg)

        for command in self.build_commands(packages):
            logger.info("Executing: %s", " ".join(command))
            returncode = run_interactive(command)
            if returncode != 0:
                logger.warning("%s exited with %d", " ".join(command), returncode)
                return UpgradeResult(self.manager, tuple(packages), returncode)

        return UpgradeResult(self.manager, tuple(packages), 0)
