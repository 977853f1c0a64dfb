"""APT upgrade operator implementation.

Upgrades already-installed packages with apt-get, never installing new ones.
"""

from dockwipe.operators.base import UpgradeOperator


class AptOperator(UpgradeOperator):
    """Operator for APT/dpkg systems.

    Refreshes the package index, then runs ``install --only-upgrade`` so
    packages that are not installed are left alone.
    """

    @property
    def manager(self) -> str:
        """Return apt as the probed executable."""
        return "apt"

    def build_commands(self, packages: list[str]) -> list[list[str]]:
        """Build apt-get update and upgrade commands."""
        return [
            ["sudo", "apt-get", "update"],
            ["sudo", "apt-get", "install", "--only-upgrade", "-y", *packages],
        ]
