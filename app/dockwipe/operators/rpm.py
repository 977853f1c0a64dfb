"""RPM upgrade operator implementations (yum and dnf)."""

from dockwipe.operators.base import UpgradeOperator


class YumOperator(UpgradeOperator):
    """Operator for yum-based systems."""

    @property
    def manager(self) -> str:
        """Return yum as the probed executable."""
        return "yum"

    def build_commands(self, packages: list[str]) -> list[list[str]]:
        """Build the upgrade command."""
        return [["sudo", self.manager, "upgrade", "-y", *packages]]


class DnfOperator(YumOperator):
    """Operator for dnf-based systems; same command line as yum."""

    @property
    def manager(self) -> str:
        """Return dnf as the probed executable."""
        return "dnf"
