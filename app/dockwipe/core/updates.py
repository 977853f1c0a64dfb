"""Engine package update dispatch.

Probes host package managers in a fixed priority order and upgrades the
engine packages with the first one found. This is advisory tooling: no
pinning, rollback or conflict handling.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dockwipe.operators.apt import AptOperator
from dockwipe.operators.rpm import DnfOperator, YumOperator
from dockwipe.utils.formatting import print_warning

if TYPE_CHECKING:
    from dockwipe.operators.base import UpgradeOperator, UpgradeResult

logger = logging.getLogger(__name__)


def get_operators() -> list[UpgradeOperator]:
    """Get upgrade operators in probe order (apt, yum, dnf).

    Returns:
        Operator instances in priority order.
    """
    return [AptOperator(), YumOperator(), DnfOperator()]


def detect_operator(operators: list[UpgradeOperator] | None = None) -> UpgradeOperator | None:
    """Find the first available package manager.

    Args:
        operators: Operators in probe order. Defaults to get_operators().

    Returns:
        The first available operator, or None.
    """
    for operator in operators if operators is not None else get_operators():
        if operator.is_available():
            return operator
    return None


def detect_and_upgrade(
    packages: list[str],
    operators: list[UpgradeOperator] | None = None,
) -> UpgradeResult | None:
    """Upgrade engine packages with the first available package manager.

    Args:
        packages: Package names to upgrade.
        operators: Operators in probe order. Defaults to get_operators().

    Returns:
        UpgradeResult, or None if no supported package manager was found.
    """
    operator = detect_operator(operators)
    if operator is None:
        logger.warning("No supported package manager found")
        print_warning("No supported package manager found (apt, yum, dnf). Skipping update.")
        return None

    logger.info("Upgrading %s with %s", ", ".join(packages), operator.manager)
    return operator.upgrade(packages)
