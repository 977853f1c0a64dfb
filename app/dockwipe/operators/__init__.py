"""Package upgrade operators for different package managers.

This module exports the operator classes used by the update dispatcher.
"""

from dockwipe.operators.apt import AptOperator
from dockwipe.operators.base import UpgradeOperator, UpgradeResult
from dockwipe.operators.rpm import DnfOperator, YumOperator

__all__ = ["AptOperator", "DnfOperator", "UpgradeOperator", "UpgradeResult", "YumOperator"]
