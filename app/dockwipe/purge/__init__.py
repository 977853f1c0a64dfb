"""Data purge module.

This module provides the purge target tables for the total and scoped
operating modes, and the engine that removes them.
"""

from dockwipe.purge.engine import PurgeEngine
from dockwipe.purge.targets import build_scoped_targets, build_total_targets

__all__ = ["PurgeEngine", "build_scoped_targets", "build_total_targets"]
