"""Data models for dockwipe.

This module exports the purge, review and readiness data structures.
"""

from dockwipe.models.purge import (
    PurgeItem,
    PurgeOutcome,
    PurgeResult,
    ResourceSelector,
    Subsystem,
    SubsystemPurgeTarget,
)
from dockwipe.models.readiness import ReadinessState
from dockwipe.models.review import (
    UNKNOWN_SIZE,
    DirectoryCandidate,
    ReviewOutcome,
    ReviewResult,
)

__all__ = [
    "UNKNOWN_SIZE",
    "DirectoryCandidate",
    "PurgeItem",
    "PurgeOutcome",
    "PurgeResult",
    "ReadinessState",
    "ResourceSelector",
    "ReviewOutcome",
    "ReviewResult",
    "Subsystem",
    "SubsystemPurgeTarget",
]
