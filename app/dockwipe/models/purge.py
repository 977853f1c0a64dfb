"""Purge models for the data purge engine.

This module defines the static purge targets enumerated per operating mode
and the per-item results produced while removing them.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Subsystem(str, Enum):
    """Class of engine data removed together.

    Attributes:
        ENGINE_RESOURCES: Containers, images, volumes, networks and build cache
            removed through the engine's own CLI.
        CORE_RUNTIME: Engine and runtime data roots plus /etc/<engine>.
        USER_CONFIG: The per-user ~/.<engine> directory.
        MODEL_RUNNER: AI model runner caches and models.
        SCAN_TOOL: Vulnerability scanner configuration and cache.
        CLI_PLUGINS: Engine CLI plugin directory.
        GENERIC_CACHE: XDG cache and share directories of the engine.
    """

    ENGINE_RESOURCES = "engine resources"
    CORE_RUNTIME = "core runtime data"
    USER_CONFIG = "user config"
    MODEL_RUNNER = "AI model runner"
    SCAN_TOOL = "scan-tool config"
    CLI_PLUGINS = "CLI plugins"
    GENERIC_CACHE = "generic cache"


class ResourceSelector(str, Enum):
    """Engine-managed resources removed through the engine CLI.

    Attributes:
        RUNNING_CONTAINERS: Stop every container so it can be pruned.
        ALL_RESOURCES: Prune all containers, images, volumes and networks.
        BUILD_CACHE: Prune the whole build cache.
    """

    RUNNING_CONTAINERS = "running containers"
    ALL_RESOURCES = "containers, images, volumes, networks"
    BUILD_CACHE = "build cache"


# A purge item is either a filesystem path or an engine resource selector
PurgeItem = Path | ResourceSelector


@dataclass(frozen=True, slots=True)
class SubsystemPurgeTarget:
    """An ordered group of items removed for one subsystem.

    Attributes:
        subsystem: Subsystem the items belong to.
        paths: Items in removal order.
        requires_confirmation: Ask the operator before this target only.
        privileged: Remove filesystem paths with sudo.
    """

    subsystem: Subsystem
    paths: tuple[PurgeItem, ...]
    requires_confirmation: bool = False
    privileged: bool = False

    def __post_init__(self) -> None:
        """Validate target data after initialization."""
        if not self.paths:
            msg = f"Purge target {self.subsystem.value} has no items"
            raise ValueError(msg)
        for item in self.paths:
            if isinstance(item, Path) and not item.is_absolute():
                msg = f"Purge path must be absolute: {item}"
                raise ValueError(msg)


class PurgeOutcome(str, Enum):
    """Outcome of purging a single item.

    Attributes:
        REMOVED: The item existed and was removed.
        ABSENT: Nothing to remove; treated as already clean.
        SKIPPED: The operator declined the target.
        FAILED: Removal was attempted and failed.
    """

    REMOVED = "removed"
    ABSENT = "absent"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class PurgeResult:
    """Result of purging a single item.

    Attributes:
        subsystem: Subsystem the item belongs to.
        item: Path string or selector label.
        outcome: What happened.
        error: Error message when outcome is FAILED.
    """

    subsystem: Subsystem
    item: str
    outcome: PurgeOutcome
    error: str | None = None

    @property
    def success(self) -> bool:
        """Check if the item is clean after the purge."""
        return self.outcome in (PurgeOutcome.REMOVED, PurgeOutcome.ABSENT)
