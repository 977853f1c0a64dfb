"""Data purge engine.

Removes purge targets in order. Every item is best effort: an absent path
is already clean, and a failure is recorded and logged without stopping the
items that follow.
"""

import logging
import os
import shutil
import subprocess
from pathlib import Path

from dockwipe.core.confirm import ConfirmFn, confirm
from dockwipe.engine.base import EngineClient
from dockwipe.models.purge import (
    PurgeItem,
    PurgeOutcome,
    PurgeResult,
    ResourceSelector,
    SubsystemPurgeTarget,
)
from dockwipe.utils.shell import sudo_remove

logger = logging.getLogger(__name__)


class PurgeEngine:
    """Executes purge targets against the engine and the filesystem.

    Args:
        client: Engine client used for resource selectors.
        confirm_fn: Confirmation gate for targets that require it.
    """

    def __init__(self, client: EngineClient, confirm_fn: ConfirmFn = confirm) -> None:
        self._client = client
        self._confirm = confirm_fn

    def purge_all(self, targets: list[SubsystemPurgeTarget]) -> list[PurgeResult]:
        """Purge every target in order.

        Args:
            targets: Targets in removal order.

        Returns:
            One PurgeResult per item.
        """
        results: list[PurgeResult] = []
        for target in targets:
            results.extend(self.purge_target(target))
        return results

    def purge_target(self, target: SubsystemPurgeTarget) -> list[PurgeResult]:
        """Purge a single target.

        Args:
            target: Target to purge.

        Returns:
            One PurgeResult per item; all SKIPPED if the operator declined.
        """
        if target.requires_confirmation and not self._confirm(
            f"Remove {target.subsystem.value} data?"
        ):
            logger.info("Skipping %s (declined)", target.subsystem.value)
            return [
                PurgeResult(target.subsystem, _label(item), PurgeOutcome.SKIPPED)
                for item in target.paths
            ]

        results: list[PurgeResult] = []
        for item in target.paths:
            if isinstance(item, ResourceSelector):
                outcome, error = self._purge_resource(item)
            else:
                outcome, error = self._remove_path(item, target.privileged)

            if outcome == PurgeOutcome.FAILED:
                logger.warning("Failed to purge %s: %s", _label(item), error)
            else:
                logger.info("%s: %s", _label(item), outcome.value)
            results.append(PurgeResult(target.subsystem, _label(item), outcome, error))

        return results

    def _purge_resource(self, selector: ResourceSelector) -> tuple[PurgeOutcome, str | None]:
        """Dispatch an engine resource selector to the client.

        Args:
            selector: Resources to remove.

        Returns:
            Tuple of (outcome, error message).
        """
        actions = {
            ResourceSelector.RUNNING_CONTAINERS: self._client.stop_all_containers,
            ResourceSelector.ALL_RESOURCES: self._client.prune_all,
            ResourceSelector.BUILD_CACHE: self._client.prune_build_cache,
        }
        if actions[selector]():
            return PurgeOutcome.REMOVED, None
        return PurgeOutcome.FAILED, f"{self._client.name} could not remove {selector.value}"

    def _remove_path(self, path: Path, privileged: bool) -> tuple[PurgeOutcome, str | None]:
        """Remove a filesystem path recursively and forcibly.

        Dispatches on location and type:
        - privileged paths: sudo rm -rf
        - directories: shutil.rmtree
        - files and symlinks: Path.unlink

        Args:
            path: Absolute path to remove.
            privileged: Use sudo for the removal.

        Returns:
            Tuple of (outcome, error message).
        """
        if not os.path.lexists(path):
            return PurgeOutcome.ABSENT, None

        if privileged:
            try:
                result = sudo_remove(str(path))
            except (OSError, subprocess.SubprocessError) as e:
                return PurgeOutcome.FAILED, str(e)
            if not result.success:
                return PurgeOutcome.FAILED, result.stderr.strip() or "sudo rm failed"
            return PurgeOutcome.REMOVED, None

        try:
            # Directories (but not symlinks to directories)
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink()
        except FileNotFoundError:
            return PurgeOutcome.ABSENT, None
        except OSError as e:
            return PurgeOutcome.FAILED, str(e)

        return PurgeOutcome.REMOVED, None


def _label(item: PurgeItem) -> str:
    """Display label for a purge item."""
    return item.value if isinstance(item, ResourceSelector) else str(item)
