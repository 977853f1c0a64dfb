"""Shared helpers for CLI commands.

Configuration loading, the privilege/group preflight and pipeline exit
handling are identical for every destructive command.
"""

import logging

import typer

from dockwipe.core.config import ConfigError, DockwipeConfig, load_config
from dockwipe.core.pipeline import PipelineOutcome, StageResult
from dockwipe.core.preflight import (
    PreflightStatus,
    check_preflight,
    current_user,
    grant_group_membership,
    is_relaunched,
    relaunch_in_group,
)
from dockwipe.utils.formatting import print_error, print_info, print_warning

logger = logging.getLogger(__name__)


def load_config_or_exit() -> DockwipeConfig:
    """Load the configuration, exiting with code 1 if it is invalid."""
    try:
        return load_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def run_preflight(group: str) -> None:
    """Ensure the run may proceed as the current user.

    Returns normally when the process is ready. Otherwise exits: with code 1
    on a fatal condition, or with the relaunched child's exit code after the
    group membership was granted.

    Args:
        group: Engine access group name.

    Raises:
        typer.Exit: Whenever this process must not continue.
    """
    status = check_preflight(group)
    logger.debug("Preflight status: %s", status.value)

    if status == PreflightStatus.READY:
        return

    if status == PreflightStatus.SUPERUSER:
        print_error("Do not run dockwipe as root. Run it as your user; sudo is asked per command.")
        raise typer.Exit(code=1)

    if status == PreflightStatus.GROUP_NOT_FOUND:
        print_error(f"Group '{group}' does not exist. Is the engine installed?")
        raise typer.Exit(code=1)

    if is_relaunched():
        print_error(f"Group '{group}' is still not active after relaunch. Log out and back in.")
        raise typer.Exit(code=1)

    user = current_user()
    print_warning(f"User '{user}' is not in the '{group}' group. Adding it now (requires sudo).")
    try:
        result = grant_group_membership(user, group)
    except OSError as e:
        print_error(f"Could not run usermod: {e}")
        raise typer.Exit(code=1) from e
    if not result.success:
        print_error(f"Failed to add '{user}' to '{group}': {result.stderr.strip()}")
        raise typer.Exit(code=1)

    print_info(f"Relaunching with group '{group}' active...")
    raise typer.Exit(code=relaunch_in_group(group))


def exit_with(outcome: PipelineOutcome) -> None:
    """Exit according to a pipeline outcome.

    Args:
        outcome: Outcome of the run.

    Raises:
        typer.Exit: With code 1 if a stage failed.
    """
    if outcome.result == StageResult.FAILED:
        logger.debug("Run failed at stage %s", outcome.stopped_at)
        raise typer.Exit(code=outcome.exit_code)
