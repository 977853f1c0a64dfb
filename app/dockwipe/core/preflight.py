"""Privilege and group preflight checks.

dockwipe runs as the owning user and asks for sudo per command. It refuses
to run as root, and it needs the engine's access group in the *current
process* credentials, not just in /etc/group: a freshly granted membership
is invisible to an already-running process.

Fixing a missing membership is a two-phase entry:

1. grant the group with ``usermod`` and relaunch the same entry point as a
   child process under ``sg <group>``, marked with RELAUNCH_ENV;
2. the child finds the group in its credentials and proceeds normally.

A marked child that still lacks the group fails instead of relaunching
again, so the fix-up cannot loop.
"""

import getpass
import grp
import logging
import os
import shlex
import sys
from collections.abc import Mapping
from enum import Enum

from dockwipe.utils.shell import CommandResult, run_interactive, run_privileged

logger = logging.getLogger(__name__)

# Set in the environment of a relaunched child process
RELAUNCH_ENV = "DOCKWIPE_RELAUNCHED"


class PreflightStatus(str, Enum):
    """Outcome of the preflight check.

    Attributes:
        READY: Non-root and the access group is active in this process.
        SUPERUSER: Invoked as root; fatal.
        GROUP_NOT_FOUND: The access group does not exist; fatal.
        MISSING_GROUP: The group exists but this process does not carry it.
    """

    READY = "ready"
    SUPERUSER = "superuser"
    GROUP_NOT_FOUND = "group_not_found"
    MISSING_GROUP = "missing_group"


def is_superuser() -> bool:
    """Check if the process runs with an effective uid of 0."""
    return os.geteuid() == 0


def has_active_group(group: str) -> bool:
    """Check if the current process carries the given group.

    Args:
        group: Group name.

    Returns:
        True if the group is the primary or a supplementary group.

    Raises:
        KeyError: If the group does not exist.
    """
    gid = grp.getgrnam(group).gr_gid
    return gid == os.getegid() or gid in os.getgroups()


def check_preflight(group: str) -> PreflightStatus:
    """Run the privilege and group checks.

    Args:
        group: Engine access group name.

    Returns:
        PreflightStatus describing what, if anything, blocks the run.
    """
    if is_superuser():
        return PreflightStatus.SUPERUSER

    try:
        active = has_active_group(group)
    except KeyError:
        return PreflightStatus.GROUP_NOT_FOUND

    return PreflightStatus.READY if active else PreflightStatus.MISSING_GROUP


def is_relaunched(environ: Mapping[str, str] | None = None) -> bool:
    """Check if this process is the relaunched child of a group fix-up."""
    env = os.environ if environ is None else environ
    return env.get(RELAUNCH_ENV) == "1"


def current_user(environ: Mapping[str, str] | None = None) -> str:
    """Get the invoking user name, preferring $USER."""
    env = os.environ if environ is None else environ
    return env.get("USER") or getpass.getuser()


def grant_group_membership(user: str, group: str) -> CommandResult:
    """Add a user to a group with elevated privileges.

    Args:
        user: User to modify.
        group: Group to add.

    Returns:
        CommandResult of ``sudo usermod -aG <group> <user>``.
    """
    logger.info("Adding %s to group %s", user, group)
    return run_privileged(["usermod", "-aG", group, user])


def relaunch_command(argv: list[str] | None = None) -> list[str]:
    """Build the command that re-enters dockwipe with the same arguments.

    Args:
        argv: Original argument vector. Defaults to sys.argv.

    Returns:
        ``python -m dockwipe <args>`` for the current interpreter.
    """
    args = sys.argv if argv is None else argv
    return [sys.executable, "-m", "dockwipe", *args[1:]]


def relaunch_in_group(group: str, argv: list[str] | None = None) -> int:
    """Run dockwipe again inside a fresh group context.

    Args:
        group: Group the child should carry.
        argv: Original argument vector. Defaults to sys.argv.

    Returns:
        Exit code of the relaunched process.
    """
    command = shlex.join(relaunch_command(argv))
    logger.info("Relaunching under group %s: %s", group, command)
    return run_interactive(["sg", group, "-c", command], env={RELAUNCH_ENV: "1"})
