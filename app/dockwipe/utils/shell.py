"""Subprocess helpers.

Every external program dockwipe drives (docker, systemctl, du, usermod,
package managers, rm) goes through one of these functions. Commands are
always argument lists; nothing is passed through a shell.
"""

import logging
import os
import shutil
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured outcome of a finished command.

    Attributes:
        stdout: Decoded standard output.
        stderr: Decoded standard error.
        returncode: Process exit status.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """True when the command exited with status 0."""
        return self.returncode == 0


def run_command(
    args: list[str],
    *,
    check: bool = False,
    timeout: float | None = 60.0,
    cwd: str | None = None,
) -> CommandResult:
    """Run a command to completion, capturing its output.

    Args:
        args: Program and arguments.
        check: Raise CalledProcessError on a non-zero exit.
        timeout: Seconds before the command is killed; None waits forever.
        cwd: Working directory, or None for the current one.

    Returns:
        CommandResult with decoded output.

    Raises:
        subprocess.CalledProcessError: If check is set and the command fails.
        subprocess.TimeoutExpired: If the timeout elapses.
        FileNotFoundError: If the program does not exist.
    """
    logger.debug("Running: %s", " ".join(args))
    completed = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=check,
        timeout=timeout,
        cwd=cwd,
    )
    return CommandResult(completed.stdout, completed.stderr, completed.returncode)


def run_privileged(args: list[str], *, timeout: float | None = None) -> CommandResult:
    """Run a command through sudo, capturing its output.

    sudo may prompt for a password on the controlling terminal, so the
    default is to wait without a timeout.

    Args:
        args: Program and arguments, without the sudo prefix.
        timeout: Seconds before the command is killed; None waits forever.

    Returns:
        CommandResult of ``sudo <args>``.

    Raises:
        FileNotFoundError: If sudo is not installed.
    """
    return run_command(["sudo", *args], timeout=timeout)


def command_exists(name: str) -> bool:
    """Check whether a program is on PATH."""
    return shutil.which(name) is not None


def run_interactive(
    args: list[str],
    *,
    cwd: str | None = None,
    env: dict[str, str] | None = None,
) -> int:
    """Run a command attached to the operator's terminal.

    Output is not captured, so package manager progress and sudo prompts
    reach the operator directly.

    Args:
        args: Program and arguments.
        cwd: Working directory, or None for the current one.
        env: Variables added on top of the current environment.

    Returns:
        Process exit status.

    Raises:
        FileNotFoundError: If the program does not exist.
        OSError: If the program cannot be executed.
    """
    logger.debug("Running interactively: %s", " ".join(args))
    merged = dict(os.environ)
    merged.update(env or {})
    return subprocess.run(args, check=False, cwd=cwd, env=merged).returncode


def sudo_remove(path: str) -> CommandResult:
    """Delete a path recursively with ``sudo rm -rf``.

    Args:
        path: Absolute path to delete.

    Returns:
        CommandResult of the removal.

    Raises:
        FileNotFoundError: If sudo is not installed.
    """
    return run_privileged(["rm", "-rf", path])
