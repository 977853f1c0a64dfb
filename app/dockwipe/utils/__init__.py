"""Console and subprocess helpers shared by every dockwipe module."""

from dockwipe.utils.formatting import (
    console,
    create_table,
    err_console,
    print_error,
    print_info,
    print_section,
    print_step,
    print_success,
    print_warning,
)
from dockwipe.utils.shell import (
    CommandResult,
    command_exists,
    run_command,
    run_interactive,
    run_privileged,
    sudo_remove,
)

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "create_table",
    "err_console",
    "print_error",
    "print_info",
    "print_section",
    "print_step",
    "print_success",
    "print_warning",
    "run_command",
    "run_interactive",
    "run_privileged",
    "sudo_remove",
]
