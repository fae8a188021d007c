"""Utility modules for unbrew.

This module exports commonly used utility functions.
"""

from unbrew.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from unbrew.utils.shell import CommandResult, command_exists, run_command, which

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
    "which",
]
