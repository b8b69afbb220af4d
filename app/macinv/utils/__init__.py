"""Utility modules for macinv.

This module exports commonly used utility functions.
"""

from macinv.utils.formatting import (
    console,
    create_counts_table,
    err_console,
    format_duration,
    human_size,
    print_error,
    print_hint,
    print_info,
    print_success,
    print_warning,
)
from macinv.utils.shell import CommandResult, command_exists, run_command, split_lines

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "create_counts_table",
    "err_console",
    "format_duration",
    "human_size",
    "print_error",
    "print_hint",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
    "split_lines",
]
