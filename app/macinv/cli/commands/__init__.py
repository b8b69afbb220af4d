"""CLI commands for macinv.

This package contains all subcommand implementations.
"""

from macinv.cli.commands import export, settings

__all__ = ["export", "settings"]
