"""CLI package for macinv.

This package contains the Typer application and all subcommands.
"""

from macinv.cli.main import app

__all__ = ["app"]
