"""Typer application for the ``macinv`` command."""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from macinv import __version__
from macinv.cli.commands import export, settings
from macinv.utils.formatting import err_console

app = typer.Typer(
    name="macinv",
    help="Export installed macOS apps and Homebrew inventory.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)
app.add_typer(export.app, name="export")
app.add_typer(settings.app, name="settings")


def _show_version(value: bool) -> None:
    if value:
        typer.echo(f"macinv version {__version__}")
        raise typer.Exit()


def _enable_debug_logging() -> None:
    """Send DEBUG records from every macinv logger to stderr via Rich."""
    handler = RichHandler(console=err_console, show_path=False, log_time_format="[%X]")
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger = logging.getLogger("macinv")
    package_logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(handler)


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=_show_version,
            is_eager=True,
            help="Print the version and exit.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log every command and file operation to stderr."),
    ] = False,
) -> None:
    """Export installed macOS apps and Homebrew inventory.

    Writes a text report of .app bundles, application folders, Homebrew
    casks and formulae, plus the full Homebrew metadata as JSON.
    """
    if verbose:
        _enable_debug_logging()


if __name__ == "__main__":
    app()
