"""Export command implementation.

Writes the inventory report and brew metadata, then prints a summary.
"""

import logging
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.markup import escape

from macinv.cli.presenters import OutputFormat, present
from macinv.core.config import ExportSettings, SettingsError, load_settings
from macinv.core.errors import ExportError
from macinv.core.export import run_export
from macinv.core.paths import default_report_name, expand_path
from macinv.core.preflight import ensure_macos
from macinv.models.export import ExportRequest
from macinv.utils.formatting import console, err_console, print_error, print_hint, print_warning

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Export installed apps, Homebrew casks, formulae, and metadata.",
    invoke_without_command=True,
)


def _fail(error: ExportError) -> NoReturn:
    """Render an ExportError with its hint and suggestions, then exit 1."""
    print_error(error.message)
    if error.hint:
        print_hint(error.hint)
    if error.suggestions:
        err_console.print("[muted]Try:[/]")
        for suggestion in error.suggestions:
            err_console.print(f"  [muted]$ {escape(suggestion)}[/]")
    raise typer.Exit(code=1) from error


def build_request(
    settings: ExportSettings,
    output_file: str | None,
    brew_json_file: str | None,
    compact: bool,
) -> ExportRequest:
    """Resolve CLI input and settings into an ExportRequest.

    Paths given on the command line are expanded (``~`` and environment
    variables) and made absolute. Default names are placed in the
    configured output directory, or the current directory.
    """
    base_dir = settings.output_dir or Path.cwd()
    report = output_file or str(base_dir / default_report_name(settings.report_name_template))
    brew_json = brew_json_file or str(base_dir / settings.brew_json_name)
    return ExportRequest(
        report_path=expand_path(report),
        brew_json_path=expand_path(brew_json),
        compact=compact or settings.compact,
    )


@app.callback(invoke_without_command=True)
def export_inventory(
    ctx: typer.Context,
    output_file: Annotated[
        str | None,
        typer.Option(
            "--output-file",
            "-f",
            help="Path for the text report (default includes timestamp).",
        ),
    ] = None,
    brew_json_file: Annotated[
        str | None,
        typer.Option(
            "--brew-json-file",
            help="Path for the Homebrew JSON metadata output.",
        ),
    ] = None,
    compact: Annotated[
        bool,
        typer.Option(
            "--compact",
            help="Skip brew doctor/config output, Caskroom paths and brew JSON (faster, smaller).",
        ),
    ] = False,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option(
            "--output",
            "-o",
            help="Summary format: table, json, yaml, or quiet.",
            case_sensitive=False,
        ),
    ] = None,
) -> None:
    """Export a full inventory of installed macOS apps and Homebrew packages.

    Outputs a text report plus a JSON file from
    'brew info --installed --json=v2'.

    Examples:
        macinv export                                   # Timestamped report in cwd
        macinv export -f ~/Desktop/apps.txt --brew-json-file ~/Desktop/brew.json
        macinv export --output json                     # JSON summary for scripting
        macinv export --output quiet                    # Only the two paths, for cron
        macinv export --compact                         # Skip doctor/config and brew JSON
    """
    if ctx.invoked_subcommand is not None:
        return

    try:
        ensure_macos()
    except ExportError as e:
        _fail(e)

    try:
        settings = load_settings()
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    fmt = output_format or OutputFormat(settings.output_format)
    request = build_request(settings, output_file, brew_json_file, compact)

    try:
        result = run_export(request, settings)
    except ExportError as e:
        _fail(e)
    except OSError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    except KeyboardInterrupt as e:
        print_warning("Export cancelled.")
        raise typer.Exit(code=130) from e

    present(result, fmt, console)
