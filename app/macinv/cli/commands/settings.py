"""Settings commands.

Show the effective export settings or write a default settings file.
"""

import json
from enum import Enum
from typing import Annotated

import typer
from rich.table import Table

from macinv.core.config import (
    ExportSettings,
    SettingsError,
    load_settings,
    save_settings,
)
from macinv.core.paths import get_settings_path
from macinv.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize export settings.",
    no_args_is_help=True,
)


class SettingsFormat(str, Enum):
    """Output format options for settings show."""

    TABLE = "table"
    JSON = "json"


@app.command()
def show(
    output_format: Annotated[
        SettingsFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = SettingsFormat.TABLE,
) -> None:
    """Show effective settings (file values merged over defaults)."""
    path = get_settings_path()
    try:
        settings = load_settings(path)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    data = settings.model_dump(mode="json")

    if output_format == SettingsFormat.JSON:
        console.print_json(json.dumps(data))
        return

    table = Table(
        title="Export Settings",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Key", style="text", no_wrap=True)
    table.add_column("Value", style="info")
    for key, value in data.items():
        table.add_row(key, "-" if value is None else str(value))
    console.print(table)

    source = str(path) if path.exists() else "built-in defaults"
    console.print(f"\n[dim]Source: {source}[/]")


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Overwrite an existing settings file.",
        ),
    ] = False,
) -> None:
    """Write a settings file populated with the defaults."""
    path = get_settings_path()
    if path.exists() and not force:
        print_info(f"Settings file already exists: {path}")
        console.print("[dim]Use --force to overwrite it.[/]")
        raise typer.Exit(code=1)

    try:
        saved = save_settings(ExportSettings(), path)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Wrote settings to {saved}")
