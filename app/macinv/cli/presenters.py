"""Renderers for the export summary.

Each output format maps to one pure function over the finalized
ExportResult. The format is chosen before the export starts; the
renderers never touch the result.
"""

import json
from collections.abc import Callable
from enum import Enum

import yaml
from rich.console import Console, Group, RenderableType
from rich.markup import escape
from rich.text import Text

from macinv.core.theme import get_theme
from macinv.models.export import ExportResult
from macinv.utils.formatting import create_counts_table, format_duration, human_size


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"
    YAML = "yaml"
    QUIET = "quiet"


def render_table(result: ExportResult) -> RenderableType:
    """Human-readable summary: duration, output files, counts and warnings."""
    parts: list[RenderableType] = [
        f"[success]Apps export completed in {format_duration(result.duration_seconds)}[/]",
        f"Text report: [path]{escape(result.report_path)}[/] "
        f"[muted]({human_size(result.report_size_bytes)})[/]",
    ]
    if result.brew_json_path is not None:
        parts.append(
            f"Brew JSON:   [path]{escape(result.brew_json_path)}[/] "
            f"[muted]({human_size(result.brew_json_size_bytes)})[/]"
        )
    else:
        parts.append("Brew JSON:   [muted]skipped (compact mode)[/]")

    table = create_counts_table()
    stats = result.stats
    table.add_row("App bundles (mdfind)", str(stats.app_bundle_count))
    table.add_row("/Applications", str(stats.applications_dir_count))
    table.add_row("~/Applications", str(stats.user_applications_count))
    table.add_row("Brew casks", str(stats.brew_cask_count))
    table.add_row("Brew formulae", str(stats.brew_formula_count))
    parts.extend(["", table])

    if result.warnings:
        parts.extend(["", "[warning]Warnings[/]"])
        parts.extend(Text(f"  - {warning}") for warning in result.warnings)

    return Group(*parts)


def render_json(result: ExportResult) -> str:
    """Machine-readable JSON document."""
    return json.dumps(result.to_dict(), indent=2)


def render_yaml(result: ExportResult) -> str:
    """Machine-readable YAML document with the same fields as the JSON form."""
    return yaml.safe_dump(result.to_dict(), sort_keys=False, allow_unicode=True)


def render_quiet(result: ExportResult) -> str:
    """Two lines for scripts: report path, then metadata path (empty if skipped)."""
    return f"{result.report_path}\n{result.brew_json_path or ''}"


RENDERERS: dict[OutputFormat, Callable[[ExportResult], RenderableType]] = {
    OutputFormat.TABLE: render_table,
    OutputFormat.JSON: render_json,
    OutputFormat.YAML: render_yaml,
    OutputFormat.QUIET: render_quiet,
}


def present(result: ExportResult, output_format: OutputFormat, console: Console) -> None:
    """Print the result in the requested format.

    The table uses the macinv theme styles, which are pushed onto the
    console for the duration of the call. Structured formats are written
    without markup or highlighting so they stay parseable.
    """
    rendered = RENDERERS[output_format](result)
    if output_format == OutputFormat.TABLE:
        with console.use_theme(get_theme()):
            console.print(rendered)
    else:
        console.print(rendered, markup=False, highlight=False, emoji=False, soft_wrap=True)
