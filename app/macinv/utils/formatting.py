"""Console output helpers.

Summaries go to ``console`` (stdout); errors, warnings and hints go to
``err_console`` (stderr) so structured output on stdout stays parseable.
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from macinv.core.theme import get_theme


def _make_console(*, stderr: bool) -> Console:
    stream = sys.stderr if stderr else sys.stdout
    # Hex theme colors need truecolor; otherwise let Rich decide.
    color_system = "truecolor" if stream.isatty() else None
    return Console(theme=get_theme(), stderr=stderr, color_system=color_system)


console = _make_console(stderr=False)
err_console = _make_console(stderr=True)


def human_size(size_bytes: int) -> str:
    """Return a human-readable size string (decimal units)."""
    if size_bytes < 1000:
        return f"{size_bytes} B"
    size = float(size_bytes)
    for unit in ("kB", "MB", "GB", "TB"):
        size /= 1000
        # Compare the displayed value so 999_999 B becomes 1.0 MB, not 1000.0 kB.
        if round(size, 1) < 1000:
            return f"{size:.1f} {unit}"
    return f"{size / 1000:.1f} PB"


def format_duration(seconds: float) -> str:
    """Format an elapsed duration, e.g. ``1.25s``, ``2m3.5s`` or ``1h0m0s``.

    Each form rounds first and splits afterwards, so a carry never shows
    up as ``60`` seconds or minutes.
    """
    if round(seconds, 2) < 60:
        return f"{seconds:.2f}s"
    minutes, secs = divmod(round(seconds, 1), 60)
    if minutes < 60:
        return f"{int(minutes)}m{secs:.1f}s"
    minutes, secs = divmod(round(seconds), 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours}h{minutes}m{secs}s"


def create_counts_table(title: str = "Counts") -> Table:
    """Create a pre-configured two-column table for inventory counts.

    Args:
        title: Table title.

    Returns:
        Rich Table with Source and Count columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Source", style="text", no_wrap=True)
    table.add_column("Count", style="count", justify="right")
    return table


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_hint(message: str) -> None:
    """Print a remediation hint."""
    err_console.print(f"[info]Hint:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
