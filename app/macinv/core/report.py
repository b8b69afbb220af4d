"""Text report writer.

ReportWriter owns the report file handle for the whole run. Writes are
buffered; close() flushes before closing so the on-disk size can be
measured exactly afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from types import TracebackType
from typing import TextIO

from macinv.models.export import InventoryCategory

logger = logging.getLogger(__name__)

DIVIDER = "=" * 31


class ReportWriter:
    """Sectioned writer for the plain-text inventory report.

    Example:
        >>> with ReportWriter.create(path) as report:
        ...     report.section("HOMEBREW FORMULAE (CLI tools)")
        ...     report.lines(["git 2.45.0", "wget 1.21"])
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    @classmethod
    def create(cls, path: Path) -> ReportWriter:
        """Create (or truncate) the report file and wrap it.

        Raises:
            OSError: If the file cannot be created.
        """
        logger.debug("Creating report %s", path)
        return cls(open(path, "w", encoding="utf-8"))

    def __enter__(self) -> ReportWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def line(self, text: str = "") -> None:
        self._stream.write(f"{text}\n")

    def lines(self, items: Iterable[str]) -> None:
        for item in items:
            self.line(item)

    def section(self, title: str) -> None:
        """Write a section header: blank line, divider, title, divider."""
        self.lines(["", DIVIDER, title, DIVIDER])

    def subsection(self, label: str) -> None:
        """Write a blank line followed by a subsection label."""
        self.lines(["", label])

    def category(self, category: InventoryCategory, *, subsection: bool = False) -> None:
        """Write a category under its title, as a section or a subsection."""
        if subsection:
            self.subsection(category.title)
        else:
            self.section(category.title)
        self.lines(category.lines)
        logger.debug("Wrote %d line(s) from %s", category.count, category.command)

    def text(self, raw: str) -> None:
        """Write raw command output verbatim, newline-terminated."""
        if not raw:
            return
        self._stream.write(raw if raw.endswith("\n") else f"{raw}\n")

    def banner(self, report_path: str, brew_json_path: str | None) -> None:
        """Write the closing banner naming both outputs."""
        self.lines(["", DIVIDER, "Report complete!", f"Text report: {report_path}"])
        if brew_json_path is not None:
            self.line(f"JSON metadata: {brew_json_path}")
        else:
            self.line("JSON metadata: skipped (compact mode)")
        self.line(DIVIDER)

    def close(self) -> None:
        """Flush buffered output and close the file. Safe to call twice."""
        if self._stream.closed:
            return
        try:
            self._stream.flush()
        finally:
            self._stream.close()
