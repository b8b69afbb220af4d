"""Export request and result models.

This module defines the immutable records passed into and out of the
export pipeline. ExportResult serializes to a fixed JSON/YAML shape and
can be parsed back field-for-field.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any


@dataclass(frozen=True, slots=True)
class ExportRequest:
    """Resolved input for a single export run.

    Attributes:
        report_path: Absolute path of the text report.
        brew_json_path: Absolute path of the brew metadata JSON.
        compact: Skip diagnostics, Caskroom paths and brew metadata JSON.
    """

    report_path: Path
    brew_json_path: Path
    compact: bool = False


@dataclass(frozen=True, slots=True)
class InventoryCategory:
    """Normalized output of one inventory source.

    Attributes:
        title: Section or subsection label in the report.
        command: Human-readable description of the producing command.
        lines: Normalized lines, in the order they are written.
    """

    title: str
    command: str
    lines: tuple[str, ...] = field(default=())

    @property
    def count(self) -> int:
        """Number of lines this category contributes to the report."""
        return len(self.lines)


@dataclass(frozen=True, slots=True)
class ExportStats:
    """Per-category line counts written to the report."""

    app_bundle_count: int = 0
    applications_dir_count: int = 0
    user_applications_count: int = 0
    brew_cask_count: int = 0
    brew_formula_count: int = 0

    def to_dict(self) -> dict[str, int]:
        """Convert to dictionary for serialization."""
        return {
            "app_bundle_count": self.app_bundle_count,
            "applications_dir_count": self.applications_dir_count,
            "user_applications_count": self.user_applications_count,
            "brew_cask_count": self.brew_cask_count,
            "brew_formula_count": self.brew_formula_count,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ExportStats:
        """Create from a dictionary produced by to_dict()."""
        return cls(
            app_bundle_count=int(data.get("app_bundle_count", 0)),
            applications_dir_count=int(data.get("applications_dir_count", 0)),
            user_applications_count=int(data.get("user_applications_count", 0)),
            brew_cask_count=int(data.get("brew_cask_count", 0)),
            brew_formula_count=int(data.get("brew_formula_count", 0)),
        )


@dataclass(frozen=True, slots=True)
class ExportResult:
    """Finalized outcome of an export run.

    Attributes:
        report_path: Absolute path of the written text report.
        report_size_bytes: On-disk size of the report after it was closed.
        brew_json_path: Path of the brew metadata JSON, None in compact mode.
        brew_json_size_bytes: On-disk size of the metadata JSON, 0 in compact mode.
        compact: Whether the run was in compact mode.
        stats: Per-category counts.
        duration_seconds: Wall-clock duration of the run.
        started_at: Timestamp taken before collection began.
        completed_at: Timestamp taken after the report was written.
        warnings: Non-fatal issues, e.g. a failing brew doctor.
    """

    report_path: str
    report_size_bytes: int
    brew_json_path: str | None
    brew_json_size_bytes: int
    compact: bool
    stats: ExportStats
    duration_seconds: float
    started_at: datetime
    completed_at: datetime
    warnings: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON/YAML serialization."""
        return {
            "report_path": self.report_path,
            "report_size_bytes": self.report_size_bytes,
            "brew_json_path": self.brew_json_path,
            "brew_json_size_bytes": self.brew_json_size_bytes,
            "compact": self.compact,
            "stats": self.stats.to_dict(),
            "duration_seconds": self.duration_seconds,
            "started_at": self.started_at.isoformat(),
            "completed_at": self.completed_at.isoformat(),
            "warnings": list(self.warnings),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ExportResult:
        """Create an ExportResult from a dictionary produced by to_dict().

        Raises:
            KeyError: If a required field is missing.
            ValueError: If a timestamp cannot be parsed.
        """
        return cls(
            report_path=data["report_path"],
            report_size_bytes=int(data["report_size_bytes"]),
            brew_json_path=data.get("brew_json_path"),
            brew_json_size_bytes=int(data.get("brew_json_size_bytes", 0)),
            compact=bool(data.get("compact", False)),
            stats=ExportStats.from_dict(data.get("stats", {})),
            duration_seconds=float(data["duration_seconds"]),
            started_at=_parse_timestamp(data["started_at"]),
            completed_at=_parse_timestamp(data["completed_at"]),
            warnings=tuple(data.get("warnings") or ()),
        )


def _parse_timestamp(value: str | datetime) -> datetime:
    # YAML loaders may already hand back datetime objects
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)
