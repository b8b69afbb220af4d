"""Export pipeline.

Runs preflight checks, collects every inventory category in a fixed
order, writes the text report (and, outside compact mode, the brew
metadata JSON) and summarizes the run as an ExportResult.

Commands run one at a time. Any fatal error aborts the run and
propagates to the caller; no partial result is returned.
"""

import logging
import subprocess
import time
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime

from macinv.collectors.applications import system_applications, user_applications
from macinv.collectors.homebrew import (
    BrewListCollector,
    BrewPackageKind,
    CaskroomCollector,
    brew_prefix,
    run_diagnostic,
    write_brew_metadata,
)
from macinv.collectors.spotlight import SpotlightCollector
from macinv.core.config import ExportSettings
from macinv.core.errors import CommandFailedError
from macinv.core.paths import ensure_parent_dir
from macinv.core.preflight import run_preflight
from macinv.core.report import ReportWriter
from macinv.models.export import ExportRequest, ExportResult, ExportStats

logger = logging.getLogger(__name__)

DIAGNOSTICS_TITLE = "BREW ENV & METADATA"
METADATA_TITLE = "FULL BREW PACKAGE METADATA (JSON)"

# Supplementary commands: output goes into the report, failures become warnings.
DIAGNOSTIC_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("brew", "config"),
    ("brew", "doctor"),
)


@contextmanager
def _command_timeouts(command: str) -> Iterator[None]:
    """Turn a command timeout into a CommandFailedError."""
    try:
        yield
    except subprocess.TimeoutExpired as e:
        raise CommandFailedError(command, f"timed out after {e.timeout:g}s") from e


def run_export(request: ExportRequest, settings: ExportSettings | None = None) -> ExportResult:
    """Run a full export.

    Args:
        request: Resolved output paths and compact flag.
        settings: Timeouts and application directories. Defaults if None.

    Returns:
        The finalized ExportResult.

    Raises:
        ExportError: On a missing dependency or a failing core command.
        OSError: If an output directory or file cannot be created or written.
    """
    settings = settings or ExportSettings()
    timeout = float(settings.command_timeout_seconds)

    run_preflight()

    report_path = request.report_path.absolute()
    brew_json_path = None if request.compact else request.brew_json_path.absolute()

    ensure_parent_dir(report_path)
    if brew_json_path is not None:
        ensure_parent_dir(brew_json_path)

    started_at = datetime.now(UTC)
    clock = time.perf_counter()
    warnings: list[str] = []

    logger.info("Starting export to %s (compact=%s)", report_path, request.compact)

    with ReportWriter.create(report_path) as report:
        spotlight = SpotlightCollector(timeout)
        with _command_timeouts(spotlight.command):
            bundles = spotlight.collect()
        report.category(bundles)

        system_apps = system_applications(settings.system_applications_dir).collect()
        report.category(system_apps, subsection=True)

        user_apps = user_applications(settings.user_applications_dir).collect()
        report.category(user_apps, subsection=True)

        cask_lister = BrewListCollector(BrewPackageKind.CASK, timeout)
        with _command_timeouts(cask_lister.command):
            casks = cask_lister.collect()
        report.category(casks)

        if brew_json_path is not None:
            with _command_timeouts("brew --prefix"):
                prefix = brew_prefix(timeout)
            caskroom = CaskroomCollector(prefix).collect()
            report.category(caskroom, subsection=True)

        formula_lister = BrewListCollector(BrewPackageKind.FORMULA, timeout)
        with _command_timeouts(formula_lister.command):
            formulae = formula_lister.collect()
        report.category(formulae)

        if brew_json_path is not None:
            report.section(DIAGNOSTICS_TITLE)
            for args in DIAGNOSTIC_COMMANDS:
                output, warning = run_diagnostic(list(args), timeout)
                report.text(output)
                if warning is not None:
                    warnings.append(warning)

            report.section(METADATA_TITLE)
            with _command_timeouts("brew info --installed --json=v2"):
                write_brew_metadata(brew_json_path, timeout)
            report.line(f"Saved JSON -> {brew_json_path}")

        report.banner(str(report_path), str(brew_json_path) if brew_json_path else None)

    # Sizes are read back only after the writer has flushed and closed.
    duration = time.perf_counter() - clock
    completed_at = datetime.now(UTC)

    stats = ExportStats(
        app_bundle_count=bundles.count,
        applications_dir_count=system_apps.count,
        user_applications_count=user_apps.count,
        brew_cask_count=casks.count,
        brew_formula_count=formulae.count,
    )

    result = ExportResult(
        report_path=str(report_path),
        report_size_bytes=report_path.stat().st_size,
        brew_json_path=str(brew_json_path) if brew_json_path is not None else None,
        brew_json_size_bytes=brew_json_path.stat().st_size if brew_json_path is not None else 0,
        compact=request.compact,
        stats=stats,
        duration_seconds=duration,
        started_at=started_at,
        completed_at=completed_at,
        warnings=tuple(warnings),
    )
    logger.info(
        "Export finished in %.2fs with %d warning(s)", result.duration_seconds, len(warnings)
    )
    return result
