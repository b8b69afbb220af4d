"""Inventory collectors for macOS applications and Homebrew.

This module exports the collector classes used by the export pipeline.
"""

from macinv.collectors.applications import (
    ApplicationsDirCollector,
    system_applications,
    user_applications,
)
from macinv.collectors.base import Collector, sort_lines
from macinv.collectors.homebrew import (
    BrewListCollector,
    BrewPackageKind,
    CaskroomCollector,
    brew_prefix,
    run_diagnostic,
    write_brew_metadata,
)
from macinv.collectors.spotlight import SpotlightCollector

__all__ = [
    "ApplicationsDirCollector",
    "BrewListCollector",
    "BrewPackageKind",
    "CaskroomCollector",
    "Collector",
    "SpotlightCollector",
    "brew_prefix",
    "run_diagnostic",
    "sort_lines",
    "system_applications",
    "user_applications",
    "write_brew_metadata",
]
