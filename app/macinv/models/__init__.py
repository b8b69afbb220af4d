"""Data models for macinv.

This module exports the records passed into and out of the export pipeline.
"""

from macinv.models.export import ExportRequest, ExportResult, ExportStats, InventoryCategory

__all__ = [
    "ExportRequest",
    "ExportResult",
    "ExportStats",
    "InventoryCategory",
]
