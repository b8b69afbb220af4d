"""Spotlight application bundle collector.

Queries mdfind for every item whose content type is an application
bundle, system-wide and per-user.
"""

import logging

from macinv.collectors.base import Collector
from macinv.core.errors import CommandFailedError
from macinv.models.export import InventoryCategory
from macinv.utils.shell import DEFAULT_TIMEOUT, run_command, split_lines

logger = logging.getLogger(__name__)

APP_BUNDLE_QUERY = "kMDItemContentType == 'com.apple.application-bundle'"


class SpotlightCollector(Collector):
    """Collector for .app bundles indexed by Spotlight."""

    def __init__(self, timeout: float | None = DEFAULT_TIMEOUT) -> None:
        self._timeout = timeout

    @property
    def title(self) -> str:
        return "MAC SYSTEM + USER INSTALLED APPLICATIONS (.app bundles)"

    @property
    def command(self) -> str:
        return "mdfind"

    def collect(self) -> InventoryCategory:
        """Run the mdfind query and return sorted bundle paths.

        Raises:
            CommandFailedError: If mdfind exits non-zero.
        """
        result = run_command(["mdfind", APP_BUNDLE_QUERY], timeout=self._timeout)
        if not result.success:
            detail = f"exit status {result.returncode}: {result.output.strip()}"
            raise CommandFailedError(self.command, detail)

        category = self._category(split_lines(result.output))
        logger.debug("Spotlight returned %d app bundles", category.count)
        return category
