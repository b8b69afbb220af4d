"""Application directory collectors.

Lists the entries of /Applications and ~/Applications directly from the
filesystem. /Applications is assumed to exist on every Mac, so a failure
to read it is fatal; a missing ~/Applications simply contributes nothing.
"""

import logging
import os
from pathlib import Path

from macinv.collectors.base import Collector
from macinv.core.errors import CommandFailedError
from macinv.models.export import InventoryCategory

logger = logging.getLogger(__name__)


class ApplicationsDirCollector(Collector):
    """Collector for the names of entries in an applications directory.

    Attributes:
        path: Directory to list.
        required: Whether a missing directory is an error.
        label: Path as shown in the report, e.g. ``~/Applications``.
    """

    def __init__(self, path: Path, *, required: bool, label: str | None = None) -> None:
        self.path = path
        self.required = required
        self.label = label or str(path)

    @property
    def title(self) -> str:
        return f"-- {self.label} ---"

    @property
    def command(self) -> str:
        return f"ls {self.label}"

    def collect(self) -> InventoryCategory:
        """List entry names (no metadata), sorted.

        Raises:
            CommandFailedError: If a required directory cannot be read.
        """
        try:
            with os.scandir(self.path) as entries:
                names = [entry.name for entry in entries]
        except OSError as e:
            if self.required:
                raise CommandFailedError(self.command, str(e)) from e
            logger.debug("Skipping unreadable optional directory %s: %s", self.path, e)
            names = []

        return self._category(names)


def system_applications(path: Path = Path("/Applications")) -> ApplicationsDirCollector:
    """Collector for the system-wide applications directory."""
    return ApplicationsDirCollector(path, required=True, label="/Applications")


def user_applications(path: Path | None = None) -> ApplicationsDirCollector:
    """Collector for the per-user applications directory."""
    return ApplicationsDirCollector(
        path or Path.home() / "Applications",
        required=False,
        label="~/Applications",
    )
