"""Homebrew collectors.

Covers cask and formula listings, the Caskroom directory tree, the
diagnostic commands (brew config, brew doctor) and the full
``brew info --installed --json=v2`` metadata dump.
"""

import logging
import os
import subprocess
from enum import Enum
from pathlib import Path

from macinv.collectors.base import Collector
from macinv.core.errors import CommandFailedError
from macinv.models.export import InventoryCategory
from macinv.utils.shell import DEFAULT_TIMEOUT, run_command, run_command_to_file, split_lines

logger = logging.getLogger(__name__)

# Caskroom/<cask>/<version>; anything below a version directory is payload.
CASKROOM_MAX_DEPTH = 2

BREW_INFO_ARGS: tuple[str, ...] = ("brew", "info", "--installed", "--json=v2")


class BrewPackageKind(str, Enum):
    """Homebrew package kinds."""

    CASK = "cask"
    FORMULA = "formula"


_KIND_TITLES: dict[BrewPackageKind, str] = {
    BrewPackageKind.CASK: "HOMEBREW CASK APPLICATIONS (GUI)",
    BrewPackageKind.FORMULA: "HOMEBREW FORMULAE (CLI tools)",
}

_KIND_HINTS: dict[BrewPackageKind, str] = {
    BrewPackageKind.CASK: "Confirm Homebrew is installed and casks are set up.",
    BrewPackageKind.FORMULA: "Confirm Homebrew is installed and formulae are set up.",
}


class BrewListCollector(Collector):
    """Collector for ``brew list --<kind> --versions``."""

    def __init__(self, kind: BrewPackageKind, timeout: float | None = DEFAULT_TIMEOUT) -> None:
        self.kind = kind
        self._timeout = timeout

    @property
    def title(self) -> str:
        return _KIND_TITLES[self.kind]

    @property
    def command(self) -> str:
        return f"brew list --{self.kind.value} --versions"

    def collect(self) -> InventoryCategory:
        """List installed packages with versions, one ``name version`` per line.

        Raises:
            CommandFailedError: If brew list exits non-zero.
        """
        result = run_command(self.command.split(), timeout=self._timeout)
        if not result.success:
            detail = f"exit status {result.returncode}: {result.output.strip()}"
            raise CommandFailedError(self.command, detail, hint=_KIND_HINTS[self.kind])

        category = self._category(split_lines(result.output))
        logger.debug("brew reported %d installed %s packages", category.count, self.kind.value)
        return category


def brew_prefix(timeout: float | None = DEFAULT_TIMEOUT) -> Path:
    """Return the Homebrew installation prefix.

    Raises:
        CommandFailedError: If ``brew --prefix`` fails or prints nothing.
    """
    result = run_command(["brew", "--prefix"], timeout=timeout)
    lines = split_lines(result.output) if result.success else []
    if not lines:
        detail = f"exit status {result.returncode}: {result.output.strip() or 'no output'}"
        raise CommandFailedError("brew --prefix", detail)
    return Path(lines[0])


class CaskroomCollector(Collector):
    """Collector for directories under ``<brew prefix>/Caskroom``.

    Collects the Caskroom root, each cask directory and each version
    directory. Deeper subtrees are pruned during the walk.
    """

    def __init__(self, prefix: Path, max_depth: int = CASKROOM_MAX_DEPTH) -> None:
        self.root = prefix / "Caskroom"
        self.max_depth = max_depth

    @property
    def title(self) -> str:
        return "-- Installed paths --"

    @property
    def command(self) -> str:
        return f"find {self.root} -maxdepth {self.max_depth} -type d"

    def collect(self) -> InventoryCategory:
        """Walk the Caskroom and return sorted directory paths.

        Raises:
            CommandFailedError: If the Caskroom exists but cannot be walked.
        """
        if not self.root.exists():
            logger.debug("No Caskroom at %s", self.root)
            return self._category([])

        root = str(self.root)
        dirs: list[str] = []

        def _raise(error: OSError) -> None:
            raise CommandFailedError(self.command, str(error)) from error

        for dirpath, dirnames, _filenames in os.walk(root, onerror=_raise):
            depth = _depth(root, dirpath)
            dirs.append(dirpath)
            if depth >= self.max_depth:
                dirnames.clear()

        return self._category(dirs)


def _depth(root: str, path: str) -> int:
    """Number of path separators in ``path`` below ``root``."""
    return path[len(root) :].count(os.sep)


def run_diagnostic(
    args: list[str], timeout: float | None = DEFAULT_TIMEOUT
) -> tuple[str, str | None]:
    """Run a diagnostic command whose failure is not fatal.

    brew doctor routinely exits non-zero while still printing useful
    output, so a non-zero exit only produces a warning.

    Args:
        args: Command and arguments.
        timeout: Maximum time in seconds to wait for the command.

    Returns:
        Tuple of (combined output, warning or None).
    """
    command = " ".join(args)
    try:
        result = run_command(args, timeout=timeout)
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.info("Diagnostic command could not run: %s", command)
        return "", f"{command} failed: {e}"
    if result.success:
        return result.output, None

    warning = f"{command} failed: exit status {result.returncode}"
    message = result.output.strip()
    if message:
        warning = f"{warning}: {message}"
    logger.info("Diagnostic command reported a problem: %s", command)
    return result.output, warning


def write_brew_metadata(destination: Path, timeout: float | None = DEFAULT_TIMEOUT) -> None:
    """Write ``brew info --installed --json=v2`` straight to a file.

    Args:
        destination: File to create (or truncate) with the JSON document.
        timeout: Maximum time in seconds to wait for brew.

    Raises:
        CommandFailedError: If brew info exits non-zero.
        OSError: If the destination cannot be written.
    """
    with open(destination, "wb") as f:
        result = run_command_to_file(list(BREW_INFO_ARGS), f, timeout=timeout)

    if not result.success:
        command = " ".join(BREW_INFO_ARGS)
        raise CommandFailedError(
            command,
            f"exit status {result.returncode}",
            hint=result.stderr.strip() or None,
        )
    logger.debug("Wrote brew metadata to %s", destination)
