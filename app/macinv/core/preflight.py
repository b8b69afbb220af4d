"""Preflight checks run before any output file is created."""

import logging
import platform

from macinv.core.errors import MissingDependencyError, UnsupportedPlatformError
from macinv.utils.shell import command_exists

logger = logging.getLogger(__name__)

# Executables the export cannot run without, with remediation hints.
REQUIRED_COMMANDS: tuple[tuple[str, str], ...] = (
    ("mdfind", "Spotlight CLI missing. Ensure you're on macOS with Spotlight enabled."),
    ("brew", "Install Homebrew from https://brew.sh/ to capture casks and formulae."),
)


def ensure_macos() -> None:
    """Reject non-macOS hosts.

    Raises:
        UnsupportedPlatformError: If not running on macOS.
    """
    system = platform.system()
    if system != "Darwin":
        raise UnsupportedPlatformError(
            f"macinv export currently supports macOS only (detected {system or 'unknown'})",
            hint="This command wraps Spotlight (mdfind) and Homebrew. "
            "Run from macOS where these tools exist.",
        )


def ensure_command(name: str, hint: str) -> None:
    """Fail fast if an executable is not resolvable on PATH.

    Args:
        name: Executable name.
        hint: Remediation hint shown to the user.

    Raises:
        MissingDependencyError: If the executable cannot be located.
    """
    if not command_exists(name):
        raise MissingDependencyError(name, hint)
    logger.debug("Found required command: %s", name)


def run_preflight() -> None:
    """Verify every required executable is available."""
    for name, hint in REQUIRED_COMMANDS:
        ensure_command(name, hint)
