"""Subprocess helpers for the inventory commands.

Commands run one at a time and block. On a timeout or KeyboardInterrupt
``subprocess.run`` kills the child before the exception reaches the caller,
so no half-finished command outlives an aborted export.
"""

import logging
import shutil
import subprocess
from dataclasses import dataclass
from typing import BinaryIO

logger = logging.getLogger(__name__)

# brew doctor and brew info can take minutes on a large install.
DEFAULT_TIMEOUT: float = 900.0


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured outcome of one finished command.

    Attributes:
        stdout: Decoded standard output (empty when redirected to a file).
        stderr: Decoded standard error.
        returncode: Process exit status.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """stdout followed by stderr, as a terminal would show them."""
        if self.stdout and self.stderr and not self.stdout.endswith("\n"):
            return f"{self.stdout}\n{self.stderr}"
        return self.stdout + self.stderr


def run_command(args: list[str], *, timeout: float | None = DEFAULT_TIMEOUT) -> CommandResult:
    """Run ``args`` to completion and capture both streams as text.

    Output is decoded as UTF-8 with undecodable bytes replaced.
    A non-zero exit is reported through the result, never raised.

    Raises:
        subprocess.TimeoutExpired: If the command runs longer than ``timeout``.
        FileNotFoundError: If the executable does not exist.
    """
    logger.debug("Running: %s", " ".join(args))
    completed = subprocess.run(
        args,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
        timeout=timeout,
    )
    logger.debug("%s exited with %d", args[0], completed.returncode)
    return CommandResult(completed.stdout, completed.stderr, completed.returncode)


def run_command_to_file(
    args: list[str],
    destination: BinaryIO,
    *,
    timeout: float | None = DEFAULT_TIMEOUT,
) -> CommandResult:
    """Run ``args`` with stdout redirected into an open binary file.

    Used for output too large to hold in memory. Only stderr is captured,
    so the returned result has an empty stdout.

    Raises:
        subprocess.TimeoutExpired: If the command runs longer than ``timeout``.
        FileNotFoundError: If the executable does not exist.
    """
    logger.debug("Running: %s > %s", " ".join(args), getattr(destination, "name", "<file>"))
    completed = subprocess.run(args, stdout=destination, stderr=subprocess.PIPE, timeout=timeout)
    stderr = completed.stderr.decode("utf-8", errors="replace") if completed.stderr else ""
    return CommandResult("", stderr, completed.returncode)


def command_exists(name: str) -> bool:
    """Whether ``name`` resolves to an executable on PATH."""
    return shutil.which(name) is not None


def split_lines(text: str) -> list[str]:
    """Split command output into trimmed, non-blank lines."""
    return [line.strip() for line in text.strip().split("\n") if line.strip()]
