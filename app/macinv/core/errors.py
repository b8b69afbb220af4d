"""Exceptions raised by the export pipeline.

Every fatal condition is an ExportError carrying a message, an optional
remediation hint and a list of suggested diagnostic commands, so the CLI
can render all of them the same way.
"""


class ExportError(Exception):
    """Base exception for fatal export errors.

    Attributes:
        message: Human-readable description of what went wrong.
        hint: Remediation advice, if any.
        suggestions: Shell commands the user can run to diagnose the problem.
    """

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        suggestions: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.suggestions = suggestions


class UnsupportedPlatformError(ExportError):
    """Raised when the export is started on something other than macOS."""


class MissingDependencyError(ExportError):
    """Raised when a required executable is not found in PATH."""

    def __init__(self, name: str, hint: str) -> None:
        super().__init__(
            f"{name} is required but not found in PATH",
            hint=hint,
            suggestions=(f"which {name}", "echo $PATH"),
        )
        self.name = name


class CommandFailedError(ExportError):
    """Raised when a command producing core inventory data fails."""

    def __init__(self, command: str, detail: str, hint: str | None = None) -> None:
        super().__init__(
            f"{command} failed: {detail}",
            hint=hint or f"Re-run with --verbose or manually execute `{command}` for details.",
        )
        self.command = command
