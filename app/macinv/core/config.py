"""Export settings.

Defaults for the export command live in ~/.config/macinv/settings.toml.
A missing file means built-in defaults; every key is optional.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from macinv.core.paths import DEFAULT_BREW_JSON_NAME, DEFAULT_REPORT_TEMPLATE, get_settings_path

logger = logging.getLogger(__name__)

OutputFormatName = Literal["table", "json", "yaml", "quiet"]

DEFAULT_TIMEOUT_SECONDS = 900


class ExportSettings(BaseModel):
    """User-configurable defaults for ``macinv export``.

    Attributes:
        report_name_template: strftime pattern for the default report file name.
        brew_json_name: Default file name for the Homebrew metadata JSON.
        output_dir: Directory for default-named outputs (None = current directory).
        compact: Run in compact mode unless overridden on the command line.
        output_format: Default summary format.
        command_timeout_seconds: Upper bound for any single external command.
        system_applications_dir: System-wide applications directory (must exist).
        user_applications_dir: Per-user applications directory (may be absent).
    """

    model_config = ConfigDict(extra="forbid")

    report_name_template: Annotated[
        str,
        Field(min_length=1, description="strftime pattern for the report name"),
    ] = DEFAULT_REPORT_TEMPLATE
    brew_json_name: Annotated[
        str,
        Field(min_length=1, description="File name for brew info JSON"),
    ] = DEFAULT_BREW_JSON_NAME
    output_dir: Path | None = None
    compact: bool = False
    output_format: OutputFormatName = "table"
    command_timeout_seconds: Annotated[
        int,
        Field(ge=10, le=7200, description="Timeout in seconds (10-7200)"),
    ] = DEFAULT_TIMEOUT_SECONDS
    system_applications_dir: Path = Path("/Applications")
    user_applications_dir: Path = Field(default_factory=lambda: Path.home() / "Applications")

    @field_validator("output_dir", "system_applications_dir", "user_applications_dir", mode="after")
    @classmethod
    def expand_user(cls, v: Path | None) -> Path | None:
        """Expand a leading ``~`` in configured directories."""
        return v.expanduser() if v is not None else None


class SettingsError(Exception):
    """Raised when the settings file cannot be read or is invalid."""


def load_settings(path: Path | None = None) -> ExportSettings:
    """Load export settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default settings path.

    Returns:
        Validated ExportSettings; defaults when the file does not exist.

    Raises:
        SettingsError: If the file cannot be read, parsed or validated.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        logger.debug("No settings file at %s, using defaults", settings_path)
        return ExportSettings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return ExportSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}") from e


def save_settings(settings: ExportSettings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written to a temporary file first and moved into place
    with os.replace().

    Args:
        settings: The settings to save.
        path: Destination. If None, uses the default settings path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()
    settings_path.parent.mkdir(parents=True, exist_ok=True)

    data = settings_to_dict(settings)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path


def settings_to_dict(settings: ExportSettings) -> dict[str, object]:
    """Convert settings to a TOML-serializable dictionary.

    TOML has no null, so an unset output_dir is omitted.
    """
    return settings.model_dump(mode="json", exclude_none=True)
