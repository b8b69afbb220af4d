"""Filesystem locations used by macinv.

User configuration lives in ``$XDG_CONFIG_HOME/macinv`` (``~/.config/macinv``
when the variable is unset). Output paths given on the command line are
resolved here as well.
"""

import os
from datetime import datetime
from pathlib import Path

APP_NAME = "macinv"

DEFAULT_REPORT_TEMPLATE = "mac_installed_software_%Y-%m-%d_%H-%M-%S.txt"
DEFAULT_BREW_JSON_NAME = "brew_installed.json"


def get_config_dir() -> Path:
    """Directory holding settings.toml and theme.toml."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / APP_NAME


def get_settings_path() -> Path:
    return get_config_dir() / "settings.toml"


def get_theme_path() -> Path:
    return get_config_dir() / "theme.toml"


def expand_path(value: str | Path) -> Path:
    """Expand ``~`` and environment variables, then make the path absolute."""
    expanded = os.path.expandvars(os.path.expanduser(str(value)))
    return Path(expanded).absolute()


def default_report_name(
    template: str = DEFAULT_REPORT_TEMPLATE, now: datetime | None = None
) -> str:
    """Render the timestamped report file name.

    Args:
        template: strftime pattern for the file name.
        now: Timestamp to render. Defaults to the current local time.

    Returns:
        File name such as mac_installed_software_2025-01-31_09-15-00.txt.
    """
    return (now or datetime.now()).strftime(template)


def ensure_parent_dir(path: Path) -> Path:
    """Create the parent directory of ``path`` if it doesn't exist.

    Raises:
        OSError: If the directory cannot be created.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    return path
