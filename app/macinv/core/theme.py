"""Console color theme.

The bundled data/theme.toml supplies every color; ~/.config/macinv/theme.toml
may override any subset of them. An unreadable or invalid theme never stops
an export: the problem is logged and the defaults are used.
"""

import logging
import tomllib
from functools import cache
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from macinv.core.paths import get_theme_path

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class ThemeColors(BaseModel):
    """Hex colors (#RGB or #RRGGBB) used by the CLI output."""

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    count: str = "#c1ff62"
    path: str = "#0e8ac8"

    @field_validator("*", mode="before")
    @classmethod
    def check_hex(cls, value: object) -> str:
        if not isinstance(value, str):
            raise ValueError("color must be a string")
        color = value.strip()
        digits = color[1:]
        valid = color.startswith("#") and len(digits) in (3, 6) and _HEX_DIGITS.issuperset(digits)
        if not valid:
            raise ValueError(f"invalid hex color {color!r}")
        return color

    def to_rich_theme(self) -> Theme:
        """Map colors to the style names used in console markup."""
        return Theme(
            {
                "text": self.text,
                "muted": self.muted,
                "dim": self.muted,
                "header": self.header,
                "bold_header": f"bold {self.header}",
                "border": self.border,
                "success": self.success,
                "warning": self.warning,
                "error": f"bold {self.error}",
                "info": self.info,
                "count": f"bold {self.count}",
                "path": self.path,
            }
        )


def get_bundled_theme_path() -> Path:
    return Path(str(resources.files("macinv.data").joinpath("theme.toml")))


def read_colors(path: Path) -> dict[str, str]:
    """Return the string values of the ``[colors]`` table of a TOML file.

    A missing file, a parse error or a malformed table yields an empty dict.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return {}
    return {key: value for key, value in colors.items() if isinstance(value, str)}


def load_theme_colors() -> ThemeColors:
    """Merge user overrides over the bundled theme and validate the result."""
    merged = read_colors(get_bundled_theme_path())
    overrides = read_colors(get_theme_path())
    if overrides:
        logger.debug("Applying %d theme override(s) from %s", len(overrides), get_theme_path())
        merged.update(overrides)

    try:
        return ThemeColors.model_validate(merged)
    except ValidationError as e:
        logger.warning("Invalid theme, using defaults: %s", e)
        return ThemeColors()


@cache
def get_theme() -> Theme:
    """Rich theme for the shared consoles, loaded once per process."""
    return load_theme_colors().to_rich_theme()
