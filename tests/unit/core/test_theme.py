"""Unit tests for theme loading."""

from pathlib import Path
from unittest.mock import patch

import pytest
from macinv.core.theme import ThemeColors, get_bundled_theme_path, load_theme_colors, read_colors
from rich.theme import Theme


class TestThemeColors:
    """Tests for ThemeColors model."""

    def test_accepts_short_and_long_hex(self) -> None:
        colors = ThemeColors(text="#AABBCC", muted="#abc")

        assert colors.text == "#AABBCC"
        assert colors.muted == "#abc"

    @pytest.mark.parametrize("value", ["ffffff", "#ff", "#fffffff", "#gggggg"])
    def test_rejects_invalid_hex(self, value: str) -> None:
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(text=value)

    def test_rejects_unknown_color(self) -> None:
        with pytest.raises(ValueError):
            ThemeColors.model_validate({"sparkle": "#ffffff"})

    def test_rich_theme_styles(self) -> None:
        """Every style used in console markup is defined."""
        theme = ThemeColors().to_rich_theme()

        assert isinstance(theme, Theme)
        for name in ("success", "warning", "error", "info", "path", "count", "muted"):
            assert name in theme.styles
        assert theme.styles["error"].bold


class TestReadColors:
    """Tests for read_colors function."""

    def test_missing_file(self, tmp_path: Path) -> None:
        assert read_colors(tmp_path / "theme.toml") == {}

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "theme.toml"
        path.write_text("[colors\n")

        assert read_colors(path) == {}

    def test_keeps_string_values(self, tmp_path: Path) -> None:
        path = tmp_path / "theme.toml"
        path.write_text('[colors]\nsuccess = "#00ff00"\ncount = 3\n')

        assert read_colors(path) == {"success": "#00ff00"}

    def test_bundled_theme_is_complete(self) -> None:
        """The packaged theme defines every color."""
        colors = read_colors(get_bundled_theme_path())

        assert set(colors) == set(ThemeColors.model_fields)


class TestLoadThemeColors:
    """Tests for load_theme_colors function."""

    def test_user_override(self, tmp_path: Path) -> None:
        """User colors replace only the keys they name."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\nsuccess = "#00ff00"\n')

        with patch("macinv.core.theme.get_theme_path", return_value=user_theme):
            colors = load_theme_colors()

        assert colors.success == "#00ff00"
        assert colors.error == ThemeColors().error

    def test_invalid_override_falls_back(self, tmp_path: Path) -> None:
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\nsuccess = "green"\n')

        with patch("macinv.core.theme.get_theme_path", return_value=user_theme):
            colors = load_theme_colors()

        assert colors == ThemeColors()
