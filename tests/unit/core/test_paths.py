"""Unit tests for path helpers."""

import os
from datetime import datetime
from pathlib import Path
from unittest.mock import patch

import pytest
from macinv.core.paths import (
    default_report_name,
    ensure_parent_dir,
    expand_path,
    get_config_dir,
    get_settings_path,
    get_theme_path,
)


class TestXdgPaths:
    """Tests for the XDG configuration paths."""

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            assert get_config_dir() == tmp_path / "macinv"
            assert get_settings_path() == tmp_path / "macinv" / "settings.toml"
            assert get_theme_path() == tmp_path / "macinv" / "theme.toml"

    def test_falls_back_to_home(self, tmp_path: Path) -> None:
        env = {k: v for k, v in os.environ.items() if k != "XDG_CONFIG_HOME"}
        env["HOME"] = str(tmp_path)
        with patch.dict(os.environ, env, clear=True):
            assert get_config_dir() == tmp_path / ".config" / "macinv"


class TestExpandPath:
    """Tests for expand_path function."""

    def test_expands_home(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {"HOME": str(tmp_path)}):
            assert expand_path("~/Desktop/apps.txt") == tmp_path / "Desktop" / "apps.txt"

    def test_expands_env_vars(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {"MACINV_OUT": str(tmp_path)}):
            assert expand_path("$MACINV_OUT/brew.json") == tmp_path / "brew.json"

    def test_relative_becomes_absolute(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)

        result = expand_path("report.txt")

        assert result.is_absolute()
        assert result == tmp_path / "report.txt"


class TestDefaultReportName:
    """Tests for default_report_name function."""

    def test_timestamped(self) -> None:
        now = datetime(2025, 1, 31, 9, 15, 0)

        assert default_report_name(now=now) == "mac_installed_software_2025-01-31_09-15-00.txt"

    def test_custom_template(self) -> None:
        now = datetime(2025, 1, 31, 9, 15, 0)

        assert default_report_name("apps-%Y%m%d.txt", now) == "apps-20250131.txt"


class TestEnsureParentDir:
    """Tests for ensure_parent_dir function."""

    def test_creates_missing_parents(self, tmp_path: Path) -> None:
        path = tmp_path / "a" / "b" / "report.txt"

        assert ensure_parent_dir(path) == path
        assert path.parent.is_dir()
        assert not path.exists()
