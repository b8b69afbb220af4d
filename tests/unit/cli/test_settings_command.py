"""Unit tests for the settings commands."""

import json
import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest
from macinv.cli.main import app
from macinv.core.config import ExportSettings, load_settings
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture
def config_home(tmp_path: Path) -> Iterator[Path]:
    """Point XDG_CONFIG_HOME at a temporary directory."""
    with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
        yield tmp_path / "macinv"


class TestSettingsInit:
    """Tests for macinv settings init."""

    def test_writes_defaults(self, config_home: Path) -> None:
        result = runner.invoke(app, ["settings", "init"])

        assert result.exit_code == 0, result.output
        assert "Wrote settings" in result.stdout
        assert load_settings(config_home / "settings.toml") == ExportSettings()

    def test_refuses_to_overwrite(self, config_home: Path) -> None:
        config_home.mkdir(parents=True)
        (config_home / "settings.toml").write_text("compact = true\n")

        result = runner.invoke(app, ["settings", "init"])

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert (config_home / "settings.toml").read_text() == "compact = true\n"

    def test_force_overwrites(self, config_home: Path) -> None:
        config_home.mkdir(parents=True)
        (config_home / "settings.toml").write_text("compact = true\n")

        result = runner.invoke(app, ["settings", "init", "--force"])

        assert result.exit_code == 0, result.output
        assert load_settings(config_home / "settings.toml").compact is False


class TestSettingsShow:
    """Tests for macinv settings show."""

    def test_json_reflects_file(self, config_home: Path) -> None:
        config_home.mkdir(parents=True)
        (config_home / "settings.toml").write_text(
            'output_format = "yaml"\ncommand_timeout_seconds = 60\n'
        )

        result = runner.invoke(app, ["settings", "show", "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["output_format"] == "yaml"
        assert data["command_timeout_seconds"] == 60
        assert data["compact"] is False

    def test_table_defaults(self, config_home: Path) -> None:
        result = runner.invoke(app, ["settings", "show"])

        assert result.exit_code == 0, result.output
        assert "command_timeout_seconds" in result.stdout
        assert "built-in defaults" in result.stdout

    def test_invalid_file(self, config_home: Path) -> None:
        config_home.mkdir(parents=True)
        (config_home / "settings.toml").write_text("compact = = true\n")

        result = runner.invoke(app, ["settings", "show"])

        assert result.exit_code == 1
        assert "Invalid TOML syntax" in result.output
