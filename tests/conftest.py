"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules, including a
fake macOS host whose commands and directories live under tmp_path.
"""

from collections.abc import Iterator
from contextlib import ExitStack
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, BinaryIO
from unittest.mock import patch

import pytest
from macinv.collectors.spotlight import APP_BUNDLE_QUERY
from macinv.core.config import ExportSettings
from macinv.utils.shell import CommandResult


@pytest.fixture
def mock_mdfind_output() -> str:
    """Sample mdfind output for testing."""
    return """/Applications/Safari.app
/Applications/Foo.app
/System/Applications/Calculator.app
/Applications/Bar.app
/Users/me/Applications/Zed.app"""


@pytest.fixture
def mock_cask_output() -> str:
    """Sample brew list --cask --versions output for testing."""
    return """visual-studio-code 1.90.0
firefox 128.0
iterm2 3.5.2
"""


@pytest.fixture
def mock_formula_output() -> str:
    """Sample brew list --formula --versions output for testing."""
    return """wget 1.21
curl 8.0
git 2.45.0
Python 3.12.4

"""


@pytest.fixture
def mock_empty_output() -> str:
    """Empty output for testing edge cases."""
    return ""


@dataclass
class FakeHost:
    """Scripted stand-in for mdfind, brew and the applications folders.

    Attributes:
        root: Temporary directory holding the fake filesystem.
        settings: Settings pointing at the fake application directories.
        responses: Command result keyed by the exact argument tuple.
        brew_json: Bytes written by ``brew info --installed --json=v2``.
        brew_json_result: Result returned by ``brew info``.
        calls: Every command the pipeline ran, in order.
    """

    root: Path
    settings: ExportSettings
    responses: dict[tuple[str, ...], CommandResult | BaseException]
    brew_json: bytes = b'{"formulae": [], "casks": []}\n'
    brew_json_result: CommandResult = field(
        default_factory=lambda: CommandResult(stdout="", stderr="", returncode=0)
    )
    calls: list[tuple[str, ...]] = field(default_factory=list)

    @property
    def prefix(self) -> Path:
        return self.root / "brew"

    def run_command(self, args: list[str], **kwargs: Any) -> CommandResult:
        key = tuple(args)
        self.calls.append(key)
        if key not in self.responses:
            raise AssertionError(f"unexpected command: {args}")
        response = self.responses[key]
        if isinstance(response, BaseException):
            raise response
        return response

    def run_command_to_file(
        self, args: list[str], destination: BinaryIO, **kwargs: Any
    ) -> CommandResult:
        self.calls.append(tuple(args))
        destination.write(self.brew_json)
        return self.brew_json_result


@pytest.fixture
def fake_host(
    tmp_path: Path,
    mock_mdfind_output: str,
    mock_cask_output: str,
    mock_formula_output: str,
) -> FakeHost:
    """Build a fake host with application folders and a populated Caskroom."""
    system_apps = tmp_path / "Applications"
    for name in ("Safari.app", "Foo.app", "Bar.app", "Utilities"):
        (system_apps / name).mkdir(parents=True)

    user_apps = tmp_path / "home" / "Applications"
    (user_apps / "Zed.app").mkdir(parents=True)

    caskroom = tmp_path / "brew" / "Caskroom"
    (caskroom / "firefox" / "128.0" / "Firefox.app" / "Contents").mkdir(parents=True)
    (caskroom / "iterm2" / "3.5.2").mkdir(parents=True)
    (caskroom / "visual-studio-code" / "1.90.0").mkdir(parents=True)

    settings = ExportSettings(
        system_applications_dir=system_apps,
        user_applications_dir=user_apps,
    )

    responses: dict[tuple[str, ...], CommandResult | BaseException] = {
        ("mdfind", APP_BUNDLE_QUERY): CommandResult(mock_mdfind_output, "", 0),
        ("brew", "list", "--cask", "--versions"): CommandResult(mock_cask_output, "", 0),
        ("brew", "list", "--formula", "--versions"): CommandResult(mock_formula_output, "", 0),
        ("brew", "--prefix"): CommandResult(f"{tmp_path / 'brew'}\n", "", 0),
        ("brew", "config"): CommandResult(
            "HOMEBREW_VERSION: 4.3.5\nORIGIN: https://github.com/Homebrew/brew\n", "", 0
        ),
        ("brew", "doctor"): CommandResult(
            "Please note that these warnings are just used to help the Homebrew maintainers\n",
            "Warning: Some installed formulae are deprecated or disabled.\n",
            1,
        ),
    }

    return FakeHost(root=tmp_path, settings=settings, responses=responses)


@pytest.fixture
def patched_host(fake_host: FakeHost) -> Iterator[FakeHost]:
    """Route every command and PATH lookup of the pipeline to fake_host."""
    with ExitStack() as stack:
        stack.enter_context(patch("macinv.core.preflight.command_exists", return_value=True))
        stack.enter_context(
            patch("macinv.collectors.spotlight.run_command", side_effect=fake_host.run_command)
        )
        stack.enter_context(
            patch("macinv.collectors.homebrew.run_command", side_effect=fake_host.run_command)
        )
        stack.enter_context(
            patch(
                "macinv.collectors.homebrew.run_command_to_file",
                side_effect=fake_host.run_command_to_file,
            )
        )
        yield fake_host
