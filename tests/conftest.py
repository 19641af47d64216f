"""Shared pytest fixtures for the new-component test suite.

Provides reusable fixtures for:
- An isolated working directory and home directory
- Resolved ``Options`` for both languages
- A recording formatter standing in for prettier
- A captured Rich console
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from new_component.config import ComponentConfig, Options


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project root used as the current directory.

    ``HOME`` points at a separate empty directory so a developer's own
    ``~/.new-component-config.json`` never leaks into a test.
    """
    project = tmp_path / "project"
    project.mkdir()
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.chdir(project)
    monkeypatch.setenv("HOME", str(home))
    yield project


@pytest.fixture
def home_dir(project_dir: Path) -> Path:
    """The fake home directory set up by ``project_dir``."""
    return project_dir.parent / "home"


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

@pytest.fixture
def js_options(tmp_path: Path) -> Options:
    """JavaScript options writing under ``<tmp>/src/components``."""
    return Options(
        language="js",
        target_dir=tmp_path / "src" / "components",
        stylesheet_enabled=True,
    )


@pytest.fixture
def ts_options(tmp_path: Path) -> Options:
    """TypeScript options without a stylesheet."""
    return Options(
        language="ts",
        target_dir=tmp_path / "src" / "components",
        stylesheet_enabled=False,
    )


@pytest.fixture
def default_config() -> ComponentConfig:
    return ComponentConfig()


# ---------------------------------------------------------------------------
# Formatter / console doubles
# ---------------------------------------------------------------------------

class RecordingFormatter:
    """Formatter double: records every call and tags the output."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Path]] = []

    async def format(self, text: str, path: Path) -> str:
        self.calls.append((text, path))
        return f"// formatted\n{text}"


@pytest.fixture
def recording_formatter() -> RecordingFormatter:
    return RecordingFormatter()


@pytest.fixture
def captured_console(monkeypatch: pytest.MonkeyPatch) -> io.StringIO:
    """Route all Rich output into a buffer and return it.

    The console is wide enough that messages are never wrapped.
    """
    buffer = io.StringIO()
    test_console = Console(file=buffer, width=300, color_system=None, highlight=False)
    monkeypatch.setattr("new_component.utils.console", test_console)
    monkeypatch.setattr("new_component.cli.console", test_console)
    yield buffer
