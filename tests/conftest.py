"""Shared fixtures for kno tests."""

from __future__ import annotations

from collections.abc import Callable, Generator
from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner

from kno import config as config_module
from kno.config import Config
from kno.core.store import NoteStore


@pytest.fixture
def temp_notes_root(tmp_path: Path) -> Path:
    """Create a temporary notes root directory."""
    notes_root = tmp_path / "notes"
    notes_root.mkdir(parents=True)
    return notes_root


@pytest.fixture
def store(temp_notes_root: Path) -> NoteStore:
    """NoteStore over the temporary notes root."""
    return NoteStore(temp_notes_root)


@pytest.fixture
def temp_config(temp_notes_root: Path) -> Generator[Config]:
    """Create a temporary configuration for testing.

    Uses 'true' as editor to avoid actually opening files.
    """
    cfg = Config(notes_root=temp_notes_root, editor="true")

    yield cfg

    # Reset global singleton after test to avoid interference
    config_module.reset_config()


@pytest.fixture
def mock_config(temp_config: Config, monkeypatch: pytest.MonkeyPatch) -> Config:
    """Make get_config() return temp_config."""
    config_module.reset_config()
    monkeypatch.setattr(config_module, "_config", temp_config)
    return temp_config


@pytest.fixture
def fixed_today(monkeypatch: pytest.MonkeyPatch) -> date:
    """Fix date.today() to a known value for deterministic tests."""
    fixed = date(2026, 2, 15)  # A Sunday

    class MockDate(date):
        @classmethod
        def today(cls) -> date:
            return fixed

    monkeypatch.setattr("kno.core.resolver.date", MockDate)
    monkeypatch.setattr("kno.utils.dates.date", MockDate)
    return fixed


@pytest.fixture
def create_note(temp_notes_root: Path) -> Callable[[str, str], Path]:
    """Factory fixture to create note files relative to the notes root."""

    def _create_note(relpath: str, content: str = "") -> Path:
        note_path = temp_notes_root / relpath
        note_path.parent.mkdir(parents=True, exist_ok=True)
        note_path.write_text(content, encoding="utf-8")
        return note_path

    return _create_note


# =============================================================================
# CLI Test Fixtures
# =============================================================================


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI runner for testing commands."""
    return CliRunner()
