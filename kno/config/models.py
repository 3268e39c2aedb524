"""Configuration dataclass models for kno."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class Config:
    """Application configuration."""

    notes_root: Path
    editor: str | None = None  # None = $VISUAL or the first editor found on PATH
    list_depth: int = 1  # Default depth for `kno list` (0 = unlimited)
    git_command: str = "git"  # Executable used by `kno git`

    @property
    def kno_dir(self) -> Path:
        """Return path to .kno configuration directory."""
        return self.notes_root / ".kno"

    @property
    def config_path(self) -> Path:
        """Return path to config file."""
        return self.kno_dir / "config.yaml"


# Default configuration values
DEFAULT_NOTES_ROOT = Path.home() / ".notes"
DEFAULT_LIST_DEPTH = 1
DEFAULT_GIT_COMMAND = "git"

DEFAULT_CONFIG_YAML = """\
# Root directory for all notes
notes_root: ~/.notes

# Editor to use ($EDITOR takes precedence when set)
# editor: nvim

# Depth shown by `kno list` (0 = unlimited)
list_depth: 1

# git executable used by `kno git`
git_command: git
"""
