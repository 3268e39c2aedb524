"""Configuration parsing functions for kno."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from kno.core.errors import ConfigError

from .models import DEFAULT_NOTES_ROOT


def expand_path(path: str | Path) -> Path:
    """Expand ~ and environment variables in a path."""
    path_str = str(path)
    # Expand environment variables
    path_str = os.path.expandvars(path_str)
    # Expand ~
    return Path(path_str).expanduser()


def get_default_notes_root() -> Path:
    """Get the default notes root directory."""
    # Check environment variable first
    env_root = os.environ.get("KNO_NOTES_ROOT")
    if env_root:
        return expand_path(env_root)
    return DEFAULT_NOTES_ROOT


def get_config_path(notes_root: Path | None = None) -> Path:
    """Get the path to the config file."""
    if notes_root is None:
        notes_root = get_default_notes_root()
    return notes_root / ".kno" / "config.yaml"


def _parse_depth(value: Any) -> int:
    """Parse list_depth: a non-negative integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"list_depth must be an integer, got {value!r}")
    if value < 0:
        raise ConfigError(f"list_depth must be >= 0, got {value}")
    return value


def _parse_str(key: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key} must be a non-empty string, got {value!r}")
    return value
