"""Configuration I/O functions for kno."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from kno.core.errors import ConfigError

from .models import (
    DEFAULT_CONFIG_YAML,
    DEFAULT_GIT_COMMAND,
    DEFAULT_LIST_DEPTH,
    Config,
)
from .parsers import (
    _parse_depth,
    _parse_str,
    expand_path,
    get_config_path,
    get_default_notes_root,
)

logger = logging.getLogger(__name__)


def _read_yaml(config_path: Path) -> dict[str, Any]:
    try:
        with config_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"{config_path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping")
    return data


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from YAML file.

    A missing config file means all defaults. The notes root comes from the
    file, else $KNO_NOTES_ROOT, else ~/.notes. $EDITOR takes precedence over
    the editor set in the file.

    Raises:
        ConfigError: If the file is not valid YAML or has invalid values.
    """
    if config_path is None:
        config_path = get_config_path()

    data = _read_yaml(config_path) if config_path.exists() else {}
    logger.debug("Loaded config from %s (%d keys)", config_path, len(data))

    # If notes_root not in config file, respect KNO_NOTES_ROOT via get_default_notes_root()
    if "notes_root" in data:
        notes_root = expand_path(_parse_str("notes_root", data["notes_root"]))
    else:
        notes_root = get_default_notes_root()

    editor = os.environ.get("EDITOR") or None
    if editor is None and data.get("editor") is not None:
        editor = _parse_str("editor", data["editor"])

    list_depth = _parse_depth(data.get("list_depth", DEFAULT_LIST_DEPTH))
    git_command = _parse_str("git_command", data.get("git_command", DEFAULT_GIT_COMMAND))

    return Config(
        notes_root=notes_root,
        editor=editor,
        list_depth=list_depth,
        git_command=git_command,
    )


def init_config(notes_root: Path | None = None) -> Config:
    """Initialize configuration for first-time setup.

    Creates the notes root, the .kno directory and a default config file.
    An existing config file is kept.
    """
    if notes_root is None:
        notes_root = get_default_notes_root()

    kno_dir = notes_root / ".kno"
    config_path = kno_dir / "config.yaml"

    kno_dir.mkdir(parents=True, exist_ok=True)

    if not config_path.exists():
        # Respect the actual notes root (e.g. from KNO_NOTES_ROOT) in the generated file
        default_data = yaml.safe_load(DEFAULT_CONFIG_YAML)
        default_data["notes_root"] = str(notes_root)
        with config_path.open("w", encoding="utf-8") as f:
            f.write("# kno configuration\n\n")
            yaml.safe_dump(default_data, f, default_flow_style=False, sort_keys=False)

    return load_config(config_path)
