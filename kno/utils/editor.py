"""Editor integration utilities."""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
import sys
from pathlib import Path

from kno.core.errors import EditorError

logger = logging.getLogger(__name__)

# Default editor fallback order
DEFAULT_EDITORS = ["nvim", "vim", "micro", "nano"]


def get_editor(configured: str | None = None) -> str:
    """Get the editor command to use.

    Priority:
    1. $EDITOR environment variable
    2. Editor set in the kno config file
    3. $VISUAL environment variable
    4. First available from DEFAULT_EDITORS

    load_config() already lets $EDITOR override the file, so configured
    (Config.editor) carries the first two.
    """
    editor = configured or os.environ.get("EDITOR") or os.environ.get("VISUAL")
    if editor:
        return editor

    for editor in DEFAULT_EDITORS:
        if shutil.which(editor):
            return editor

    if sys.platform == "win32":
        return "notepad"
    return "vi"


def open_in_editor(path: Path, editor: str | None = None) -> int:
    """Open a file in the editor and wait for it to exit.

    The editor command may carry its own arguments ("code --wait").

    Args:
        path: Path to the file to open
        editor: Editor command (uses get_editor() if not specified)

    Returns:
        The editor's exit status.

    Raises:
        EditorError: If the editor cannot be started.
    """
    if not editor:
        editor = get_editor()

    cmd = shlex.split(editor, posix=sys.platform != "win32") + [str(path)]
    logger.debug("Running editor: %s", cmd)

    try:
        result = subprocess.run(cmd)
    except FileNotFoundError:
        raise EditorError(f"Editor not found: {editor}") from None
    except OSError as e:
        raise EditorError(f"Failed to start editor {editor}: {e}") from e
    return result.returncode
