"""Shared utilities for CLI commands."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from kno.config import get_config
from kno.core.errors import IOFailure, KnoError

# Main console for stdout (user-facing output)
console = Console(highlight=False)

# Stderr console for errors and warnings (doesn't interfere with piped output)
stderr_console = Console(stderr=True, highlight=False)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(verbose: bool) -> None:
    """Send debug logging to stderr when --verbose is given."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )


def fail(message: str, hint: str | None = None) -> None:
    """Print an error to stderr and exit with status 1."""
    stderr_console.print(f"[red]Error:[/red] {message}")
    if hint:
        stderr_console.print(f"[dim]{hint}[/dim]")
    raise SystemExit(1)


@contextmanager
def abort_on_error() -> Iterator[None]:
    """Turn kno errors raised in the block into a message and exit status 1."""
    try:
        yield
    except KnoError as e:
        fail(escape(str(e)))


def ensure_setup() -> None:
    """Ensure the notes root exists (created on first run)."""
    config = get_config()
    if config.notes_root.is_dir():
        return
    try:
        config.notes_root.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise IOFailure(f"Failed to create notes root {config.notes_root}", e) from e


def get_display_path(path: Path) -> Path:
    """Get a path suitable for display (relative to notes_root if possible)."""
    config = get_config()
    try:
        return path.relative_to(config.notes_root)
    except ValueError:
        return path
