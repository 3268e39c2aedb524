"""Git integration for kno notes."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from kno.core.errors import IOFailure, KnoError, NotFound

if TYPE_CHECKING:
    import git as gitmodule

logger = logging.getLogger(__name__)

GITIGNORE_CONTENT = """\
# kno configuration (machine specific)
.kno/

# Common temporary files
.DS_Store
Thumbs.db
*.swp
*.swo
*~
"""


class GitError(KnoError):
    """Raised when a git repository cannot be set up."""

    pass


def _notes_root(notes_root: Path | None) -> Path:
    if notes_root is None:
        from kno.config import get_config

        notes_root = get_config().notes_root
    return notes_root


def is_git_repo(notes_root: Path | None = None) -> bool:
    """Check if notes_root is a git repository (.git directory exists)."""
    return (_notes_root(notes_root) / ".git").is_dir()


def init_repo(notes_root: Path | None = None) -> gitmodule.Repo:
    """Initialize a git repository in notes_root.

    Returns:
        git.Repo instance for the new repository.

    Raises:
        GitError: If initialization fails.
    """
    import git

    notes_root = _notes_root(notes_root)

    try:
        repo = git.Repo.init(notes_root)
    except (git.GitCommandError, OSError) as e:
        raise GitError(f"Failed to initialize git repository: {e}") from e
    logger.debug("Initialized git repository in %s", notes_root)
    return repo


def create_gitignore(notes_root: Path | None = None) -> Path | None:
    """Create a .gitignore that excludes the .kno directory.

    An existing .gitignore is left alone.

    Returns:
        Path to the created file, or None if one already existed.
    """
    gitignore_path = _notes_root(notes_root) / ".gitignore"
    if gitignore_path.exists():
        return None
    try:
        gitignore_path.write_text(GITIGNORE_CONTENT, encoding="utf-8")
    except OSError as e:
        raise IOFailure(f"Failed to write {gitignore_path}", e) from e
    return gitignore_path


def run_git(
    args: Sequence[str],
    notes_root: Path | None = None,
    git_command: str = "git",
) -> int:
    """Run git with the given arguments inside the notes root.

    Arguments are passed through untouched and output goes straight to the
    terminal.

    Returns:
        git's exit status.

    Raises:
        NotFound: If the notes root does not exist.
        IOFailure: If the git executable cannot be started.
    """
    notes_root = _notes_root(notes_root)
    if not notes_root.is_dir():
        raise NotFound(notes_root)

    cmd = [git_command, *args]
    logger.debug("Running %s in %s", cmd, notes_root)
    try:
        result = subprocess.run(cmd, cwd=notes_root)
    except OSError as e:
        raise IOFailure(f"Failed to run {git_command}", e) from e
    return result.returncode


def add_remote(repo: gitmodule.Repo, url: str, name: str = "origin") -> None:
    """Add a remote to the notes repository.

    Raises:
        GitError: If the remote cannot be added (e.g. it already exists).
    """
    import git

    try:
        repo.create_remote(name, url)
    except git.GitCommandError as e:
        raise GitError(f"Failed to add remote {name}: {e}") from e
