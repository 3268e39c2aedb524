"""Filesystem access to the notes tree."""

from __future__ import annotations

import logging
from pathlib import Path

from kno.core.errors import IOFailure, NotFound
from kno.models import NodeKind

logger = logging.getLogger(__name__)


class NoteStore:
    """Thin facade over the notes root directory.

    Holds nothing but the root location: every call goes back to the
    filesystem, which git and editors may change between invocations.
    """

    def __init__(self, notes_root: Path) -> None:
        self.notes_root = Path(notes_root)

    def __repr__(self) -> str:
        return f"NoteStore({str(self.notes_root)!r})"

    def contains(self, path: Path) -> bool:
        """Check that a path lies inside the notes root (root included)."""
        root = self.notes_root.resolve()
        try:
            Path(path).resolve().relative_to(root)
        except ValueError:
            return False
        return True

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def is_empty(self, path: Path) -> bool:
        """True if the file is missing or holds only whitespace.

        Checked on raw bytes, so notes in other encodings count as content.
        """
        path = Path(path)
        if not path.exists():
            return True
        try:
            return not path.read_bytes().strip()
        except OSError as e:
            raise IOFailure(f"Failed to read {path}", e) from e

    def ensure_dirs(self, path: Path) -> None:
        """Create a directory and any missing parents."""
        path = Path(path)
        if path.is_dir():
            return
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise IOFailure(f"Failed to create directory {path}", e) from e
        logger.debug("Created directory %s", path)

    def ensure_file(self, path: Path) -> bool:
        """Create an empty file if it does not exist.

        Returns:
            True if the file was created by this call.
        """
        path = Path(path)
        if path.exists():
            return False
        self.ensure_dirs(path.parent)
        try:
            path.touch(exist_ok=True)
        except OSError as e:
            raise IOFailure(f"Failed to create {path}", e) from e
        logger.debug("Created note %s", path)
        return True

    def write_text(self, path: Path, content: str) -> None:
        try:
            Path(path).write_text(content, encoding="utf-8")
        except OSError as e:
            raise IOFailure(f"Failed to write {path}", e) from e

    def list_children(self, dir_path: Path) -> list[tuple[str, NodeKind]]:
        """List the entries of a directory under the notes root.

        Entries are sorted by name, directories and files intermixed.
        Hidden entries (.git, .kno, ...) are skipped.

        Raises:
            NotFound: If dir_path is not a directory inside the notes root.
            IOFailure: If the directory cannot be read.
        """
        dir_path = Path(dir_path)
        if not dir_path.is_dir() or not self.contains(dir_path):
            raise NotFound(dir_path)

        try:
            entries = list(dir_path.iterdir())
        except OSError as e:
            raise IOFailure(f"Failed to list {dir_path}", e) from e

        children = []
        for entry in entries:
            if entry.name.startswith("."):
                continue
            kind = NodeKind.DIRECTORY if entry.is_dir() else NodeKind.FILE
            children.append((entry.name, kind))

        children.sort(key=lambda item: item[0])
        return children
