"""Note operations for kno: appending and opening."""

from __future__ import annotations

import logging
from pathlib import Path

from kno.core.errors import IOFailure
from kno.core.store import NoteStore
from kno.models import ResolvedNote
from kno.utils.editor import open_in_editor
from kno.utils.markdown import create_note_header

logger = logging.getLogger(__name__)


def append_line(path: Path, text: str, store: NoteStore) -> None:
    """Append a line of text to a note without opening the editor.

    Creates the note if missing. If the file is non-empty and does not end
    with a newline, one is added before the text. Existing content is never
    truncated.

    Raises:
        IOFailure: If the note cannot be read or written.
    """
    path = Path(path)
    text = text.rstrip("\r\n")
    store.ensure_file(path)

    try:
        with path.open("rb") as f:
            f.seek(0, 2)
            needs_newline = False
            if f.tell() > 0:
                f.seek(-1, 2)
                needs_newline = f.read(1) != b"\n"

        with path.open("a", encoding="utf-8") as f:
            if needs_newline:
                f.write("\n")
            f.write(f"{text}\n")
    except OSError as e:
        raise IOFailure(f"Failed to append to {path}", e) from e

    logger.debug("Appended %d characters to %s", len(text), path)


def prepare_note(note: ResolvedNote, store: NoteStore) -> bool:
    """Write the title header into a note that is missing or blank.

    Returns:
        True if the header was written.
    """
    if not store.is_empty(note.path):
        return False
    store.ensure_dirs(note.path.parent)
    store.write_text(note.path, create_note_header(note.title))
    logger.debug("Wrote header to %s", note.path)
    return True


def open_note(note: ResolvedNote, store: NoteStore, editor: str | None = None) -> int:
    """Open a resolved note in the editor, creating it with a header if needed.

    Blocks until the editor exits.

    Returns:
        The editor's exit status.
    """
    prepare_note(note, store)
    return open_in_editor(note.path, editor=editor)
