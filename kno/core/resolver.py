"""Mapping of addresses onto paths in the notes tree."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from kno.core.address import NOTE_SUFFIX, SEPARATOR, parse_address, split_segments
from kno.core.errors import InvalidAddress
from kno.core.store import NoteStore
from kno.models import (
    AddressIntent,
    DailyIntent,
    NamedDirectoryDailyIntent,
    NamedIntent,
    ResolvedNote,
)
from kno.utils.dates import daily_note_relpath
from kno.utils.markdown import daily_title, titlecase

logger = logging.getLogger(__name__)


def _notes_root(notes_root: Path | None) -> Path:
    if notes_root is None:
        from kno.config import get_config

        notes_root = get_config().notes_root
    return Path(notes_root)


def note_relpath(intent: AddressIntent, today: date) -> Path:
    """Get the path of a note relative to the notes root.

    - Daily: daily/YYYY/YYYY-MM-DD.md
    - Named: <segments>.md
    - NamedDirectoryDaily: <segments>/daily/YYYY/YYYY-MM-DD.md
    """
    if isinstance(intent, DailyIntent):
        return daily_note_relpath(today)
    if isinstance(intent, NamedDirectoryDailyIntent):
        return Path(*intent.segments) / daily_note_relpath(today)
    if isinstance(intent, NamedIntent):
        *parents, stem = intent.segments
        return Path(*parents, stem + NOTE_SUFFIX)
    raise TypeError(f"Unknown address intent: {intent!r}")


def resolve_note(
    address: str | AddressIntent | None = None,
    notes_root: Path | None = None,
    today: date | None = None,
    store: NoteStore | None = None,
) -> ResolvedNote:
    """Resolve an address to an absolute note path.

    Missing parent directories are created; the note file itself is not.

    Args:
        address: Raw address string or an already parsed intent.
        notes_root: Override notes root directory.
        today: Date used for daily notes (defaults to today).
        store: NoteStore to create directories with.

    Returns:
        ResolvedNote with the absolute path and whether the file existed.

    Raises:
        InvalidAddress: If the address is malformed or escapes the notes root.
        IOFailure: If a parent directory cannot be created.
    """
    if address is None or isinstance(address, str):
        intent = parse_address(address)
    else:
        intent = address
    if store is None:
        store = NoteStore(_notes_root(notes_root))
    if today is None:
        today = date.today()

    path = store.notes_root / note_relpath(intent, today)

    if not store.contains(path):
        raise InvalidAddress(
            getattr(intent, "name", ""), "resolves outside the notes root"
        )

    existed = store.exists(path)
    store.ensure_dirs(path.parent)

    if isinstance(intent, NamedIntent):
        title = titlecase(intent.segments[-1])
    else:
        title = daily_title(today)

    logger.debug("Resolved %s to %s (existed=%s)", intent, path, existed)
    return ResolvedNote(path=path, existed=existed, intent=intent, title=title)


def resolve_directory(
    address: str | None = None,
    notes_root: Path | None = None,
) -> Path:
    """Resolve an address to a directory of the notes tree.

    Used for listing: segments map to directories without the .md suffix,
    one trailing separator is ignored, and nothing is created or checked.

    Raises:
        InvalidAddress: If the address is malformed or escapes the notes root.
    """
    root = _notes_root(notes_root)
    address = (address or "").strip()
    if not address:
        return root

    body = address[: -len(SEPARATOR)] if address.endswith(SEPARATOR) else address
    path = root.joinpath(*split_segments(body, address))
    if not NoteStore(root).contains(path):
        raise InvalidAddress(address, "resolves outside the notes root")
    return path
