"""Parsing of note addresses typed on the command line.

An address is one of three shapes:

- ``""`` - today's daily note at the root
- ``"sql/joins"`` - a named note, ``sql/joins.md``
- ``"work/standup/"`` - today's daily note inside ``work/standup``
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from kno.core.errors import InvalidAddress
from kno.models import AddressIntent, DailyIntent, NamedDirectoryDailyIntent, NamedIntent

logger = logging.getLogger(__name__)

SEPARATOR = "/"
NOTE_SUFFIX = ".md"

# Segments that would step out of the directory they name
_RELATIVE_SEGMENTS = {".", ".."}


def join_address(words: Iterable[str]) -> str:
    """Join positional words into one address ("sql", "joins" -> "sql/joins")."""
    return SEPARATOR.join(w for w in words if w)


def split_segments(address: str, original: str | None = None) -> tuple[str, ...]:
    """Split an address body into validated segments.

    original is the full address shown in error messages.

    Raises:
        InvalidAddress: On empty, relative ('.', '..') or absolute segments.
    """
    shown = address if original is None else original
    if "\\" in address:
        raise InvalidAddress(shown, "backslashes are not allowed")
    if address.startswith(SEPARATOR):
        raise InvalidAddress(shown, "addresses are relative to the notes root")

    segments = tuple(address.split(SEPARATOR))
    for segment in segments:
        if not segment:
            raise InvalidAddress(shown, "empty path segment")
        if segment in _RELATIVE_SEGMENTS:
            raise InvalidAddress(shown, f"'{segment}' segments are not allowed")
        if "\x00" in segment:
            raise InvalidAddress(shown, "null byte in path segment")
    return segments


def parse_address(address: str | None) -> AddressIntent:
    """Classify an address as a daily, named or directory-daily intent.

    Args:
        address: Raw address string; None or blank means today's daily note.

    Returns:
        DailyIntent, NamedIntent or NamedDirectoryDailyIntent.

    Raises:
        InvalidAddress: If any segment is malformed or could climb out of
            the notes root.
    """
    address = (address or "").strip()

    if not address:
        intent: AddressIntent = DailyIntent()
    elif address.endswith(SEPARATOR):
        intent = NamedDirectoryDailyIntent(split_segments(address[: -len(SEPARATOR)], address))
    else:
        segments = split_segments(address)
        last = segments[-1]
        if last == NOTE_SUFFIX:
            raise InvalidAddress(address, "empty note name")
        # "sql/joins.md" names the same note as "sql/joins"
        if last.endswith(NOTE_SUFFIX):
            segments = segments[:-1] + (last[: -len(NOTE_SUFFIX)],)
        intent = NamedIntent(segments)

    logger.debug("Parsed address %r as %s", address, type(intent).__name__)
    return intent
