"""Markdown helpers for new note files."""

from __future__ import annotations

import re
from datetime import date

# Word separators in note file names
_WORD_SEPARATORS = re.compile(r"[-_]")


def titlecase(stem: str) -> str:
    """Turn a file stem into a title.

    Words are split on '-' and '_' and only the first letter of each word is
    upper-cased: "design-decisions" -> "Design Decisions", "ALLCAPS" stays.
    """
    words = _WORD_SEPARATORS.split(stem)
    return " ".join(w[:1].upper() + w[1:] for w in words)


def daily_title(dt: date) -> str:
    """Title of a daily note (ISO date)."""
    return dt.isoformat()


def create_note_header(title: str) -> str:
    """Generate the initial content of a note opened for the first time."""
    return f"# {title}\n\n"
