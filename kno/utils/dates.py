"""Date parsing and daily note naming."""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import date, datetime, time, timedelta
from pathlib import Path

from dateutil import parser as dateutil_parser
from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE, relativedelta, weekday

# Directory holding daily notes, at the root or inside a named directory
DAILY_DIR = "daily"

# Weekday name to dateutil weekday constant
WEEKDAYS: dict[str, weekday] = {
    "monday": MO,
    "tuesday": TU,
    "wednesday": WE,
    "thursday": TH,
    "friday": FR,
    "saturday": SA,
    "sunday": SU,
    "mon": MO,
    "tue": TU,
    "wed": WE,
    "thu": TH,
    "fri": FR,
    "sat": SA,
    "sun": SU,
}

# Named date shortcuts, relative to a reference day
NAMED_DATES: dict[str, Callable[[date], date]] = {
    "today": lambda today: today,
    "yesterday": lambda today: today - timedelta(days=1),
    "tomorrow": lambda today: today + timedelta(days=1),
}


def daily_note_name(dt: date) -> str:
    """Return the file name of the daily note for a date: YYYY-MM-DD.md"""
    return f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}.md"


def daily_note_relpath(dt: date) -> Path:
    """Get the path of a daily note relative to the directory that holds it.

    Daily notes are stored as: daily/YYYY/YYYY-MM-DD.md
    """
    return Path(DAILY_DIR) / f"{dt.year:04d}" / daily_note_name(dt)


def parse_fuzzy_date(text: str, today: date | None = None) -> date | None:
    """Parse a fuzzy date expression into a date object.

    Supports:
    - Named dates: "today", "yesterday", "tomorrow"
    - Weekday names: "friday", "next friday", "last monday"
    - Natural language: "nov 20", "november 20 2025"
    - ISO format: "2025-11-20"

    A bare weekday name means its most recent occurrence, today included.
    Returns None if parsing fails.
    """
    text = (text or "").strip().lower()
    if not text:
        return None

    if today is None:
        today = date.today()

    if text in NAMED_DATES:
        return NAMED_DATES[text](today)

    match = re.match(r"^(next|last)\s+(\w+)$", text)
    if match and match.group(2) in WEEKDAYS:
        wd = WEEKDAYS[match.group(2)]
        if match.group(1) == "next":
            return today + timedelta(days=1) + relativedelta(weekday=wd(+1))
        return today - timedelta(days=1) + relativedelta(weekday=wd(-1))

    if text in WEEKDAYS:
        return today + relativedelta(weekday=WEEKDAYS[text](-1))

    try:
        parsed = dateutil_parser.parse(
            text, default=datetime.combine(today, time()), dayfirst=False
        )
    except (ValueError, OverflowError):
        return None
    return parsed.date()
