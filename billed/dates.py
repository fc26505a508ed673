"""Conversion between stored bill dates and their French display form.

Stored dates are canonical ``YYYY-MM-DD`` strings. The list view shows them
as ``"27 Juin. 24"``; :func:`parse_date` reads that form back so rendered
rows can be compared chronologically.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from enum import Enum

# June and July need four letters to stay distinct.
MONTH_ABBREVIATIONS = (
    "Jan.",
    "Fév.",
    "Mar.",
    "Avr.",
    "Mai.",
    "Juin.",
    "Juil.",
    "Aoû.",
    "Sep.",
    "Oct.",
    "Nov.",
    "Déc.",
)

MONTHS_TO_NUMBER = {abbr: index for index, abbr in enumerate(MONTH_ABBREVIATIONS)}

STATUS_LABELS = {
    "pending": "En attente",
    "accepted": "Accepté",
    "refused": "Refused",
}

_ISO_DATE_RE = re.compile(r"^\s*(\d{4})[-/.](\d{1,2})[-/.](\d{1,2})\s*$")
_DISPLAY_DAY_RE = re.compile(r"^\d{1,2}$")
_DISPLAY_YEAR_RE = re.compile(r"^\d{2}$")
_DISPLAY_DAY_RE = re.compile(r"^\d{1,2}$")
_DISPLAY_YEAR_RE = re.compile(r"^\d{2}$")


def parse_iso(value: str | date) -> date:
    """Read a stored date: ``YYYY-MM-DD`` (``-``, ``/`` or ``.``), an ISO timestamp, or a date object."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    match = _ISO_DATE_RE.match(value or "")
    if match:
        year, month, day = (int(part) for part in match.groups())
        return date(year, month, day)
    try:
        return datetime.fromisoformat(value.strip()).date()
    except (AttributeError, ValueError):
        raise ValueError(f"Invalid date: {value!r}") from None


def format_date(value: str | date) -> str:
    d = parse_iso(value)
    return f"{d.day} {MONTH_ABBREVIATIONS[d.month - 1]} {d.year % 100:02d}"


def parse_date(text: str) -> date:
    """Inverse of :func:`format_date`. Two-digit years are read as 20xx."""
    parts = text.split()
    if len(parts) != 3:
        raise ValueError(f"Invalid display date: {text!r}")
    day, abbr, year = parts
    if not _DISPLAY_DAY_RE.match(day) or not _DISPLAY_YEAR_RE.match(year):
        raise ValueError(f"Invalid display date: {text!r}")
    month = MONTHS_TO_NUMBER.get(abbr)
    if month is None:
        raise ValueError(f"Unknown month abbreviation: {abbr!r}")
    return date(2000 + int(year), month + 1, int(day))


def format_status(status: str) -> str:
    key = status.value if isinstance(status, Enum) else status
    try:
        return STATUS_LABELS[key]
    except KeyError:
        raise ValueError(f"Unknown bill status: {status!r}") from None
