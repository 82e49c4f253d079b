"""Calendar-date parsing helpers for dated records.

Records arrive from the host as loosely-typed dicts, so a record's date may be
an ISO date string, an ISO timestamp, a `date`/`datetime`, or missing entirely.
These helpers normalize all of those into a calendar `date` or None.
"""

from __future__ import annotations

from datetime import date, datetime


def parse_calendar_date(value: object) -> date | None:
    """Parse a record date into a calendar date.

    Args:
        value: A `date`, `datetime`, ISO-8601 date/timestamp string, or None.

    Returns:
        The calendar date (timestamps are truncated to their date part), or
        None when the value is missing or cannot be parsed.
    """

    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def parse_timestamp(value: object) -> datetime | None:
    """Parse an ISO-8601 timestamp (clock events, completion times).

    Args:
        value: A `datetime` or ISO-8601 timestamp string.

    Returns:
        Parsed datetime, or None when missing/unparseable.
    """

    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        return None
