"""Time-window helpers for the day/week/month analytics selector.

The analytics surface always looks back from "today": a window starts on a
day derived from the selected tag and ends on today (inclusive).
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Final

from .dto import TimeWindow, WindowTag


WINDOW_TAGS: Final[tuple[WindowTag, ...]] = ("day", "week", "month")


def week_start(target: date) -> date:
    """Return the most recent Sunday on or before `target`."""

    # date.weekday() is Monday=0; shift so Sunday=0.
    days_since_sunday = (target.weekday() + 1) % 7
    return target - timedelta(days=days_since_sunday)


def resolve_window(tag: WindowTag, today: date) -> TimeWindow:
    """Resolve a window tag into a concrete inclusive date window.

    Args:
        tag: One of "day", "week" or "month".
        today: The inclusive window end date.

    Returns:
        TimeWindow whose `end` is `today` and whose `start` is today (day),
        the most recent Sunday (week), or the first of the month (month).
    """

    if tag == "day":
        start = today
    elif tag == "week":
        start = week_start(today)
    elif tag == "month":
        start = today.replace(day=1)
    else:
        raise ValueError(f"Unknown window tag: {tag!r}")
    return TimeWindow(tag=tag, start=start, end=today)


def trailing_days(today: date, *, days: int) -> tuple[date, ...]:
    """Return `days` consecutive dates ending on `today`, oldest first."""

    if days <= 0:
        return ()
    return tuple(today - timedelta(days=offset) for offset in range(days - 1, -1, -1))
