"""Unit tests for date parsing and inclusive window filtering."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone

import pytest

from analysis.aggregations import filter_by_window
from analysis.dates import parse_calendar_date, parse_timestamp
from analysis.dto import TimeWindow

pytestmark = pytest.mark.unit

WINDOW = TimeWindow(tag="week", start=date(2024, 6, 9), end=date(2024, 6, 15))


@dataclass(frozen=True)
class DatedRow:
    """Attribute-style dated record."""

    id: int
    date: str | None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2024-06-10", date(2024, 6, 10)),
        ("2024-06-10T23:15:00", date(2024, 6, 10)),
        ("2024-06-10T08:00:00+00:00", date(2024, 6, 10)),
        (" 2024-06-10 ", date(2024, 6, 10)),
        (date(2024, 6, 10), date(2024, 6, 10)),
        (datetime(2024, 6, 10, 5, tzinfo=timezone.utc), date(2024, 6, 10)),
        ("", None),
        ("not-a-date", None),
        ("2024-02-30", None),
        (None, None),
        (20240610, None),
    ],
)
def test_parse_calendar_date(raw: object, expected: date | None) -> None:
    """Dates, timestamps and ISO strings parse; anything else yields None."""

    assert parse_calendar_date(raw) == expected


def test_parse_timestamp_rejects_garbage() -> None:
    """Unparseable timestamps become None instead of raising."""

    assert parse_timestamp("08:30") is None
    assert parse_timestamp(None) is None
    assert parse_timestamp("2024-06-10T08:30:00") == datetime(2024, 6, 10, 8, 30)


def test_filter_is_inclusive_at_both_ends() -> None:
    """Records on the first and last window day are kept."""

    rows = [
        {"id": 1, "date": "2024-06-08"},
        {"id": 2, "date": "2024-06-09"},
        {"id": 3, "date": "2024-06-15T23:59:59"},
        {"id": 4, "date": "2024-06-16"},
    ]
    assert [row["id"] for row in filter_by_window(rows, WINDOW)] == [2, 3]


def test_filter_drops_missing_and_unparseable_dates_silently() -> None:
    """Missing or malformed dates are excluded, never raised."""

    rows = [
        {"id": 1},
        {"id": 2, "date": None},
        {"id": 3, "date": "garbage"},
        {"id": 4, "date": "2024-06-10"},
    ]
    assert [row["id"] for row in filter_by_window(rows, WINDOW)] == [4]


def test_filter_preserves_input_order_and_accepts_objects() -> None:
    """Output is an order-preserving subsequence of the input."""

    rows = [
        DatedRow(id=5, date="2024-06-14"),
        DatedRow(id=1, date="2024-06-01"),
        DatedRow(id=3, date="2024-06-10"),
        DatedRow(id=4, date=None),
        DatedRow(id=2, date="2024-06-12"),
    ]
    filtered = filter_by_window(rows, WINDOW)
    assert [row.id for row in filtered] == [5, 3, 2]

    positions = [rows.index(row) for row in filtered]
    assert positions == sorted(positions)
    for row in filtered:
        parsed = parse_calendar_date(row.date)
        assert parsed is not None and WINDOW.start <= parsed <= WINDOW.end


def test_filter_uses_custom_date_getter() -> None:
    """A date getter lets any record type participate."""

    rows = [("a", "2024-06-10"), ("b", "2024-07-01")]
    filtered = filter_by_window(rows, WINDOW, date_getter=lambda row: row[1])
    assert filtered == (("a", "2024-06-10"),)


def test_filter_of_empty_input_is_empty() -> None:
    """No records in, no records out."""

    assert filter_by_window([], WINDOW) == ()
