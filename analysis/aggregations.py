"""Aggregation helpers for the analytics engine.

This module provides the window filter and the three reductions that feed the
charts (trend, category totals, attendance) without introducing Django
dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from datetime import date
from typing import Final, TypeVar

from .dates import parse_calendar_date
from .dto import AttendanceSample, CategoryQuantity, DatedValue, MaterialRecord, TaskRecord, TimeWindow
from .scales import finite
from .windows import trailing_days

T = TypeVar("T")

ATTENDANCE_DAYS: Final[int] = 7


def record_date(record: object) -> object:
    """Return the raw `date` field of a mapping or an object (None when absent)."""

    if isinstance(record, Mapping):
        return record.get("date")
    return getattr(record, "date", None)


def filter_by_window(
    records: Iterable[T],
    window: TimeWindow,
    *,
    date_getter: Callable[[T], object] = record_date,
) -> tuple[T, ...]:
    """Filter dated records by an inclusive window.

    Records whose date is missing or cannot be parsed are dropped silently.

    Args:
        records: Any dated records (mappings or objects with a `date`).
        window: Inclusive date window.
        date_getter: Optional callable extracting the raw date from a record.

    Returns:
        A tuple of records within the window, in input order.
    """

    filtered: list[T] = []
    for record in records:
        record_day = parse_calendar_date(date_getter(record))
        if record_day is None:
            continue
        if not window.contains(record_day):
            continue
        filtered.append(record)
    return tuple(filtered)


def trend_series(tasks: Iterable[TaskRecord]) -> tuple[DatedValue, ...]:
    """Map completed tasks to performance-trend samples.

    Args:
        tasks: Window-filtered task records.

    Returns:
        One DatedValue per completed task in input order; `value` is the task
        rating, or 0 when none is attached.
    """

    series: list[DatedValue] = []
    for task in tasks:
        if not task.completed:
            continue
        task_day = parse_calendar_date(task.date)
        if task_day is None:
            continue
        series.append(DatedValue(date=task_day, value=task.rating if task.rating is not None else 0.0))
    return tuple(series)


def material_usage(tasks: Iterable[TaskRecord]) -> dict[str, float]:
    """Sum used quantity per material id; repeats accumulate, never overwrite."""

    usage: dict[str, float] = {}
    for task in tasks:
        for item in task.materials_used:
            usage[item.material_id] = finite(usage.get(item.material_id, 0.0) + item.quantity)
    return usage


def material_names(materials: Iterable[MaterialRecord]) -> dict[str, str]:
    """Build a material id -> display name lookup from the catalog."""

    return {material.id: material.name for material in materials if material.name}


def category_totals(
    tasks: Iterable[TaskRecord],
    *,
    names: Mapping[str, str] | None = None,
) -> tuple[CategoryQuantity, ...]:
    """Sum material usage per material across tasks.

    Args:
        tasks: Window-filtered task records.
        names: Optional id -> display name lookup. Unresolved ids fall back to
            the raw id string.

    Returns:
        CategoryQuantity entries in first-seen order.
    """

    lookup = names or {}
    return tuple(
        CategoryQuantity(category=lookup.get(material_id, material_id), quantity=quantity)
        for material_id, quantity in material_usage(tasks).items()
    )


def attendance_series(
    employee_count: int,
    *,
    today: date,
    days: int = ATTENDANCE_DAYS,
) -> tuple[AttendanceSample, ...]:
    """Build the trailing attendance series ending today.

    There is no attendance source yet, so every day reports the whole
    headcount as present and nobody absent, independent of the window tag.
    With no employees there is nothing to report and the series is empty.

    Args:
        employee_count: Number of employees known to the host.
        today: Last day of the series (inclusive).
        days: Series length (defaults to 7).

    Returns:
        One AttendanceSample per day, oldest first, or an empty tuple when
        `employee_count` is not positive.
    """

    if employee_count <= 0:
        return ()
    return tuple(AttendanceSample(date=day, present=employee_count, absent=0) for day in trailing_days(today, days=days))
