"""Coerce loosely-typed host payloads into analytics input records.

Collaborators hand over JSON-like dicts straight from the backend. Entries that
are not mappings are skipped, and unusable numbers fall back to defaults, so a
single bad row never aborts a render pass.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any

from .dates import parse_timestamp
from .dto import ClockEvent, EmployeeRecord, MaterialRecord, MaterialUsage, TaskRecord


def _coerce_float(value: object, *, default: float | None) -> float | None:
    """Return `value` as a finite float; NaN, infinities and junk give `default`."""

    if isinstance(value, bool):
        return default
    try:
        if isinstance(value, (int, float)):
            result = float(value)
        elif isinstance(value, str):
            result = float(value.strip())
        else:
            return default
    except (OverflowError, ValueError):
        return default
    return result if math.isfinite(result) else default


def _coerce_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)


def _first(row: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = row.get(key)
        if value not in (None, ""):
            return value
    return None


def _mappings(rows: Iterable[object] | None) -> Iterable[Mapping[str, Any]]:
    for row in rows or ():
        if isinstance(row, Mapping):
            yield row


def parse_material_usage(rows: Iterable[object] | None) -> tuple[MaterialUsage, ...]:
    """Parse a task's `materials_used` list.

    Args:
        rows: Iterable of `{materialId, quantity}` dicts.

    Returns:
        Usage pairs with a material id; missing quantities count as 0.
    """

    usages: list[MaterialUsage] = []
    for row in _mappings(rows):
        material_id = _first(row, "materialId", "material_id")
        if material_id is None:
            continue
        quantity = _coerce_float(row.get("quantity"), default=0.0) or 0.0
        usages.append(MaterialUsage(material_id=str(material_id), quantity=max(quantity, 0.0)))
    return tuple(usages)


def parse_tasks(rows: Iterable[object] | None) -> tuple[TaskRecord, ...]:
    """Parse task dicts into TaskRecord values.

    The record date used for window filtering is `date`, falling back to
    `completed_at` and then `start`. The raw string is kept as-is; parsing
    happens in the window filter so unparseable dates are dropped there.
    """

    tasks: list[TaskRecord] = []
    for row in _mappings(rows):
        raw_date = _first(row, "date", "completed_at", "completedAt", "start")
        tasks.append(
            TaskRecord(
                id=str(row.get("id", "")),
                name=str(row.get("name", "")),
                completed=bool(row.get("completed", False)),
                date=_coerce_str(raw_date),
                completed_at=_coerce_str(_first(row, "completed_at", "completedAt")),
                assigned_to=_coerce_str(_first(row, "assigned_to", "assignedTo")),
                rating=_coerce_float(row.get("rating"), default=None),
                materials_used=parse_material_usage(_first(row, "materials_used", "materialsUsed")),
            )
        )
    return tuple(tasks)


def parse_employees(rows: Iterable[object] | None) -> tuple[EmployeeRecord, ...]:
    """Parse employee dicts into EmployeeRecord values."""

    return tuple(
        EmployeeRecord(
            id=str(row.get("id", "")),
            name=str(row.get("name", "")),
            department=_coerce_str(row.get("department")),
        )
        for row in _mappings(rows)
    )


def parse_materials(rows: Iterable[object] | None) -> tuple[MaterialRecord, ...]:
    """Parse material catalog dicts into MaterialRecord values."""

    return tuple(
        MaterialRecord(
            id=str(row.get("id", "")),
            name=str(row.get("name", "")),
            quantity=_coerce_float(row.get("quantity"), default=0.0) or 0.0,
            unit=_coerce_str(row.get("unit")),
        )
        for row in _mappings(rows)
    )


def parse_clock_events(rows: Iterable[object] | None) -> tuple[ClockEvent, ...]:
    """Parse clock-event dicts; events without an employee id are skipped."""

    events: list[ClockEvent] = []
    for row in _mappings(rows):
        employee_id = _first(row, "employee_id", "employeeId")
        if employee_id is None:
            continue
        events.append(
            ClockEvent(
                employee_id=str(employee_id),
                clock_in=parse_timestamp(row.get("clock_in")),
                clock_out=parse_timestamp(row.get("clock_out")),
            )
        )
    return tuple(events)
