"""Summary scalars shown next to the charts (stat tiles, leaderboards).

These helpers operate on window-filtered records and return plain numbers or
small DTOs. Like the rest of the package they never raise on bad data.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Literal

from .dto import ClockEvent, EmployeeRecord, MaterialRecord, MaterialStock, PerformanceMetrics, TaskRecord
from .scales import finite, half_up

PerformanceLevel = Literal["excellent", "good", "average", "poor"]

TASK_WEIGHT = 0.7
RATING_WEIGHT = 0.3
MAX_RATING = 5


@dataclass(frozen=True, slots=True)
class WindowSummary:
    """Stat-tile numbers for the active window.

    Attributes:
        total_tasks: Tasks dated within the window.
        completed_tasks: Completed tasks within the window.
        employee_count: Employees known to the host.
        material_units_used: Sum of all material quantities used.
    """

    total_tasks: int
    completed_tasks: int
    employee_count: int
    material_units_used: float


def summarize_window(
    tasks: Sequence[TaskRecord],
    *,
    employees: Sequence[EmployeeRecord],
) -> WindowSummary:
    """Summarize window-filtered tasks for the stat tiles."""

    return WindowSummary(
        total_tasks=len(tasks),
        completed_tasks=sum(1 for task in tasks if task.completed),
        employee_count=len(employees),
        material_units_used=finite(sum(usage.quantity for task in tasks for usage in task.materials_used)),
    )


def material_stock(
    materials: Iterable[MaterialRecord],
    usage: Mapping[str, float],
) -> tuple[MaterialStock, ...]:
    """Deduct window usage from catalog quantities.

    Args:
        materials: Material catalog entries.
        usage: Material id -> used quantity.

    Returns:
        One MaterialStock per catalog entry; remaining stock never drops
        below 0.
    """

    return tuple(
        MaterialStock(
            material_id=material.id,
            name=material.name,
            used=usage.get(material.id, 0.0),
            remaining=max(0.0, material.quantity - usage.get(material.id, 0.0)),
        )
        for material in materials
    )


def performance_metrics(
    employees: Iterable[EmployeeRecord],
    tasks: Sequence[TaskRecord],
) -> tuple[PerformanceMetrics, ...]:
    """Compute per-employee completion metrics for window-filtered tasks."""

    metrics: list[PerformanceMetrics] = []
    for employee in employees:
        assigned = [task for task in tasks if task.assigned_to == employee.id]
        completed = [task for task in assigned if task.completed]
        ratings = [task.rating for task in assigned if task.rating is not None]
        score = half_up(len(completed) / len(assigned) * 100) if assigned else 0
        metrics.append(
            PerformanceMetrics(
                employee_id=employee.id,
                employee_name=employee.name,
                total_tasks=len(assigned),
                completed_tasks=len(completed),
                average_rating=finite(sum(ratings)) / len(ratings) if ratings else 0.0,
                performance_score=score,
            )
        )
    return tuple(metrics)


def weighted_performance_score(metrics: PerformanceMetrics) -> int:
    """Blend completion rate (70%) with average rating (30%) into a 0-100 score."""

    task_score = metrics.completed_tasks / max(metrics.total_tasks, 1) * 100
    rating_score = metrics.average_rating / MAX_RATING * 100
    return half_up(task_score * TASK_WEIGHT + rating_score * RATING_WEIGHT)


def performance_level(score: float) -> PerformanceLevel:
    """Bucket a 0-100 score into a named level."""

    if score >= 90:
        return "excellent"
    if score >= 75:
        return "good"
    if score >= 60:
        return "average"
    return "poor"


def best_performers(metrics: Iterable[PerformanceMetrics], *, top_n: int = 5) -> tuple[PerformanceMetrics, ...]:
    """Return the top N employees by performance score (ties keep input order)."""

    ranked = sorted(metrics, key=lambda row: row.performance_score, reverse=True)
    return tuple(ranked[: max(top_n, 0)])


def _local_hour(moment: datetime, tz: tzinfo | None) -> int:
    if tz is None or moment.tzinfo is None:
        return moment.hour
    try:
        return moment.astimezone(tz).hour
    except OverflowError:
        return moment.hour


def late_employees(
    events: Iterable[ClockEvent],
    employees: Iterable[EmployeeRecord],
    *,
    threshold_hour: int = 9,
    tz: tzinfo | None = None,
) -> tuple[str, ...]:
    """Return names of employees who clocked in at or after `threshold_hour`.

    Names are returned once each, in employee order.

    Args:
        events: Window-filtered clock events.
        employees: Employees in display order.
        threshold_hour: First hour of the day that counts as late.
        tz: Local timezone for offset-aware clock-ins. Naive clock-ins are
            taken as already local; without `tz` every clock-in is judged
            in the offset it was recorded with.
    """

    late_ids = {
        event.employee_id
        for event in events
        if event.clock_in is not None and _local_hour(event.clock_in, tz) >= threshold_hour
    }
    names: list[str] = []
    for employee in employees:
        if employee.id in late_ids and employee.name not in names:
            names.append(employee.name)
    return tuple(names)


def work_hours(events: Iterable[ClockEvent]) -> float:
    """Sum worked hours across complete clock events, rounded to 2 decimals."""

    total = 0.0
    for event in events:
        if event.clock_in is None or event.clock_out is None:
            continue
        try:
            total += (event.clock_out - event.clock_in).total_seconds() / 3600
        except TypeError:
            # Mixed naive/aware timestamps cannot be subtracted.
            continue
    return half_up(total * 100) / 100
