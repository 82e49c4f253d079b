"""Render pipeline: raw records -> filter -> aggregate -> chart geometry.

One call is one render pass. Nothing is cached between passes, so a new
layout width simply means calling `render_analytics` again.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, tzinfo
from typing import Any, Literal

from analysis.aggregations import (
    attendance_series,
    category_totals,
    filter_by_window,
    material_names,
    material_usage,
    trend_series,
)
from analysis.dto import (
    AttendanceSample,
    CategoryQuantity,
    DatedValue,
    MaterialStock,
    PerformanceMetrics,
    TimeWindow,
    Viewport,
    WindowTag,
)
from analysis.records import parse_clock_events, parse_employees, parse_materials, parse_tasks
from analysis.summaries import (
    WindowSummary,
    best_performers,
    late_employees,
    material_stock,
    performance_level,
    performance_metrics,
    summarize_window,
    weighted_performance_score,
    work_hours,
)
from analysis.windows import resolve_window

from .configs import ATTENDANCE_HEIGHT, PADDING, PIE_SIZE, TREND_HEIGHT, bar_chart_height
from .geometry import build_attendance_chart, build_bar_chart, build_pie_chart, build_trend_chart
from .primitives import Primitive

logger = logging.getLogger(__name__)

ChartName = Literal["line", "pie", "bar", "attendance"]

CHART_NAMES: tuple[ChartName, ...] = ("line", "pie", "bar", "attendance")


@dataclass(frozen=True, slots=True)
class RenderedChart:
    """Primitives for one chart plus the surface size they were laid out for."""

    name: ChartName
    viewport: Viewport
    primitives: tuple[Primitive, ...]

    def as_json(self) -> dict[str, Any]:
        return {
            "width": self.viewport.width,
            "height": self.viewport.height,
            "primitives": [primitive.as_json() for primitive in self.primitives],
        }


@dataclass(frozen=True, slots=True)
class AnalyticsSummary:
    """Summary scalars a host may show as stat tiles next to the charts."""

    window: WindowSummary
    performance: tuple[PerformanceMetrics, ...]
    best_performers: tuple[PerformanceMetrics, ...]
    late_employees: tuple[str, ...]
    work_hours: float
    stock: tuple[MaterialStock, ...]


@dataclass(frozen=True, slots=True)
class RenderedAnalytics:
    """Everything produced by one render pass."""

    window: TimeWindow
    trend: tuple[DatedValue, ...]
    categories: tuple[CategoryQuantity, ...]
    attendance: tuple[AttendanceSample, ...]
    summary: AnalyticsSummary
    charts: dict[ChartName, RenderedChart]

    def as_json(self) -> dict[str, Any]:
        """Return a JSON-serializable payload for the host."""

        summary = self.summary
        return {
            "window": {
                "tag": self.window.tag,
                "start": self.window.start.isoformat(),
                "end": self.window.end.isoformat(),
            },
            "series": {
                "trend": [{"date": item.date.isoformat(), "value": item.value} for item in self.trend],
                "categories": [{"category": item.category, "quantity": item.quantity} for item in self.categories],
                "attendance": [
                    {"date": item.date.isoformat(), "present": item.present, "absent": item.absent}
                    for item in self.attendance
                ],
            },
            "summary": {
                "totalTasks": summary.window.total_tasks,
                "completedTasks": summary.window.completed_tasks,
                "employeeCount": summary.window.employee_count,
                "materialUnitsUsed": summary.window.material_units_used,
                "workHours": summary.work_hours,
                "lateEmployees": list(summary.late_employees),
                "bestPerformers": [_performance_json(row) for row in summary.best_performers],
                "performance": [_performance_json(row) for row in summary.performance],
                "stock": [
                    {"materialId": row.material_id, "name": row.name, "used": row.used, "remaining": row.remaining}
                    for row in summary.stock
                ],
            },
            "charts": {name: chart.as_json() for name, chart in self.charts.items()},
        }


def _performance_json(row: PerformanceMetrics) -> dict[str, Any]:
    weighted = weighted_performance_score(row)
    return {
        "employeeId": row.employee_id,
        "employeeName": row.employee_name,
        "totalTasks": row.total_tasks,
        "completedTasks": row.completed_tasks,
        "averageRating": row.average_rating,
        "performanceScore": row.performance_score,
        "weightedScore": weighted,
        "level": performance_level(weighted),
    }


def render_analytics(
    *,
    tasks: Iterable[object],
    employees: Iterable[object],
    materials: Iterable[object] = (),
    clock_events: Iterable[object] = (),
    window_tag: WindowTag,
    today: date,
    width: float,
    tz: tzinfo | None = None,
) -> RenderedAnalytics:
    """Run one full analytics render pass.

    Args:
        tasks: Raw task dicts from the task collaborator.
        employees: Raw employee dicts.
        materials: Raw material catalog dicts used to resolve display names.
        clock_events: Raw clock-event dicts.
        window_tag: Selected "day", "week" or "month" window.
        today: Inclusive window end date.
        width: Latest layout width reported by the host (0 when unknown).
        tz: Host timezone used to judge offset-aware clock-ins as late.

    Returns:
        RenderedAnalytics with the aggregated series, summary scalars and
        per-chart primitives.
    """

    window = resolve_window(window_tag, today)
    task_records = parse_tasks(tasks)
    employee_records = parse_employees(employees)
    material_records = parse_materials(materials)
    event_records = parse_clock_events(clock_events)

    window_tasks = filter_by_window(task_records, window)
    window_events = filter_by_window(event_records, window)

    trend = trend_series(window_tasks)
    categories = category_totals(window_tasks, names=material_names(material_records))
    attendance = attendance_series(len(employee_records), today=today)

    performance = performance_metrics(employee_records, window_tasks)
    summary = AnalyticsSummary(
        window=summarize_window(window_tasks, employees=employee_records),
        performance=performance,
        best_performers=best_performers(performance),
        late_employees=late_employees(window_events, employee_records, tz=tz),
        work_hours=work_hours(window_events),
        stock=material_stock(material_records, material_usage(window_tasks)),
    )

    charts = build_charts(trend=trend, categories=categories, attendance=attendance, width=width)
    logger.debug(
        "Rendered analytics window=%s tasks=%d/%d trend=%d categories=%d width=%s",
        window.tag,
        len(window_tasks),
        len(task_records),
        len(trend),
        len(categories),
        width,
    )
    return RenderedAnalytics(
        window=window,
        trend=trend,
        categories=categories,
        attendance=attendance,
        summary=summary,
        charts=charts,
    )


def build_charts(
    *,
    trend: tuple[DatedValue, ...],
    categories: tuple[CategoryQuantity, ...],
    attendance: tuple[AttendanceSample, ...],
    width: float,
) -> dict[ChartName, RenderedChart]:
    """Lay out all four charts for a given width."""

    trend_viewport = Viewport(width=width, height=TREND_HEIGHT, padding=PADDING)
    pie_viewport = Viewport(width=PIE_SIZE if width > 0 else 0, height=PIE_SIZE)
    bar_viewport = Viewport(width=width, height=bar_chart_height(len(categories)))
    attendance_viewport = Viewport(width=width, height=ATTENDANCE_HEIGHT, padding=PADDING)
    return {
        "line": RenderedChart("line", trend_viewport, build_trend_chart(trend, trend_viewport)),
        "pie": RenderedChart("pie", pie_viewport, build_pie_chart(categories, pie_viewport)),
        "bar": RenderedChart("bar", bar_viewport, build_bar_chart(categories, bar_viewport)),
        "attendance": RenderedChart(
            "attendance",
            attendance_viewport,
            build_attendance_chart(attendance, attendance_viewport),
        ),
    }
