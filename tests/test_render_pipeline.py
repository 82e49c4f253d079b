"""Unit tests for the full analytics render pass."""

from __future__ import annotations

import json
from datetime import date

import pytest

from analysis.dto import DatedValue
from core.charting.primitives import Polyline, Wedge
from core.charting.render import CHART_NAMES, render_analytics

pytestmark = pytest.mark.unit

MONDAY = date(2024, 6, 10)


def test_week_window_keeps_only_current_week_sample() -> None:
    """A Monday's week starts on Sunday, so last week's task is dropped."""

    rendered = render_analytics(
        tasks=[
            {"id": "1", "date": "2024-06-03", "completed": True, "rating": 4},
            {"id": "2", "date": "2024-06-10", "completed": True, "rating": 2},
        ],
        employees=[],
        window_tag="week",
        today=MONDAY,
        width=360,
    )
    assert rendered.window.start == date(2024, 6, 9)
    assert rendered.trend == (DatedValue(date=MONDAY, value=2),)

    line = rendered.charts["line"].primitives
    assert isinstance(line[-1], Polyline)
    assert len(line[-1].points) == 1


def test_category_names_resolve_and_feed_pie_and_bar() -> None:
    """Material usage within the window becomes pie wedges and bar rows."""

    rendered = render_analytics(
        tasks=[
            {"id": "1", "date": "2024-06-01", "completed": True, "materials_used": [{"materialId": "m1", "quantity": 3}]},
            {"id": "2", "date": "2024-06-05", "completed": False, "materials_used": [{"materialId": "m1", "quantity": 5}]},
            {"id": "3", "date": "2024-06-07", "materials_used": [{"materialId": "m2", "quantity": 2}]},
            {"id": "4", "date": "2024-05-31", "materials_used": [{"materialId": "m3", "quantity": 9}]},
        ],
        employees=[{"id": "e1", "name": "Ana"}],
        materials=[{"id": "m1", "name": "Glass", "quantity": 10}],
        window_tag="month",
        today=MONDAY,
        width=400,
    )
    assert [(item.category, item.quantity) for item in rendered.categories] == [("Glass", 8), ("m2", 2)]
    assert len([p for p in rendered.charts["pie"].primitives if isinstance(p, Wedge)]) == 2
    assert len(rendered.charts["bar"].primitives) == 6
    assert rendered.summary.stock[0].remaining == 2
    assert rendered.summary.window.total_tasks == 3


def test_attendance_ignores_window_tag() -> None:
    """Attendance is always the trailing seven days."""

    for tag in ("day", "week", "month"):
        rendered = render_analytics(
            tasks=[],
            employees=[{"id": "e1"}, {"id": "e2"}],
            window_tag=tag,  # type: ignore[arg-type]
            today=MONDAY,
            width=400,
        )
        assert len(rendered.attendance) == 7
        assert {sample.present for sample in rendered.attendance} == {2}


def test_unknown_width_keeps_series_but_draws_nothing() -> None:
    """Before layout the series are available while every chart is empty."""

    rendered = render_analytics(
        tasks=[{"id": "1", "date": "2024-06-10", "completed": True, "rating": 3}],
        employees=[{"id": "e1"}],
        window_tag="day",
        today=MONDAY,
        width=0,
    )
    assert len(rendered.trend) == 1
    assert all(rendered.charts[name].primitives == () for name in CHART_NAMES)


def test_garbage_records_never_raise_and_payload_is_json() -> None:
    """Malformed rows degrade to drawing less, and the payload serializes."""

    rendered = render_analytics(
        tasks=[None, "x", {"date": "nope"}, {"completed": True}, {"date": "2024-06-10", "materials_used": [None]}],
        employees=[1, {"id": "e1", "name": "Ana"}],
        materials=[{"id": "m1", "quantity": "lots"}],
        clock_events=[{"employee_id": "e1", "clock_in": "2024-06-10T10:00:00"}],
        window_tag="day",
        today=MONDAY,
        width=320,
    )
    payload = rendered.as_json()
    json.dumps(payload)
    assert payload["window"] == {"tag": "day", "start": "2024-06-10", "end": "2024-06-10"}
    assert payload["series"]["trend"] == []
    assert payload["summary"]["lateEmployees"] == ["Ana"]
    assert payload["summary"]["totalTasks"] == 1
    assert set(payload["charts"]) == set(CHART_NAMES)


def test_no_employees_means_no_attendance_chart() -> None:
    """An empty headcount yields an empty attendance series and chart."""

    rendered = render_analytics(tasks=[], employees=[], window_tag="week", today=MONDAY, width=400)
    assert rendered.attendance == ()
    assert rendered.charts["attendance"].primitives == ()


@pytest.mark.parametrize("raw", [float("nan"), float("inf"), "nan", 1e308])
def test_non_finite_and_huge_numbers_render_finite_payload(raw: object) -> None:
    """Bad numbers never abort a pass and never leak NaN or Infinity."""

    rendered = render_analytics(
        tasks=[
            {
                "id": str(index),
                "date": "2024-06-10",
                "completed": True,
                "assigned_to": "e1",
                "rating": raw,
                "materials_used": [{"materialId": "m1", "quantity": raw}, {"materialId": "m2", "quantity": 1}],
            }
            for index in range(3)
        ],
        employees=[{"id": "e1", "name": "Ana"}],
        materials=[{"id": "m1", "name": "Glass", "quantity": raw}],
        window_tag="day",
        today=MONDAY,
        width=400,
    )
    json.dumps(rendered.as_json(), allow_nan=False)
    assert len(rendered.trend) == 3
    assert rendered.charts["pie"].primitives
