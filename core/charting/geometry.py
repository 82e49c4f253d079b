"""Geometry builders turning aggregated series into drawing primitives.

Each builder is a stateless function `(series, viewport) -> primitives`. When
the viewport width is not known yet, or the series is empty, builders return
an empty tuple instead of raising.
"""

from __future__ import annotations

from collections.abc import Sequence

from analysis.dto import AttendanceSample, CategoryQuantity, DatedValue, Viewport
from analysis.scales import bar_length, finite, floored_max, half_up, linear_x, linear_y, wedge_angles

from .configs import (
    ABSENT_FILL,
    AXIS_LABEL_GAP,
    BAR_HEIGHT,
    BAR_LABEL_GAP,
    BAR_LEFT,
    BAR_MARGIN,
    BAR_ROW_STEP,
    BAR_TOP,
    PIE_CENTER,
    PIE_LABEL_RADIUS_RATIO,
    PIE_NAME_OFFSET,
    PIE_RADIUS,
    PIE_VALUE_OFFSET,
    PRESENT_FILL,
    STACKED_BAR_WIDTH,
    palette_color,
)
from .primitives import Label, Line, Polyline, Primitive, Rect, Wedge, format_quantity


def build_trend_chart(series: Sequence[DatedValue], viewport: Viewport) -> tuple[Primitive, ...]:
    """Build the performance trend line chart.

    Args:
        series: Trend samples in display order.
        viewport: Surface dimensions (width, height, padding).

    Returns:
        x-axis and y-axis Lines followed by one Polyline through every sample.
    """

    if not viewport.is_known or not series:
        return ()

    width, height, padding = viewport.width, viewport.height, viewport.padding
    max_value = floored_max(sample.value for sample in series)
    points = tuple(
        (
            linear_x(index, len(series), width, padding),
            linear_y(sample.value, max_value, height, padding),
        )
        for index, sample in enumerate(series)
    )
    return (
        Line(x1=padding, y1=height - padding, x2=width - padding, y2=height - padding),
        Line(x1=padding, y1=padding, x2=padding, y2=height - padding),
        Polyline(points=points),
    )


def build_pie_chart(
    categories: Sequence[CategoryQuantity],
    viewport: Viewport,
    *,
    center: float = PIE_CENTER,
    radius: float = PIE_RADIUS,
) -> tuple[Primitive, ...]:
    """Build the category usage pie chart.

    Each category contributes a Wedge followed by two Labels placed at the
    wedge's angular midpoint: the category name nearer the rim and
    `"quantity (percent%)"` nearer the center.

    Args:
        categories: Category totals in display order.
        viewport: Host surface; only used to detect an unknown layout.
        center: Pie center (both x and y).
        radius: Pie radius.
    """

    if not viewport.is_known or not categories:
        return ()

    quantities = [category.quantity for category in categories]
    total = finite(max(sum(quantities), 1))
    label_radius = radius * PIE_LABEL_RADIUS_RATIO

    primitives: list[Primitive] = []
    for index, (category, (start, end)) in enumerate(zip(categories, wedge_angles(quantities))):
        wedge = Wedge(cx=center, cy=center, radius=radius, start_angle=start, end_angle=end, fill=palette_color(index))
        label_x, label_y = wedge.point_at((start + end) / 2, label_radius)
        percent = half_up(category.quantity / total * 100)
        primitives.append(wedge)
        primitives.append(Label(x=label_x, y=label_y + PIE_NAME_OFFSET, text=category.category, anchor="middle"))
        primitives.append(
            Label(
                x=label_x,
                y=label_y + PIE_VALUE_OFFSET,
                text=f"{format_quantity(category.quantity)} ({percent}%)",
                anchor="middle",
            )
        )
    return tuple(primitives)


def build_bar_chart(categories: Sequence[CategoryQuantity], viewport: Viewport) -> tuple[Primitive, ...]:
    """Build the horizontal category bar chart.

    Row `i` is a Rect of height 24 at `y = 20 + 36 * i`, with the category
    name to the left of the bar and the value just past the bar's end.
    """

    if not viewport.is_known or not categories:
        return ()

    max_value = floored_max(category.quantity for category in categories)
    primitives: list[Primitive] = []
    for index, category in enumerate(categories):
        length = max(bar_length(category.quantity, max_value, viewport.width, BAR_MARGIN), 0.0)
        y = BAR_TOP + index * BAR_ROW_STEP
        middle = y + BAR_HEIGHT / 2
        primitives.append(Rect(x=BAR_LEFT, y=y, w=length, h=BAR_HEIGHT, fill=palette_color(index)))
        primitives.append(Label(x=BAR_LEFT - BAR_LABEL_GAP, y=middle, text=category.category, anchor="end"))
        primitives.append(
            Label(
                x=BAR_LEFT + BAR_LABEL_GAP + length,
                y=middle,
                text=format_quantity(category.quantity),
                anchor="start",
            )
        )
    return tuple(primitives)


def build_attendance_chart(samples: Sequence[AttendanceSample], viewport: Viewport) -> tuple[Primitive, ...]:
    """Build the stacked present/absent attendance bar chart.

    Emits three y-axis Labels (0, half of max, max), then per sample an absent
    Rect from the baseline up, a present Rect stacked on top of it, and an
    `MM-DD` date Label under the bar.
    """

    if not viewport.is_known or not samples:
        return ()

    width, height, padding = viewport.width, viewport.height, viewport.padding
    max_total = floored_max(sample.total for sample in samples)
    axis_x = padding - AXIS_LABEL_GAP
    primitives: list[Primitive] = [
        Label(x=axis_x, y=height - padding + 4, text="0", anchor="end"),
        Label(x=axis_x, y=padding + (height - 2 * padding) / 2, text=str(half_up(max_total / 2)), anchor="end"),
        Label(x=axis_x, y=padding, text=format_quantity(max_total), anchor="end"),
    ]

    step = (width - 2 * padding) / len(samples)
    baseline = height - padding
    for index, sample in enumerate(samples):
        x = padding + index * step
        y_total = linear_y(sample.total, max_total, height, padding)
        y_absent = linear_y(sample.absent, max_total, height, padding)
        primitives.append(Rect(x=x, y=y_absent, w=STACKED_BAR_WIDTH, h=baseline - y_absent, fill=ABSENT_FILL))
        primitives.append(Rect(x=x, y=y_total, w=STACKED_BAR_WIDTH, h=y_absent - y_total, fill=PRESENT_FILL))
        primitives.append(
            Label(x=x + STACKED_BAR_WIDTH / 2, y=height - 4, text=sample.date.strftime("%m-%d"), anchor="middle")
        )
    return tuple(primitives)
