"""Scale mappers converting data values into pixel coordinates.

Every chart builds on these functions, and they are the only place degenerate
inputs (empty series, all-zero series, single-point series) are defused: the
maxima are floored at 1 and single-point x spacing treats `n - 1` as 1.
"""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Sequence

TAU = 2 * math.pi


def floored_max(values: Iterable[float]) -> float:
    """Return the largest value, floored at 1."""

    return max([*values, 1])


def finite(value: float, default: float = 0.0) -> float:
    """Return `value` with NaN replaced by `default` and infinities saturated.

    Sums of very large inputs can overflow to infinity; those saturate at
    the largest float.
    """

    if math.isnan(value):
        return default
    if math.isinf(value):
        return sys.float_info.max if value > 0 else -sys.float_info.max
    return value


def half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (not to even).

    Non-finite input is passed through `finite` first, so NaN rounds to 0.
    """

    return math.floor(finite(value) + 0.5)


def linear_x(index: int, count: int, width: float, padding: float) -> float:
    """Map a sample index to an x coordinate spread across the padded width.

    Args:
        index: Zero-based sample index.
        count: Number of samples in the series.
        width: Surface width in pixels.
        padding: Padding applied on both sides.

    Returns:
        `padding + index * (width - 2 * padding) / max(count - 1, 1)`.
    """

    return padding + index * (width - 2 * padding) / max(count - 1, 1)


def linear_y(value: float, max_value: float, height: float, padding: float) -> float:
    """Map a value onto a y coordinate measured down from the top.

    `max_value` is floored at 1, so an all-zero series maps to the baseline.
    """

    scale_max = max(max_value, 1)
    return height - padding - (value / scale_max) * (height - 2 * padding)


def angular(cumulative_fraction: float) -> float:
    """Convert a cumulative fraction of a whole into radians."""

    return cumulative_fraction * TAU


def wedge_angles(quantities: Sequence[float]) -> list[tuple[float, float]]:
    """Compute `[start, end)` angles for consecutive pie wedges.

    Args:
        quantities: Non-negative category quantities in display order.

    Returns:
        One `(start, end)` pair per quantity, taken from the running
        cumulative sum divided by `max(sum(quantities), 1)`. Quantities are
        divided by their floored maximum before summing so huge values cannot
        overflow the total.
    """

    peak = floored_max(quantities)
    scaled = [quantity / peak for quantity in quantities]
    total = max(sum(scaled), 1 / peak)
    angles: list[tuple[float, float]] = []
    running = 0.0
    for quantity in scaled:
        start = angular(running / total)
        running += quantity
        angles.append((start, angular(running / total)))
    return angles


def bar_length(value: float, max_value: float, width: float, margin: float) -> float:
    """Return a horizontal bar length proportional to `value`.

    Args:
        value: Bar value.
        max_value: Largest value in the chart (floored at 1).
        width: Surface width in pixels.
        margin: Fixed horizontal space reserved for labels.
    """

    scale_max = max(max_value, 1)
    return (width - margin) * (value / scale_max)
