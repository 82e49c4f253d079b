"""Unit tests for the numeric scale mappers."""

from __future__ import annotations

import math
import sys

import pytest

from analysis.scales import angular, bar_length, finite, floored_max, half_up, linear_x, linear_y, wedge_angles

pytestmark = pytest.mark.unit


def test_linear_x_spreads_points_across_padded_width() -> None:
    """First and last samples touch the padding edges."""

    assert linear_x(0, 5, 400, 32) == 32
    assert linear_x(4, 5, 400, 32) == 368
    assert linear_x(2, 5, 400, 32) == pytest.approx(200)


def test_linear_x_single_point_does_not_divide_by_zero() -> None:
    """A single sample sits at the left padding."""

    assert linear_x(0, 1, 400, 32) == 32


def test_linear_y_maps_max_to_top_and_zero_to_baseline() -> None:
    """Values scale between the padded top and bottom."""

    assert linear_y(10, 10, 220, 32) == 32
    assert linear_y(0, 10, 220, 32) == 188
    assert linear_y(5, 10, 220, 32) == pytest.approx(110)


def test_linear_y_with_zero_max_behaves_as_max_one() -> None:
    """A zero maximum is floored to 1 rather than raising."""

    assert linear_y(0, 0, 220, 32) == linear_y(0, 1, 220, 32) == 188
    assert linear_y(1, 0, 220, 32) == linear_y(1, 1, 220, 32)


def test_floored_max_handles_empty_and_all_zero() -> None:
    """Maxima never fall below 1."""

    assert floored_max([]) == 1
    assert floored_max([0, 0]) == 1
    assert floored_max([0.5, 7]) == 7


def test_wedge_angles_for_quarter_quarter_half() -> None:
    """Quantities [1, 1, 2] split the circle at pi/2 and pi."""

    angles = wedge_angles([1, 1, 2])
    expected = [(0, math.pi / 2), (math.pi / 2, math.pi), (math.pi, 2 * math.pi)]
    for (start, end), (expected_start, expected_end) in zip(angles, expected):
        assert start == pytest.approx(expected_start)
        assert end == pytest.approx(expected_end)


def test_wedge_angles_all_zero_stay_at_origin() -> None:
    """An all-zero total uses 1 as the divisor, so every wedge is empty."""

    assert wedge_angles([0, 0]) == [(0.0, 0.0), (0.0, 0.0)]
    assert wedge_angles([]) == []


def test_angular_full_turn() -> None:
    """A cumulative fraction of 1 is a full turn."""

    assert angular(1) == pytest.approx(2 * math.pi)


def test_bar_length_scales_against_width_minus_margin() -> None:
    """The largest bar fills the width left after the label margin."""

    assert bar_length(10, 10, 400, 120) == 280
    assert bar_length(5, 10, 400, 120) == 140
    assert bar_length(0, 0, 400, 120) == 0


@pytest.mark.parametrize(("value", "expected"), [(0.5, 1), (1.5, 2), (2.5, 3), (2.49, 2), (33.333, 33)])
def test_half_up_rounds_halves_up(value: float, expected: int) -> None:
    """Halves round up, unlike Python's banker's rounding."""

    assert half_up(value) == expected


def test_finite_replaces_nan_and_saturates_infinities() -> None:
    """NaN becomes the default; infinities clamp to the largest float."""

    assert finite(float("nan")) == 0.0
    assert finite(float("nan"), default=1.0) == 1.0
    assert finite(float("inf")) == sys.float_info.max
    assert finite(float("-inf")) == -sys.float_info.max
    assert finite(2.5) == 2.5


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_half_up_never_raises_on_non_finite_values(value: float) -> None:
    """Rounding a non-finite value yields an int instead of raising."""

    assert isinstance(half_up(value), int)


def test_wedge_angles_stay_finite_for_huge_quantities() -> None:
    """Quantities whose sum overflows still split the circle evenly."""

    angles = wedge_angles([1e308, 1e308])
    assert angles[0] == pytest.approx((0, math.pi))
    assert angles[1] == pytest.approx((math.pi, 2 * math.pi))


def test_wedge_angles_single_quantity_is_a_full_turn() -> None:
    """One non-zero category spans the whole circle."""

    assert wedge_angles([3]) == [(0.0, 2 * math.pi)]
