"""Layout constants for the built-in analytics charts."""

from __future__ import annotations

from typing import Final

PADDING: Final[float] = 32
TREND_HEIGHT: Final[float] = 220
ATTENDANCE_HEIGHT: Final[float] = 160

PIE_SIZE: Final[float] = 340
PIE_CENTER: Final[float] = 140
PIE_RADIUS: Final[float] = 110
PIE_LABEL_RADIUS_RATIO: Final[float] = 0.65
PIE_NAME_OFFSET: Final[float] = -12
PIE_VALUE_OFFSET: Final[float] = 14

BAR_MARGIN: Final[float] = 120
BAR_LEFT: Final[float] = 100
BAR_HEIGHT: Final[float] = 24
BAR_TOP: Final[float] = 20
BAR_ROW_STEP: Final[float] = 36
BAR_LABEL_GAP: Final[float] = 10
BAR_MIN_CHART_HEIGHT: Final[float] = 60
BAR_ROW_HEIGHT: Final[float] = 40

STACKED_BAR_WIDTH: Final[float] = 20
AXIS_LABEL_GAP: Final[float] = 8

PALETTE: Final[tuple[str, ...]] = ("#1976d2", "#4CAF50", "#FFD700", "#d32f2f", "#888")
PRESENT_FILL: Final[str] = "#4CAF50"
ABSENT_FILL: Final[str] = "#d32f2f"


def palette_color(index: int) -> str:
    """Return the palette color for a series position, cycling the palette."""

    return PALETTE[index % len(PALETTE)]


def bar_chart_height(rows: int) -> float:
    """Return the surface height needed for a horizontal bar chart."""

    return max(BAR_ROW_HEIGHT * rows, BAR_MIN_CHART_HEIGHT)
