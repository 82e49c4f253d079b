"""Pure analytics package for shiftStats.

This package contains deterministic, testable computations that operate on
in-memory records and return DTOs. It must not import Django or perform any
I/O.
"""

from .aggregations import attendance_series, category_totals, filter_by_window, trend_series
from .windows import resolve_window

__all__ = ["attendance_series", "category_totals", "filter_by_window", "resolve_window", "trend_series"]
