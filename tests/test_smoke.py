"""Minimal smoke tests for project wiring."""

from __future__ import annotations

import pytest


@pytest.mark.unit
def test_analysis_package_imports_without_django() -> None:
    """Import the pure analysis entry points."""

    from analysis import attendance_series, category_totals, filter_by_window, resolve_window, trend_series

    assert all(callable(fn) for fn in (attendance_series, category_totals, filter_by_window, resolve_window, trend_series))


@pytest.mark.integration
def test_django_project_loads() -> None:
    """Import and initialize Django to verify settings are valid."""

    import os

    import django
    from django.conf import settings

    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "shiftStats.settings")
    django.setup()
    assert "core.apps.CoreConfig" in settings.INSTALLED_APPS
    assert "analysis" in settings.LOGGING["loggers"]
