"""Views for the analytics host API."""

from __future__ import annotations

import json
import logging
from typing import Any

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils import timezone
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from core.charting.render import CHART_NAMES, RenderedAnalytics, render_analytics
from core.charting.svg import render_svg
from core.forms import AnalyticsRequestForm

logger = logging.getLogger(__name__)

RECORD_KEYS = ("tasks", "employees", "materials", "clock_events")


class BadRequest(Exception):
    """Raised when the request envelope cannot be used for a render pass."""

    def __init__(self, message: str, *, details: Any = None) -> None:
        super().__init__(message)
        self.details = details

    def as_response(self) -> JsonResponse:
        return JsonResponse({"error": str(self), "details": self.details}, status=400)


def _load_payload(request: HttpRequest) -> dict[str, list[Any]]:
    """Decode the JSON body into record lists keyed by collaborator."""

    if not request.body:
        return {key: [] for key in RECORD_KEYS}
    try:
        payload = json.loads(request.body)
    except ValueError as exc:
        raise BadRequest("Request body must be valid JSON.", details=str(exc)) from exc
    if not isinstance(payload, dict):
        raise BadRequest("Request body must be a JSON object.")

    records: dict[str, list[Any]] = {}
    for key in RECORD_KEYS:
        rows = payload.get(key) or []
        if not isinstance(rows, list):
            raise BadRequest(f"`{key}` must be a list.")
        records[key] = rows
    return records


def _render(request: HttpRequest) -> RenderedAnalytics:
    form = AnalyticsRequestForm(request.GET)
    if not form.is_valid():
        raise BadRequest("Invalid analytics parameters.", details=form.errors.get_json_data())

    records = _load_payload(request)
    return render_analytics(
        tasks=records["tasks"],
        employees=records["employees"],
        materials=records["materials"],
        clock_events=records["clock_events"],
        window_tag=form.cleaned_data["window"],
        today=form.cleaned_data.get("today") or timezone.localdate(),
        width=form.cleaned_data["width"],
        tz=timezone.get_current_timezone(),
    )


@csrf_exempt
@require_POST
def analytics_api(request: HttpRequest) -> JsonResponse:
    """Return aggregated series, summary scalars and chart primitives as JSON."""

    try:
        rendered = _render(request)
    except BadRequest as exc:
        logger.info("Rejected analytics request: %s", exc)
        return exc.as_response()
    return JsonResponse(rendered.as_json())


@csrf_exempt
@require_POST
def analytics_chart_svg(request: HttpRequest, chart: str) -> HttpResponse:
    """Return one chart rendered as an SVG document."""

    if chart not in CHART_NAMES:
        return JsonResponse({"error": f"Unknown chart: {chart}", "details": list(CHART_NAMES)}, status=404)
    try:
        rendered = _render(request)
    except BadRequest as exc:
        logger.info("Rejected analytics SVG request: %s", exc)
        return exc.as_response()

    panel = rendered.charts[chart]
    svg = render_svg(panel.primitives, width=panel.viewport.width, height=panel.viewport.height)
    return HttpResponse(svg, content_type="image/svg+xml")
