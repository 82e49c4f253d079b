"""SVG renderer adapter for chart primitives.

The geometry builders stay renderer-agnostic; this module is the one place
that decides strokes, font sizes and markup for the web host.
"""

from __future__ import annotations

from collections.abc import Iterable

from django.utils.html import format_html, format_html_join
from django.utils.safestring import SafeString

from .primitives import Label, Line, Polyline, Primitive, Rect, Wedge

AXIS_STROKE = "#888"
LINE_STROKE = "#1976d2"
LABEL_FILL = "#333"


def primitive_to_svg(primitive: Primitive) -> SafeString:
    """Render a single primitive as an SVG element."""

    if isinstance(primitive, Line):
        return format_html(
            '<line x1="{}" y1="{}" x2="{}" y2="{}" stroke="{}" stroke-width="1" />',
            primitive.x1,
            primitive.y1,
            primitive.x2,
            primitive.y2,
            AXIS_STROKE,
        )
    if isinstance(primitive, Polyline):
        return format_html(
            '<polyline points="{}" fill="none" stroke="{}" stroke-width="2" />',
            primitive.points_attr,
            LINE_STROKE,
        )
    if isinstance(primitive, Wedge):
        return format_html(
            '<path d="{}" fill="{}" stroke="#fff" stroke-width="1" />',
            primitive.path,
            primitive.fill,
        )
    if isinstance(primitive, Rect):
        return format_html(
            '<rect x="{}" y="{}" width="{}" height="{}" fill="{}" />',
            primitive.x,
            primitive.y,
            primitive.w,
            primitive.h,
            primitive.fill,
        )
    if isinstance(primitive, Label):
        return format_html(
            '<text x="{}" y="{}" text-anchor="{}" dominant-baseline="middle" font-size="12" fill="{}">{}</text>',
            primitive.x,
            primitive.y,
            primitive.anchor,
            LABEL_FILL,
            primitive.text,
        )
    raise TypeError(f"Unsupported primitive: {type(primitive).__name__}")


def render_svg(primitives: Iterable[Primitive], *, width: float, height: float) -> SafeString:
    """Render primitives into a standalone SVG document.

    Args:
        primitives: Primitives in paint order.
        width: Document width in pixels.
        height: Document height in pixels.

    Returns:
        SVG markup; an empty `<svg>` when there is nothing to draw.
    """

    body = format_html_join("", "{}", ((primitive_to_svg(primitive),) for primitive in primitives))
    return format_html(
        '<svg xmlns="http://www.w3.org/2000/svg" width="{}" height="{}" viewBox="0 0 {} {}">{}</svg>',
        width,
        height,
        width,
        height,
        body,
    )
