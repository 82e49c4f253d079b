"""Renderer-agnostic drawing primitives produced by the geometry builders.

Primitives are immutable values. A renderer adapter (SVG in this project, a
native canvas elsewhere) decides how to stroke, fill and style them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, ClassVar, Literal, Union

TextAnchor = Literal["start", "middle", "end"]


def _num(value: float) -> str:
    """Format a coordinate compactly for path strings and labels."""

    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True, slots=True)
class Line:
    """A straight segment (chart axes)."""

    kind: ClassVar[str] = "line"

    x1: float
    y1: float
    x2: float
    y2: float

    def as_json(self) -> dict[str, Any]:
        return {"kind": self.kind, "x1": self.x1, "y1": self.y1, "x2": self.x2, "y2": self.y2}


@dataclass(frozen=True, slots=True)
class Polyline:
    """An ordered sequence of `(x, y)` points joined by straight segments."""

    kind: ClassVar[str] = "polyline"

    points: tuple[tuple[float, float], ...]

    @property
    def points_attr(self) -> str:
        """Return points in SVG `points="x,y x,y"` form."""

        return " ".join(f"{_num(x)},{_num(y)}" for x, y in self.points)

    def as_json(self) -> dict[str, Any]:
        return {"kind": self.kind, "points": [[x, y] for x, y in self.points]}


@dataclass(frozen=True, slots=True)
class Wedge:
    """A pie slice described by center, radius and `[start, end)` angles.

    Angles are radians measured clockwise from 12 o'clock.
    """

    kind: ClassVar[str] = "wedge"

    cx: float
    cy: float
    radius: float
    start_angle: float
    end_angle: float
    fill: str

    @property
    def large_arc(self) -> int:
        """SVG large-arc flag: 1 when the wedge spans more than half a turn."""

        return 1 if self.end_angle - self.start_angle > math.pi else 0

    def point_at(self, angle: float, radius: float | None = None) -> tuple[float, float]:
        """Return the point at `angle` (clockwise from 12 o'clock) and `radius`."""

        r = self.radius if radius is None else radius
        return (
            self.cx + r * math.cos(angle - math.pi / 2),
            self.cy + r * math.sin(angle - math.pi / 2),
        )

    @property
    def is_full_turn(self) -> bool:
        """True when the wedge covers the whole circle (a single category)."""

        return self.end_angle - self.start_angle >= 2 * math.pi

    @property
    def path(self) -> str:
        """Return the wedge outline as an SVG path string.

        An SVG arc whose endpoints coincide is not drawn, so a full turn is
        emitted as two half-circle arcs instead of one wedge.
        """

        r = _num(self.radius)
        if self.is_full_turn:
            top = f"{_num(self.cx)},{_num(self.cy - self.radius)}"
            bottom = f"{_num(self.cx)},{_num(self.cy + self.radius)}"
            return f"M{top} A{r},{r} 0 1 1 {bottom} A{r},{r} 0 1 1 {top} Z"

        x1, y1 = self.point_at(self.start_angle)
        x2, y2 = self.point_at(self.end_angle)
        return (
            f"M{_num(self.cx)},{_num(self.cy)} L{_num(x1)},{_num(y1)} "
            f"A{r},{r} 0 {self.large_arc} 1 {_num(x2)},{_num(y2)} Z"
        )

    def as_json(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "cx": self.cx,
            "cy": self.cy,
            "radius": self.radius,
            "startAngle": self.start_angle,
            "endAngle": self.end_angle,
            "largeArc": self.large_arc,
            "path": self.path,
            "fill": self.fill,
        }


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned filled rectangle."""

    kind: ClassVar[str] = "rect"

    x: float
    y: float
    w: float
    h: float
    fill: str

    def as_json(self) -> dict[str, Any]:
        return {"kind": self.kind, "x": self.x, "y": self.y, "w": self.w, "h": self.h, "fill": self.fill}


@dataclass(frozen=True, slots=True)
class Label:
    """A text label anchored at `(x, y)`."""

    kind: ClassVar[str] = "label"

    x: float
    y: float
    text: str
    anchor: TextAnchor = "start"

    def as_json(self) -> dict[str, Any]:
        return {"kind": self.kind, "x": self.x, "y": self.y, "text": self.text, "anchor": self.anchor}


Primitive = Union[Line, Polyline, Wedge, Rect, Label]


def format_quantity(value: float) -> str:
    """Format a quantity for labels ("3" rather than "3.0")."""

    return _num(value)
