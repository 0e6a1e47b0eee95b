"""Drawable primitives: the shapes a DrawingSurface holds.

Primitives are plain mutable dataclasses compared by identity. Styling is
changed in place with ``set(**attrs)``; the surface picks the new values up on
the next ``render()``.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar

from graphboard.utils.geometry import triangle_points

_uid_counter = itertools.count(1)


def _next_uid() -> str:
    return f"P{next(_uid_counter)}"


def fmt_number(value: float) -> str:
    """Compact number rendering: 200.0 -> '200', 12.5 -> '12.5'."""
    return f"{float(value):g}"


@dataclass(eq=False)
class Primitive:
    """Base drawable. Subclasses add geometry and override ``svg_element``."""

    tag: ClassVar[str] = ""

    opacity: float = 1.0
    fill: str = "none"
    stroke: str = "none"
    stroke_width: float = 0.0
    uid: str = field(default_factory=_next_uid, init=False)

    def set(self, **attrs: Any) -> "Primitive":
        """Update attributes in place (fabric-style). Unknown names raise AttributeError."""
        known = {f.name for f in fields(self)}
        for name, value in attrs.items():
            if name not in known or name == "uid":
                raise AttributeError(f"{type(self).__name__} has no attribute {name!r}")
            setattr(self, name, value)
        return self

    def style_attributes(self) -> dict[str, str]:
        attrs = {"fill": self.fill, "stroke": self.stroke}
        if self.stroke_width:
            attrs["stroke-width"] = fmt_number(self.stroke_width)
        if self.opacity < 1.0:
            attrs["opacity"] = fmt_number(round(self.opacity, 3))
        return attrs

    def svg_element(self) -> dict[str, Any]:
        raise NotImplementedError


@dataclass(eq=False)
class Circle(Primitive):
    tag: ClassVar[str] = "circle"

    cx: float = 0.0
    cy: float = 0.0
    radius: float = 1.0

    def svg_element(self) -> dict[str, Any]:
        return {
            "tag": self.tag,
            "id": self.uid,
            "cx": fmt_number(self.cx),
            "cy": fmt_number(self.cy),
            "r": fmt_number(self.radius),
            **self.style_attributes(),
        }


@dataclass(eq=False)
class Line(Primitive):
    tag: ClassVar[str] = "line"

    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0

    @property
    def length(self) -> float:
        return ((self.x2 - self.x1) ** 2 + (self.y2 - self.y1) ** 2) ** 0.5

    def svg_element(self) -> dict[str, Any]:
        return {
            "tag": self.tag,
            "id": self.uid,
            "x1": fmt_number(self.x1),
            "y1": fmt_number(self.y1),
            "x2": fmt_number(self.x2),
            "y2": fmt_number(self.y2),
            **self.style_attributes(),
        }


@dataclass(eq=False)
class Triangle(Primitive):
    """Isosceles triangle centred on (cx, cy); ``angle`` rotates it in degrees."""

    tag: ClassVar[str] = "polygon"

    cx: float = 0.0
    cy: float = 0.0
    size: float = 10.0
    angle: float = 0.0

    def svg_element(self) -> dict[str, Any]:
        pts = triangle_points(self.cx, self.cy, self.size, self.angle)
        return {
            "tag": self.tag,
            "id": self.uid,
            "points": " ".join(f"{fmt_number(x)},{fmt_number(y)}" for x, y in pts),
            **self.style_attributes(),
        }


# Rough glyph advance as a fraction of font size, for sizing text backgrounds.
_GLYPH_WIDTH_RATIO = 0.6


@dataclass(eq=False)
class Text(Primitive):
    """Text label. ``centered`` anchors (x, y) at the text centre, else at top-left."""

    tag: ClassVar[str] = "text"

    x: float = 0.0
    y: float = 0.0
    text: str = ""
    font_size: float = 16.0
    font_family: str = "sans-serif"
    font_weight: str = "normal"
    background: str | None = None
    padding: float = 0.0
    centered: bool = False

    @property
    def box(self) -> tuple[float, float, float, float]:
        """Approximate (x, y, width, height) of the text including padding."""
        w = len(self.text) * self.font_size * _GLYPH_WIDTH_RATIO + 2 * self.padding
        h = self.font_size + 2 * self.padding
        if self.centered:
            return (self.x - w / 2, self.y - h / 2, w, h)
        return (self.x, self.y, w, h)

    def svg_element(self) -> dict[str, Any]:
        bx, by, bw, bh = self.box
        attrs = {
            "tag": self.tag,
            "id": self.uid,
            "x": fmt_number(bx + bw / 2),
            "y": fmt_number(by + bh / 2),
            "font-size": fmt_number(self.font_size),
            "font-family": self.font_family,
            "text-anchor": "middle",
            "dominant-baseline": "central",
            **self.style_attributes(),
            "text": self.text,
        }
        if self.font_weight != "normal":
            attrs["font-weight"] = self.font_weight
        if self.background:
            attrs["background"] = {
                "tag": "rect",
                "x": fmt_number(bx),
                "y": fmt_number(by),
                "width": fmt_number(bw),
                "height": fmt_number(bh),
                "fill": self.background,
                **({"opacity": attrs["opacity"]} if "opacity" in attrs else {}),
            }
        return attrs
