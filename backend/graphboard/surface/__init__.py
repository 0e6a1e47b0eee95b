"""Drawing surfaces and the primitives drawn on them."""

from graphboard.surface.base import DrawingSurface
from graphboard.surface.primitives import Circle, Line, Primitive, Text, Triangle
from graphboard.surface.svg_surface import SvgSurface

__all__ = [
    "DrawingSurface",
    "SvgSurface",
    "Primitive",
    "Circle",
    "Line",
    "Text",
    "Triangle",
]
