"""SvgSurface: renders each frame of the scene to SVG markup."""

from __future__ import annotations

from graphboard.surface.base import DrawingSurface
from graphboard.surface.serializer import serialize_svg


class SvgSurface(DrawingSurface):
    """Drawing surface whose frames are SVG documents.

    ``last_frame`` always holds the most recent render so HTTP clients can
    poll it without forcing a new frame.
    """

    def __init__(self, width: float = 800.0, height: float = 600.0, background: str = "#1a1a1a") -> None:
        super().__init__(width, height, background)
        self.frame_count = 0
        self.last_frame = ""

    def render(self) -> str:
        self._check_alive()
        elements = [obj.svg_element() for obj in self._objects]
        self.last_frame = serialize_svg(elements, self.width, self.height, background=self.background)
        self.frame_count += 1
        return self.last_frame

    def snapshot(self) -> str:
        """Latest frame, rendering one first if nothing has been drawn yet."""
        if not self.last_frame:
            return self.render()
        return self.last_frame
