"""Canvas engine configuration: canvas size and animation timings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphboard.config import Settings


@dataclass
class CanvasConfig:
    """Controls canvas dimensions and how long each visual effect takes."""

    width: float = 800.0
    height: float = 600.0
    background: str = "#1a1a1a"

    # ~60 fps frame loop
    frame_interval_ms: float = 16.0

    vertex_fade_ms: float = 500.0
    annotation_fade_ms: float = 300.0
    formula_fade_ms: float = 400.0

    # Edge drawing: pause, then a progressive draw with a cursor marker.
    # With animate_edges=False the line and decorations appear in one frame.
    animate_edges: bool = True
    edge_settle_ms: float = 150.0
    edge_draw_ms: float = 600.0

    highlight_color: str = "yellow"
    highlight_duration_ms: float = 2000.0

    @classmethod
    def from_settings(cls, settings: "Settings") -> "CanvasConfig":
        return cls(
            width=settings.canvas_width,
            height=settings.canvas_height,
            background=settings.canvas_background,
            frame_interval_ms=settings.frame_interval_ms,
            vertex_fade_ms=settings.vertex_fade_ms,
            annotation_fade_ms=settings.annotation_fade_ms,
            formula_fade_ms=settings.formula_fade_ms,
            animate_edges=settings.animate_edges,
            edge_settle_ms=settings.edge_settle_ms,
            edge_draw_ms=settings.edge_draw_ms,
            highlight_color=settings.highlight_color,
            highlight_duration_ms=settings.highlight_duration_ms,
        )
