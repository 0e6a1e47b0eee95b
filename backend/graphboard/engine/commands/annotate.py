"""annotate: fading text label next to a vertex.

Annotations are not tracked in the scene registry; only ``clear`` removes them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphboard.engine import style
from graphboard.engine.animation import Channel, FadeIn
from graphboard.engine.registry import command
from graphboard.models.commands import AnnotateParams
from graphboard.surface.primitives import Text

if TYPE_CHECKING:
    from graphboard.engine.canvas import CanvasEngine


def resolve_position(position: str) -> str:
    """Known positions pass through; anything else falls back to the default."""
    normalized = position.strip().lower()
    if normalized in style.ANNOTATION_OFFSETS:
        return normalized
    return style.DEFAULT_ANNOTATION_POSITION


@command(
    name="annotate",
    params=AnnotateParams,
    description=(
        "Add text annotation near a vertex to explain concepts, show properties "
        "(degree, distance, color), or highlight important information"
    ),
)
async def annotate(canvas: CanvasEngine, params: AnnotateParams) -> str:
    vertex = canvas.graph.get_vertex(params.target)
    if vertex is None:
        return f"Vertex {params.target} not found"

    dx, dy = style.ANNOTATION_OFFSETS[resolve_position(params.position)]
    label = Text(
        x=vertex.x + dx,
        y=vertex.y + dy,
        text=params.text,
        font_size=style.ANNOTATION_SIZE,
        fill=style.ACCENT_FILL,
        background=style.PANEL_BACKGROUND,
        padding=style.ANNOTATION_PADDING,
        opacity=0.0,
    )
    canvas.surface.add(label)
    canvas.scheduler.enqueue(
        FadeIn(
            [label],
            canvas.config.annotation_fade_ms,
            channel=Channel.OVERLAY,
            is_live=canvas.on_surface(label),
            description=f"annotation on {params.target}",
        )
    )
    return f"Added annotation {params.text} to {params.target}"
