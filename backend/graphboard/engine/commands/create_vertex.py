"""create-vertex: add a labelled vertex that fades in."""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphboard.engine import style
from graphboard.engine.animation import Channel, FadeIn
from graphboard.engine.registry import command
from graphboard.engine.scene import EntityKind, VertexHandle
from graphboard.models.commands import CreateVertexParams
from graphboard.models.graph import Vertex
from graphboard.surface.primitives import Circle, Text, fmt_number

if TYPE_CHECKING:
    from graphboard.engine.canvas import CanvasEngine


@command(
    name="create-vertex",
    params=CreateVertexParams,
    description="Draw a vertex (node) on the canvas at specified coordinates. Canvas is 800x600.",
)
async def create_vertex(canvas: CanvasEngine, params: CreateVertexParams) -> str:
    if canvas.scene.exists(params.id, EntityKind.VERTEX):
        return f"Vertex {params.id} already exists"

    circle = Circle(
        cx=params.x,
        cy=params.y,
        radius=style.VERTEX_RADIUS,
        stroke=style.VERTEX_STROKE,
        stroke_width=style.VERTEX_STROKE_WIDTH,
        fill=style.VERTEX_FILL,
        opacity=0.0,
    )
    label = Text(
        x=params.x,
        y=params.y,
        text=params.label,
        font_size=style.VERTEX_LABEL_SIZE,
        fill=style.VERTEX_LABEL_FILL,
        font_weight="bold",
        centered=True,
        opacity=0.0,
    )
    handle = VertexHandle(
        circle=circle,
        text=label,
        base_stroke=style.VERTEX_STROKE,
        base_stroke_width=style.VERTEX_STROKE_WIDTH,
    )

    canvas.surface.add(circle, label)
    canvas.scene.register(params.id, handle, EntityKind.VERTEX)
    canvas.graph.add_vertex(Vertex(id=params.id, x=params.x, y=params.y, label=params.label))

    gate = canvas.scheduler.expect(params.id)
    canvas.scheduler.enqueue(
        FadeIn(
            handle.primitives,
            canvas.config.vertex_fade_ms,
            channel=Channel.VERTEX,
            is_live=canvas.liveness(params.id, EntityKind.VERTEX),
            gate=gate,
            description=f"vertex {params.id}",
        )
    )

    return f"Drew vertex {params.label} at ({fmt_number(params.x)}, {fmt_number(params.y)})"
