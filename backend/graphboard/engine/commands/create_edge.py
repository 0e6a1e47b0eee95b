"""create-edge: connect two existing vertices, optionally weighted and/or directed."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from graphboard.engine import style
from graphboard.engine.animation import EdgeDraw
from graphboard.engine.registry import command
from graphboard.engine.scene import EdgeHandle, EntityKind
from graphboard.models.commands import CreateEdgeParams
from graphboard.models.graph import Edge, edge_key
from graphboard.surface.primitives import Line, Primitive, Text, Triangle, fmt_number
from graphboard.utils.geometry import arrowhead_pose, as_point, midpoint

if TYPE_CHECKING:
    from graphboard.engine.canvas import CanvasEngine

logger = logging.getLogger(__name__)


@command(
    name="create-edge",
    params=CreateEdgeParams,
    description=(
        "Draw an edge (connection line) between two existing vertices. "
        "Both vertices must already exist on the canvas."
    ),
)
async def create_edge(canvas: CanvasEngine, params: CreateEdgeParams) -> str:
    src = canvas.graph.get_vertex(params.from_)
    dst = canvas.graph.get_vertex(params.to)
    if src is None or dst is None:
        logger.debug("create-edge %s -> %s rejected: missing endpoint", params.from_, params.to)
        return f"Vertices not found. Available: {', '.join(canvas.graph.vertex_ids())}"

    key = edge_key(params.from_, params.to)
    if canvas.scene.exists(key, EntityKind.EDGE):
        return f"Edge from {params.from_} to {params.to} already exists"

    # Endpoints are snapshotted here; the line never re-reads vertex positions.
    start = (src.x, src.y)
    end = (dst.x, dst.y)
    p0, p1 = as_point(*start), as_point(*end)

    # Starts collapsed and invisible; the edge animation reveals it.
    line = Line(
        x1=src.x,
        y1=src.y,
        x2=src.x,
        y2=src.y,
        stroke=style.EDGE_STROKE,
        stroke_width=style.EDGE_STROKE_WIDTH,
        opacity=0.0,
    )

    decorations: list[Primitive] = []
    if params.directed:
        ax, ay, angle = arrowhead_pose(p0, p1, style.ARROW_SETBACK)
        decorations.append(Triangle(cx=ax, cy=ay, size=style.ARROW_SIZE, angle=angle, fill=style.EDGE_STROKE))
    if params.weight is not None:
        mx, my = midpoint(p0, p1)
        decorations.append(
            Text(
                x=mx,
                y=my - style.WEIGHT_LABEL_LIFT,
                text=fmt_number(params.weight),
                font_size=style.WEIGHT_LABEL_SIZE,
                fill=style.ACCENT_FILL,
                background=style.PANEL_BACKGROUND,
                padding=style.WEIGHT_LABEL_PADDING,
                centered=True,
            )
        )

    canvas.surface.add(line)
    # Edges sit beneath every vertex.
    canvas.surface.send_to_back(line)
    canvas.scene.register(key, EdgeHandle(line=line, start=start, end=end), EntityKind.EDGE)
    canvas.graph.add_edge(Edge(from_=params.from_, to=params.to, weight=params.weight, directed=params.directed))

    canvas.scheduler.enqueue(
        EdgeDraw(
            line,
            start,
            end,
            decorations=decorations,
            waits_for=(params.from_, params.to),
            is_live=canvas.liveness(key, EntityKind.EDGE),
            animated=canvas.config.animate_edges,
            settle_ms=canvas.config.edge_settle_ms,
            draw_ms=canvas.config.edge_draw_ms,
            description=f"edge {key}",
        )
    )

    kind = "directed " if params.directed else ""
    suffix = f" with weight {fmt_number(params.weight)}" if params.weight is not None else ""
    return f"Drew {kind}edge from {params.from_} to {params.to}{suffix}"
