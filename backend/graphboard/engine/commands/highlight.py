"""highlight: temporarily recolour vertex outlines.

Every call schedules its own reversion. A reversion restores the vertex's base
outline, so when two highlights on the same vertex overlap, whichever expires
first ends both.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING

from graphboard.engine import style
from graphboard.engine.registry import command
from graphboard.engine.scene import EntityKind, SceneRegistry, VertexHandle
from graphboard.models.commands import HighlightParams
from graphboard.surface.primitives import fmt_number

if TYPE_CHECKING:
    from graphboard.engine.canvas import CanvasEngine

logger = logging.getLogger(__name__)


def parse_element_ids(element_ids: str) -> list[str]:
    """Split a comma-separated ID list, trimming blanks and dropping repeats."""
    ids = (part.strip() for part in element_ids.split(","))
    return list(dict.fromkeys(i for i in ids if i))


def _revert(scene: SceneRegistry, vertex_ids: list[str], generation: int) -> None:
    for vertex_id in vertex_ids:
        handle = scene.resolve(vertex_id, EntityKind.VERTEX, generation)
        if not isinstance(handle, VertexHandle):
            continue
        handle.circle.set(stroke=handle.base_stroke, stroke_width=handle.base_stroke_width)


@command(
    name="highlight",
    params=HighlightParams,
    description=(
        "Temporarily highlight specific vertices to draw attention during explanations "
        "or show algorithm progression. Pass vertex IDs as a comma-separated string. "
        "Unknown IDs are skipped; the result counts only the vertices that were highlighted."
    ),
)
async def highlight(canvas: CanvasEngine, params: HighlightParams) -> str:
    color = params.color or canvas.config.highlight_color
    duration = params.duration if params.duration is not None else canvas.config.highlight_duration_ms

    highlighted: list[str] = []
    for vertex_id in parse_element_ids(params.element_ids):
        handle = canvas.scene.get(vertex_id, EntityKind.VERTEX)
        if not isinstance(handle, VertexHandle):
            logger.debug("highlight: skipping unknown vertex %r", vertex_id)
            continue
        handle.circle.set(stroke=color, stroke_width=style.HIGHLIGHT_STROKE_WIDTH)
        highlighted.append(vertex_id)

    canvas.surface.render()
    if highlighted:
        canvas.scheduler.call_later(duration, partial(_revert, canvas.scene, highlighted, canvas.scene.generation))

    return f"Highlighted {len(highlighted)} vertices for {fmt_number(duration)}ms"
