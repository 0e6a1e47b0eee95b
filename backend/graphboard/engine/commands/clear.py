"""clear: wipe the canvas, the scene registry and the graph."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from graphboard.engine.registry import command
from graphboard.models.commands import ClearParams

if TYPE_CHECKING:
    from graphboard.engine.canvas import CanvasEngine

logger = logging.getLogger(__name__)


@command(
    name="clear",
    params=ClearParams,
    description="Clear all elements from the canvas to start fresh",
)
async def clear(canvas: CanvasEngine, params: ClearParams) -> str:
    removed = (canvas.graph.vertex_count, canvas.graph.edge_count)
    canvas.surface.clear()
    canvas.surface.background = canvas.config.background
    canvas.scene.unregister_all()
    canvas.graph.reset()
    canvas.surface.render()
    logger.info("Canvas cleared (%d vertices, %d edges removed)", *removed)
    return "Canvas cleared successfully"
