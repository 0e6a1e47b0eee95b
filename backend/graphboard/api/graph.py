"""GET /api/graph: driver read model; POST /api/graph/restore: replay a snapshot."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from graphboard.dependencies import get_canvas
from graphboard.engine.canvas import CanvasEngine
from graphboard.models.graph import GraphState
from graphboard.models.responses import GraphResponse, Readable, RestoreResponse

router = APIRouter(prefix="/graph")


@router.get("", response_model=GraphResponse)
async def read_graph(canvas: CanvasEngine = Depends(get_canvas)) -> GraphResponse:
    return GraphResponse(
        graph=canvas.current_state(),
        vertex_listing=canvas.graph.vertex_listing(),
        readables=[Readable(**r) for r in canvas.read_model()],
    )


@router.post("/restore", response_model=RestoreResponse)
async def restore_graph(state: GraphState, canvas: CanvasEngine = Depends(get_canvas)) -> RestoreResponse:
    results = await canvas.restore(state)
    return RestoreResponse(results=results, graph=canvas.current_state())
