"""GET /api/canvas.svg: the latest rendered frame."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from graphboard.dependencies import get_canvas
from graphboard.engine.canvas import NOT_INITIALIZED, CanvasEngine

router = APIRouter()


@router.get("/canvas.svg")
async def canvas_frame(canvas: CanvasEngine = Depends(get_canvas)) -> Response:
    if not canvas.is_ready:
        raise HTTPException(status_code=503, detail=NOT_INITIALIZED)
    frame = canvas.surface.render()
    return Response(content=frame, media_type="image/svg+xml", headers={"Cache-Control": "no-cache"})
