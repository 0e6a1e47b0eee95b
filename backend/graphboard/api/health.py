"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from graphboard.dependencies import get_canvas
from graphboard.engine.canvas import CanvasEngine
from graphboard.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(canvas: CanvasEngine = Depends(get_canvas)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        canvas_ready=canvas.is_ready,
        commands_registered=canvas.commands.count,
    )
