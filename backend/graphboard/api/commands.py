"""GET/POST /api/commands: the driver's command surface."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from graphboard.dependencies import get_canvas
from graphboard.engine.canvas import CanvasEngine
from graphboard.models.responses import CommandInfo, CommandResponse

router = APIRouter(prefix="/commands")
logger = logging.getLogger(__name__)


@router.get("", response_model=list[CommandInfo])
async def list_commands(canvas: CanvasEngine = Depends(get_canvas)) -> list[CommandInfo]:
    return [
        CommandInfo(name=spec.name, description=spec.description, parameters=spec.parameters_schema())
        for spec in canvas.commands.all()
    ]


@router.post("/{name}", response_model=CommandResponse)
async def run_command(
    name: str,
    args: dict[str, Any] | None = Body(default=None),
    canvas: CanvasEngine = Depends(get_canvas),
) -> CommandResponse:
    if name not in canvas.commands:
        raise HTTPException(status_code=404, detail=f"Unknown command {name}")

    result = await canvas.execute(name, args)
    logger.info("POST /commands/%s -> %s", name, result)
    return CommandResponse(
        command=name,
        result=result,
        graph=canvas.current_state(),
        vertex_listing=canvas.graph.vertex_listing(),
    )
