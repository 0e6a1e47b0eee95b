"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Request

from graphboard.config import settings
from graphboard.engine.canvas import CanvasEngine
from graphboard.engine.config import CanvasConfig


def get_canvas(request: Request) -> CanvasEngine:
    """The app's canvas engine; a detached one (every command reports
    "Canvas not initialized") until the lifespan has attached a surface."""
    canvas = getattr(request.app.state, "canvas", None)
    if canvas is None:
        canvas = CanvasEngine(CanvasConfig.from_settings(settings))
        request.app.state.canvas = canvas
    return canvas
