"""FastAPI app factory."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from graphboard.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.graphboard_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Own one canvas per app: attach a fresh surface on startup, release it on shutdown."""
    from graphboard.engine.canvas import CanvasEngine
    from graphboard.engine.config import CanvasConfig
    from graphboard.surface.svg_surface import SvgSurface

    config = CanvasConfig.from_settings(settings)
    canvas = CanvasEngine(config)
    canvas.attach(SvgSurface(config.width, config.height, config.background))
    app.state.canvas = canvas
    try:
        yield
    finally:
        await canvas.close()


def create_app() -> FastAPI:
    app = FastAPI(
        title="GraphBoard",
        description="Canvas scene-state engine for agent-driven graph drawing",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all command modules to trigger registration
    _register_commands()

    from graphboard.api.router import api_router

    app.include_router(api_router)

    return app


def _register_commands() -> None:
    """Import all command modules so @command decorators fire."""
    from graphboard.engine.commands import load_builtin_commands

    registry = load_builtin_commands()
    logger.debug("%d canvas commands registered", registry.count)


app = create_app()
