"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    graphboard_env: str = "development"
    graphboard_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Canvas
    canvas_width: int = 800
    canvas_height: int = 600
    canvas_background: str = "#1a1a1a"

    # Animation timings (milliseconds)
    frame_interval_ms: float = 16.0
    vertex_fade_ms: float = 500.0
    annotation_fade_ms: float = 300.0
    formula_fade_ms: float = 400.0
    edge_settle_ms: float = 150.0
    edge_draw_ms: float = 600.0
    animate_edges: bool = True

    # Highlight defaults
    highlight_color: str = "yellow"
    highlight_duration_ms: float = 2000.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
