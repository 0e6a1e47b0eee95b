"""GraphBoard canvas scene-state engine."""

from graphboard.engine.registry import command, get_registry, CommandRegistry
from graphboard.engine.scene import EntityKind, SceneRegistry
from graphboard.engine.graph import GraphModel
from graphboard.engine.animation import AnimationScheduler, Channel
from graphboard.engine.canvas import CanvasEngine, NOT_INITIALIZED
from graphboard.engine.config import CanvasConfig

__all__ = [
    "command",
    "get_registry",
    "CommandRegistry",
    "EntityKind",
    "SceneRegistry",
    "GraphModel",
    "AnimationScheduler",
    "Channel",
    "CanvasEngine",
    "NOT_INITIALIZED",
    "CanvasConfig",
]
