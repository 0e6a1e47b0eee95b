"""CanvasEngine: owns the graph, the scene registry, the animation scheduler and
the drawing surface, and turns named driver commands into result strings.

Driver-facing failures are never exceptions: ``execute`` always returns text.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from graphboard.engine.animation import AnimationScheduler, LivenessCheck
from graphboard.engine.commands import load_builtin_commands
from graphboard.engine.config import CanvasConfig
from graphboard.engine.graph import GraphModel, commands_from_state
from graphboard.engine.registry import CommandRegistry
from graphboard.engine.scene import EntityKind, SceneRegistry
from graphboard.exceptions import GraphboardError
from graphboard.models.graph import GraphState
from graphboard.surface.base import DrawingSurface
from graphboard.surface.primitives import Primitive

logger = logging.getLogger(__name__)

NOT_INITIALIZED = "Canvas not initialized"


def _summarize_validation(err: ValidationError) -> str:
    parts = []
    for e in err.errors():
        loc = ".".join(str(p) for p in e.get("loc", ())) or "arguments"
        parts.append(f"{loc}: {e.get('msg', 'invalid')}")
    return "; ".join(parts)


class CanvasEngine:
    def __init__(
        self,
        config: CanvasConfig | None = None,
        commands: CommandRegistry | None = None,
        surface: DrawingSurface | None = None,
    ) -> None:
        self.config = config or CanvasConfig()
        self.commands = commands or load_builtin_commands()
        self.graph = GraphModel()
        self.scene = SceneRegistry()
        self.scheduler = AnimationScheduler(frame_interval_ms=self.config.frame_interval_ms)
        self._surface: DrawingSurface | None = None
        self._closed = False
        if surface is not None:
            self.attach(surface)

    # --- lifecycle ---

    @property
    def surface(self) -> DrawingSurface:
        if self._surface is None:
            raise GraphboardError(NOT_INITIALIZED)
        return self._surface

    @property
    def is_ready(self) -> bool:
        return self._surface is not None and not self._surface.disposed

    def attach(self, surface: DrawingSurface) -> None:
        """Take exclusive ownership of ``surface``."""
        if self._closed:
            raise GraphboardError("Canvas engine has been closed")
        if self._surface is not None and self._surface is not surface:
            raise GraphboardError("Canvas engine already owns a surface")
        self._surface = surface
        self.scheduler.surface = surface
        surface.background = self.config.background
        surface.render()
        logger.info("Canvas attached (%gx%g)", surface.width, surface.height)

    async def close(self) -> None:
        """Stop animations and release the surface. Repeat calls are no-ops."""
        if self._closed:
            return
        self._closed = True
        await self.scheduler.shutdown()
        surface, self._surface = self._surface, None
        self.scheduler.surface = None
        if surface is not None:
            surface.dispose()
        logger.info("Canvas engine closed")

    # --- liveness checks for deferred work ---

    def liveness(self, key: str, kind: EntityKind) -> LivenessCheck:
        """True while ``key`` is still the same registered entity on a live surface."""
        generation = self.scene.generation
        handle = self.scene.get(key, kind)

        def _live() -> bool:
            return self.is_ready and handle is not None and self.scene.resolve(key, kind, generation) is handle

        return _live

    def on_surface(self, primitive: Primitive) -> LivenessCheck:
        """True while an untracked primitive (annotation, formula) is still drawn."""

        def _live() -> bool:
            return self.is_ready and self.surface.contains(primitive)

        return _live

    # --- driver entry point ---

    async def execute(self, name: str, args: dict[str, Any] | None = None) -> str:
        if not self.is_ready:
            logger.warning("Command %s rejected: canvas not initialized", name)
            return NOT_INITIALIZED

        if name not in self.commands:
            return f"Unknown command {name}. Available: {', '.join(self.commands.names())}"
        spec = self.commands.get(name)

        try:
            params = spec.params.model_validate(args or {})
        except ValidationError as e:
            logger.debug("Command %s rejected arguments %r", name, args)
            return f"Invalid arguments for {name}: {_summarize_validation(e)}"

        try:
            result = await spec.fn(self, params)
        except Exception as e:
            logger.exception("Command %s failed", name)
            return f"Command {name} failed: {e}"

        logger.debug("%s -> %s", name, result)
        return result

    # --- typed convenience wrappers ---

    async def create_vertex(self, id: str, x: float, y: float, label: str) -> str:
        return await self.execute("create-vertex", {"id": id, "x": x, "y": y, "label": label})

    async def create_edge(
        self,
        from_: str,
        to: str,
        weight: float | None = None,
        directed: bool = False,
    ) -> str:
        args: dict[str, Any] = {"from": from_, "to": to, "directed": directed}
        if weight is not None:
            args["weight"] = weight
        return await self.execute("create-edge", args)

    async def clear(self) -> str:
        return await self.execute("clear", {})

    async def annotate(self, target: str, text: str, position: str = "top") -> str:
        return await self.execute("annotate", {"target": target, "text": text, "position": position})

    async def show_formula(self, latex: str, x: float, y: float) -> str:
        return await self.execute("show-formula", {"latex": latex, "x": x, "y": y})

    async def highlight(
        self,
        element_ids: str,
        color: str | None = None,
        duration: float | None = None,
    ) -> str:
        args: dict[str, Any] = {"elementIds": element_ids}
        if color is not None:
            args["color"] = color
        if duration is not None:
            args["duration"] = duration
        return await self.execute("highlight", args)

    async def restore(self, state: GraphState) -> list[str]:
        """Clear the canvas and replay ``state`` through the normal commands."""
        results = [await self.clear()]
        for name, args in commands_from_state(state):
            results.append(await self.execute(name, args))
        return results

    # --- driver read model ---

    def current_state(self) -> GraphState:
        return self.graph.current_state()

    def read_model(self) -> list[dict[str, str]]:
        """Context the driver reads before choosing its next command."""
        return [
            {
                "description": "Current graph state with vertices and edges",
                "value": self.graph.to_json(),
            },
            {
                "description": "List of all vertex IDs and labels",
                "value": self.graph.vertex_listing(),
            },
        ]
