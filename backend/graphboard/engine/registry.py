"""Command registry: every driver command is a coroutine registered via decorator.

Usage:
    @command(name="create-vertex", params=CreateVertexParams, description="Draw a vertex")
    async def create_vertex(canvas: CanvasEngine, params: CreateVertexParams) -> str:
        ...
        return f"Drew vertex {params.label} at ..."

Adding a new command = creating one module under ``engine/commands`` with the
decorator. Nothing else changes.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from graphboard.models.commands import CommandParams

if TYPE_CHECKING:
    from graphboard.engine.canvas import CanvasEngine

logger = logging.getLogger(__name__)

CommandFn = Callable[["CanvasEngine", Any], Awaitable[str]]


@dataclass
class CommandSpec:
    name: str
    fn: CommandFn
    params: type[CommandParams]
    description: str = ""

    def parameters_schema(self) -> dict[str, Any]:
        """JSON schema of the parameters, using wire names (``from``, ``elementIds``)."""
        return self.params.model_json_schema(by_alias=True)


class CommandRegistry:
    """Name → CommandSpec, in registration order."""

    def __init__(self) -> None:
        self._commands: dict[str, CommandSpec] = {}

    def register(self, spec: CommandSpec) -> None:
        if spec.name in self._commands:
            raise ValueError(f"Duplicate command name: {spec.name}")
        self._commands[spec.name] = spec
        logger.debug("Registered command %s", spec.name)

    def get(self, name: str) -> CommandSpec:
        return self._commands[name]

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def names(self) -> list[str]:
        return list(self._commands)

    def all(self) -> list[CommandSpec]:
        return list(self._commands.values())

    @property
    def count(self) -> int:
        return len(self._commands)


# Module-level singleton
_registry = CommandRegistry()


def get_registry() -> CommandRegistry:
    return _registry


def command(
    *,
    name: str,
    params: type[CommandParams],
    description: str = "",
):
    """Decorator to register a command handler."""

    def decorator(fn: CommandFn) -> CommandFn:
        _registry.register(CommandSpec(name=name, fn=fn, params=params, description=description))
        return fn

    return decorator
