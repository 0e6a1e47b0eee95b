"""SceneRegistry: logical entity keys → the primitives drawn for them.

Vertex IDs and edge keys live in separate namespaces (``EntityKind``). The
registry is the only source of truth for "does X exist on the canvas" and for
finding primitives to restyle.

Deferred work (animation frames, highlight reversions) must not hold on to
primitives across a clear. It keeps ``(kind, key, generation)`` and calls
``resolve()``; a ``None`` answer just means the entity is gone.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Union

from graphboard.exceptions import DuplicateEntityError
from graphboard.surface.primitives import Circle, Line, Text

logger = logging.getLogger(__name__)


class EntityKind(enum.Enum):
    VERTEX = "vertex"
    EDGE = "edge"


@dataclass(eq=False)
class VertexHandle:
    circle: Circle
    text: Text
    # Outline style at creation; highlight reversion restores these.
    base_stroke: str
    base_stroke_width: float

    @property
    def primitives(self) -> tuple[Circle, Text]:
        return (self.circle, self.text)


@dataclass(eq=False)
class EdgeHandle:
    line: Line
    # Snapshotted endpoint coordinates at creation time.
    start: tuple[float, float]
    end: tuple[float, float]


Handle = Union[VertexHandle, EdgeHandle]


class SceneRegistry:
    def __init__(self) -> None:
        self._entries: dict[EntityKind, dict[str, Handle]] = {kind: {} for kind in EntityKind}
        self._generation = 0

    @property
    def generation(self) -> int:
        """Bumped by every ``unregister_all``; lets deferred callbacks detect a clear."""
        return self._generation

    def exists(self, key: str, kind: EntityKind = EntityKind.VERTEX) -> bool:
        return key in self._entries[kind]

    def get(self, key: str, kind: EntityKind = EntityKind.VERTEX) -> Handle | None:
        return self._entries[kind].get(key)

    def register(self, key: str, handle: Handle, kind: EntityKind = EntityKind.VERTEX) -> None:
        if key in self._entries[kind]:
            raise DuplicateEntityError(f"{kind.value} {key!r} is already registered")
        self._entries[kind][key] = handle
        logger.debug("Registered %s %s", kind.value, key)

    def unregister_all(self) -> None:
        for entries in self._entries.values():
            entries.clear()
        self._generation += 1

    def resolve(self, key: str, kind: EntityKind, generation: int) -> Handle | None:
        """Handle for ``key`` if it still belongs to ``generation``, else None."""
        if generation != self._generation:
            return None
        return self.get(key, kind)

    @property
    def vertex_count(self) -> int:
        return len(self._entries[EntityKind.VERTEX])

    @property
    def edge_count(self) -> int:
        return len(self._entries[EntityKind.EDGE])
