"""DrawingSurface: the minimal capability interface the canvas engine draws on.

Engine code only ever calls add / remove / send_to_back / clear / render, so
any backend (SVG frames, a GUI canvas, a recording fake in tests) can sit
behind it.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from graphboard.exceptions import SurfaceDisposedError
from graphboard.surface.primitives import Primitive

logger = logging.getLogger(__name__)


class DrawingSurface(ABC):
    """Ordered collection of primitives; index 0 is drawn first (bottom)."""

    def __init__(self, width: float = 800.0, height: float = 600.0, background: str = "#1a1a1a") -> None:
        self.width = width
        self.height = height
        self.default_background = background
        self.background = background
        self._objects: list[Primitive] = []
        self._disposed = False

    @property
    def objects(self) -> tuple[Primitive, ...]:
        return tuple(self._objects)

    @property
    def disposed(self) -> bool:
        return self._disposed

    def _check_alive(self) -> None:
        if self._disposed:
            raise SurfaceDisposedError(f"{type(self).__name__} has been disposed")

    def contains(self, primitive: Primitive) -> bool:
        return any(obj is primitive for obj in self._objects)

    def add(self, *primitives: Primitive) -> None:
        self._check_alive()
        for p in primitives:
            if not self.contains(p):
                self._objects.append(p)

    def remove(self, *primitives: Primitive) -> None:
        """Remove primitives; ones not on the surface are ignored."""
        self._check_alive()
        drop = {id(p) for p in primitives}
        self._objects = [obj for obj in self._objects if id(obj) not in drop]

    def send_to_back(self, primitive: Primitive) -> None:
        self._check_alive()
        if not self.contains(primitive):
            return
        self._objects = [primitive] + [obj for obj in self._objects if obj is not primitive]

    def bring_to_front(self, primitive: Primitive) -> None:
        self._check_alive()
        if not self.contains(primitive):
            return
        self._objects = [obj for obj in self._objects if obj is not primitive] + [primitive]

    def clear(self) -> None:
        """Drop every primitive and restore the initial background."""
        self._check_alive()
        self._objects.clear()
        self.background = self.default_background

    @abstractmethod
    def render(self) -> str:
        """Produce one frame of the current scene."""

    def dispose(self) -> None:
        """Release the surface. Safe to call more than once."""
        if self._disposed:
            logger.debug("%s already disposed, ignoring", type(self).__name__)
            return
        self._disposed = True
        self._objects.clear()
        self._release()
        logger.info("%s disposed", type(self).__name__)

    def _release(self) -> None:
        """Backend-specific teardown hook, called exactly once."""
