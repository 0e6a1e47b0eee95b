"""Shared test helpers."""

from __future__ import annotations

from collections.abc import Callable

from graphboard.engine.canvas import CanvasEngine
from graphboard.engine.config import CanvasConfig
from graphboard.surface.primitives import Primitive
from graphboard.surface.svg_surface import SvgSurface


# Millisecond-scale timings so animation scenarios finish quickly.
FAST_TIMINGS = dict(
    frame_interval_ms=1.0,
    vertex_fade_ms=5.0,
    annotation_fade_ms=5.0,
    formula_fade_ms=5.0,
    edge_settle_ms=1.0,
    edge_draw_ms=5.0,
)

# The triangle from the teaching walkthrough: A, B, C and edges A-B, B-C, C-A.
TRIANGLE_VERTICES = [
    ("A", 200, 200, "A"),
    ("B", 400, 200, "B"),
    ("C", 300, 350, "C"),
]
TRIANGLE_EDGES = [("A", "B"), ("B", "C"), ("C", "A")]


class RecordingSurface(SvgSurface):
    """SvgSurface that logs every capability call and runs hooks on each frame."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.calls: list[tuple[str, ...]] = []
        self.frame_hooks: list[Callable[["RecordingSurface"], None]] = []
        self.release_count = 0

    def add(self, *primitives: Primitive) -> None:
        self.calls.append(("add", *(p.uid for p in primitives)))
        super().add(*primitives)

    def remove(self, *primitives: Primitive) -> None:
        self.calls.append(("remove", *(p.uid for p in primitives)))
        super().remove(*primitives)

    def send_to_back(self, primitive: Primitive) -> None:
        self.calls.append(("send_to_back", primitive.uid))
        super().send_to_back(primitive)

    def clear(self) -> None:
        self.calls.append(("clear",))
        super().clear()

    def render(self) -> str:
        frame = super().render()
        for hook in self.frame_hooks:
            hook(self)
        return frame

    def _release(self) -> None:
        self.release_count += 1


def make_config(**overrides) -> CanvasConfig:
    return CanvasConfig(**{**FAST_TIMINGS, **overrides})


def make_canvas(**overrides) -> tuple[CanvasEngine, RecordingSurface]:
    """Engine attached to a fresh recording surface with fast timings."""
    surface = RecordingSurface()
    return CanvasEngine(make_config(**overrides), surface=surface), surface


async def draw_triangle(canvas: CanvasEngine) -> list[str]:
    results = []
    for vid, x, y, label in TRIANGLE_VERTICES:
        results.append(await canvas.create_vertex(vid, x, y, label))
    for a, b in TRIANGLE_EDGES:
        results.append(await canvas.create_edge(a, b))
    return results

