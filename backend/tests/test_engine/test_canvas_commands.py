"""Tests for the driver commands run through CanvasEngine."""

from __future__ import annotations

import asyncio
import math

from graphboard.engine.canvas import NOT_INITIALIZED, CanvasEngine
from graphboard.engine.registry import CommandRegistry, CommandSpec
from graphboard.engine.scene import EntityKind
from graphboard.engine.style import (
    ANNOTATION_OFFSETS,
    HIGHLIGHT_STROKE_WIDTH,
    VERTEX_STROKE,
    VERTEX_STROKE_WIDTH,
)
from graphboard.models.commands import ClearParams
from graphboard.surface.primitives import Text, Triangle
from tests.conftest import (
    TRIANGLE_EDGES,
    TRIANGLE_VERTICES,
    RecordingSurface,
    draw_triangle,
    make_canvas,
    make_config,
)


def run(coro):
    return asyncio.run(coro)


# ---------------------------------------------------------------------------
# create-vertex
# ---------------------------------------------------------------------------

class TestCreateVertex:
    def test_create_registers_and_records(self):
        async def scenario():
            canvas, surface = make_canvas()
            result = await canvas.create_vertex("A", 200, 200, "A")
            assert result == "Drew vertex A at (200, 200)"
            assert canvas.scene.exists("A", EntityKind.VERTEX)
            assert canvas.graph.vertex_ids() == ["A"]
            assert len(surface.objects) == 2
            await canvas.scheduler.drain()

        run(scenario())

    def test_duplicate_fails_without_mutation(self):
        async def scenario():
            canvas, surface = make_canvas()
            await canvas.create_vertex("A", 200, 200, "A")
            result = await canvas.create_vertex("A", 500, 500, "other")
            assert result == "Vertex A already exists"
            assert canvas.graph.vertex_count == 1
            assert canvas.graph.get_vertex("A").x == 200
            assert len(surface.objects) == 2
            await canvas.scheduler.drain()

        run(scenario())

    def test_fractional_coordinates_in_message(self):
        async def scenario():
            canvas, _ = make_canvas()
            result = await canvas.create_vertex("v1", 150.5, 80, "start")
            assert result == "Drew vertex start at (150.5, 80)"
            await canvas.scheduler.drain()

        run(scenario())

    def test_fades_in_to_full_opacity(self):
        async def scenario():
            canvas, _ = make_canvas()
            await canvas.create_vertex("A", 200, 200, "A")
            handle = canvas.scene.get("A", EntityKind.VERTEX)
            assert handle.circle.opacity == 0.0
            await canvas.scheduler.drain()
            assert handle.circle.opacity == 1.0
            assert handle.text.opacity == 1.0

        run(scenario())


# ---------------------------------------------------------------------------
# create-edge
# ---------------------------------------------------------------------------

class TestCreateEdge:
    def test_missing_endpoint_lists_available(self):
        async def scenario():
            canvas, _ = make_canvas()
            await canvas.create_vertex("A", 200, 200, "A")
            await canvas.create_vertex("B", 400, 200, "B")
            result = await canvas.create_edge("A", "Z")
            assert result == "Vertices not found. Available: A, B"
            assert canvas.graph.edge_count == 0
            await canvas.scheduler.drain()

        run(scenario())

    def test_edge_succeeds_once(self):
        async def scenario():
            canvas, _ = make_canvas()
            await canvas.create_vertex("A", 200, 200, "A")
            await canvas.create_vertex("B", 400, 200, "B")
            assert await canvas.create_edge("A", "B") == "Drew edge from A to B"
            assert await canvas.create_edge("A", "B") == "Edge from A to B already exists"
            assert canvas.graph.edge_count == 1
            await canvas.scheduler.drain()

        run(scenario())

    def test_reverse_direction_is_a_distinct_edge(self):
        async def scenario():
            canvas, _ = make_canvas()
            await canvas.create_vertex("A", 200, 200, "A")
            await canvas.create_vertex("B", 400, 200, "B")
            assert await canvas.create_edge("A", "B") == "Drew edge from A to B"
            assert await canvas.create_edge("B", "A") == "Drew edge from B to A"
            assert canvas.scene.exists("A|B", EntityKind.EDGE)
            assert canvas.scene.exists("B|A", EntityKind.EDGE)
            assert canvas.graph.edge_count == 2
            await canvas.scheduler.drain()

        run(scenario())

    def test_directed_weighted_message_and_decorations(self):
        async def scenario():
            canvas, surface = make_canvas()
            await canvas.create_vertex("A", 100, 100, "A")
            await canvas.create_vertex("B", 300, 100, "B")
            result = await canvas.create_edge("A", "B", weight=5, directed=True)
            assert result == "Drew directed edge from A to B with weight 5"

            # Decorations are only added once the edge has been drawn.
            assert not any(isinstance(o, Triangle) for o in surface.objects)
            await canvas.scheduler.drain()

            arrows = [o for o in surface.objects if isinstance(o, Triangle)]
            assert len(arrows) == 1
            assert arrows[0].cx == 270  # 30 units before B's centre
            assert arrows[0].cy == 100
            weights = [o for o in surface.objects if isinstance(o, Text) and o.text == "5"]
            assert len(weights) == 1
            assert weights[0].x == 200
            assert weights[0].y == 85

        run(scenario())

    def test_zero_weight_is_reported(self):
        async def scenario():
            canvas, _ = make_canvas()
            await canvas.create_vertex("A", 100, 100, "A")
            await canvas.create_vertex("B", 300, 100, "B")
            assert await canvas.create_edge("A", "B", weight=0) == "Drew edge from A to B with weight 0"
            await canvas.scheduler.drain()

        run(scenario())

    def test_line_is_beneath_vertices_and_spans_endpoints(self):
        async def scenario():
            canvas, surface = make_canvas()
            await canvas.create_vertex("A", 200, 200, "A")
            await canvas.create_vertex("B", 400, 250, "B")
            await canvas.create_edge("A", "B")
            line = canvas.scene.get("A|B", EntityKind.EDGE).line
            assert surface.objects[0] is line
            assert ("send_to_back", line.uid) in surface.calls
            await canvas.scheduler.drain()
            assert (line.x1, line.y1, line.x2, line.y2) == (200, 200, 400, 250)
            assert line.opacity == 1.0

        run(scenario())


# ---------------------------------------------------------------------------
# clear
# ---------------------------------------------------------------------------

class TestClear:
    def test_clear_is_idempotent(self):
        async def scenario():
            canvas, surface = make_canvas()
            await draw_triangle(canvas)
            assert await canvas.clear() == "Canvas cleared successfully"
            assert await canvas.clear() == "Canvas cleared successfully"
            assert canvas.graph.vertex_count == 0
            assert canvas.graph.edge_count == 0
            assert canvas.scene.vertex_count == 0
            assert canvas.scene.edge_count == 0
            await canvas.scheduler.drain()
            assert surface.objects == ()

        run(scenario())

    def test_clear_resets_background(self):
        async def scenario():
            canvas, surface = make_canvas(background="#101010")
            surface.background = "white"
            await canvas.clear()
            assert surface.background == "#101010"

        run(scenario())

    def test_ids_reusable_after_clear(self):
        async def scenario():
            canvas, _ = make_canvas()
            await canvas.create_vertex("A", 200, 200, "A")
            await canvas.clear()
            assert await canvas.create_vertex("A", 300, 300, "A") == "Drew vertex A at (300, 300)"
            await canvas.scheduler.drain()

        run(scenario())


# ---------------------------------------------------------------------------
# annotate / show-formula
# ---------------------------------------------------------------------------

class TestAnnotate:
    def test_unknown_target(self):
        async def scenario():
            canvas, surface = make_canvas()
            assert await canvas.annotate("Q", "degree 2", "top") == "Vertex Q not found"
            assert surface.objects == ()

        run(scenario())

    def test_positions_use_fixed_offsets(self):
        async def scenario():
            canvas, surface = make_canvas()
            await canvas.create_vertex("A", 200, 200, "A")
            for position, (dx, dy) in ANNOTATION_OFFSETS.items():
                result = await canvas.annotate("A", f"note-{position}", position)
                assert result == f"Added annotation note-{position} to A"
                label = surface.objects[-1]
                assert (label.x, label.y) == (200 + dx, 200 + dy)
            await canvas.scheduler.drain()

        run(scenario())

    def test_unknown_position_falls_back_to_top(self):
        async def scenario():
            canvas, surface = make_canvas()
            await canvas.create_vertex("A", 200, 200, "A")
            assert await canvas.annotate("A", "hi", "diagonal") == "Added annotation hi to A"
            label = surface.objects[-1]
            assert (label.x, label.y) == (200, 160)
            await canvas.scheduler.drain()
            assert label.opacity == 1.0

        run(scenario())

    def test_annotations_are_not_registered(self):
        async def scenario():
            canvas, _ = make_canvas()
            await canvas.create_vertex("A", 200, 200, "A")
            await canvas.annotate("A", "hi", "left")
            assert canvas.scene.vertex_count == 1
            assert canvas.scene.edge_count == 0
            await canvas.scheduler.drain()

        run(scenario())


class TestShowFormula:
    def test_formula_needs_no_vertices(self):
        async def scenario():
            canvas, surface = make_canvas()
            result = await canvas.show_formula("V - E + F = 2", 50, 520)
            assert result == "Displayed formula: V - E + F = 2 at (50, 520)"
            formula = surface.objects[-1]
            assert formula.text == "V - E + F = 2"
            assert formula.font_family == "Courier New"
            await canvas.scheduler.drain()
            assert formula.opacity == 1.0

        run(scenario())


# ---------------------------------------------------------------------------
# highlight
# ---------------------------------------------------------------------------

class TestHighlight:
    def test_restyles_then_reverts(self):
        async def scenario():
            canvas, _ = make_canvas()
            await canvas.create_vertex("A", 200, 200, "A")
            await canvas.create_vertex("B", 400, 200, "B")
            result = await canvas.highlight("A,B", "red", 100)
            assert result == "Highlighted 2 vertices for 100ms"

            a = canvas.scene.get("A", EntityKind.VERTEX).circle
            b = canvas.scene.get("B", EntityKind.VERTEX).circle
            assert (a.stroke, a.stroke_width) == ("red", HIGHLIGHT_STROKE_WIDTH)
            assert (b.stroke, b.stroke_width) == ("red", HIGHLIGHT_STROKE_WIDTH)

            # Other commands in between do not affect the reversion.
            await canvas.create_vertex("C", 300, 350, "C")
            await canvas.annotate("A", "visited", "top")

            await asyncio.sleep(0.25)
            assert (a.stroke, a.stroke_width) == (VERTEX_STROKE, VERTEX_STROKE_WIDTH)
            assert (b.stroke, b.stroke_width) == (VERTEX_STROKE, VERTEX_STROKE_WIDTH)
            await canvas.scheduler.drain()

        run(scenario())

    def test_unknown_ids_are_skipped(self):
        async def scenario():
            canvas, _ = make_canvas()
            await canvas.create_vertex("A", 200, 200, "A")
            result = await canvas.highlight(" A , Z ,,", "green", 50)
            assert result == "Highlighted 1 vertices for 50ms"
            assert canvas.scene.get("A", EntityKind.VERTEX).circle.stroke == "green"
            await asyncio.sleep(0.15)

        run(scenario())

    def test_defaults_from_config(self):
        async def scenario():
            canvas, _ = make_canvas(highlight_color="orange", highlight_duration_ms=30)
            await canvas.create_vertex("A", 200, 200, "A")
            assert await canvas.highlight("A") == "Highlighted 1 vertices for 30ms"
            assert canvas.scene.get("A", EntityKind.VERTEX).circle.stroke == "orange"
            await asyncio.sleep(0.12)
            assert canvas.scene.get("A", EntityKind.VERTEX).circle.stroke == VERTEX_STROKE

        run(scenario())

    def test_reversion_after_clear_is_a_noop(self):
        async def scenario():
            canvas, _ = make_canvas()
            await canvas.create_vertex("A", 200, 200, "A")
            await canvas.highlight("A", "red", 50)
            await canvas.clear()

            # Same ID, new entity: the old reversion must leave it alone.
            await canvas.create_vertex("A", 200, 200, "A")
            await canvas.highlight("A", "purple", 5000)
            await asyncio.sleep(0.15)
            circle = canvas.scene.get("A", EntityKind.VERTEX).circle
            assert circle.stroke == "purple"
            await canvas.close()

        run(scenario())

    def test_overlapping_highlights_end_at_first_expiry(self):
        async def scenario():
            canvas, _ = make_canvas()
            await canvas.create_vertex("A", 200, 200, "A")
            await canvas.highlight("A", "red", 50)
            await canvas.highlight("A", "blue", 5000)
            circle = canvas.scene.get("A", EntityKind.VERTEX).circle
            assert circle.stroke == "blue"
            await asyncio.sleep(0.15)
            assert circle.stroke == VERTEX_STROKE
            await canvas.close()

        run(scenario())


# ---------------------------------------------------------------------------
# Driver contract: failures are strings, never exceptions
# ---------------------------------------------------------------------------

class TestExecute:
    def test_not_initialized(self):
        async def scenario():
            canvas = CanvasEngine(make_config())
            assert await canvas.create_vertex("A", 1, 1, "A") == NOT_INITIALIZED
            assert await canvas.clear() == NOT_INITIALIZED
            assert await canvas.highlight("A") == NOT_INITIALIZED
            assert canvas.graph.vertex_count == 0

        run(scenario())

    def test_unknown_command(self):
        async def scenario():
            canvas, _ = make_canvas()
            result = await canvas.execute("move-vertex", {"id": "A"})
            assert result.startswith("Unknown command move-vertex. Available:")
            assert "create-vertex" in result

        run(scenario())

    def test_invalid_arguments(self):
        async def scenario():
            canvas, surface = make_canvas()
            result = await canvas.execute("create-vertex", {"id": "A", "x": "left"})
            assert result.startswith("Invalid arguments for create-vertex:")
            assert canvas.graph.vertex_count == 0
            assert surface.objects == ()

        run(scenario())

    def test_wire_names(self):
        async def scenario():
            canvas, _ = make_canvas()
            await canvas.execute("create-vertex", {"id": "A", "x": 1, "y": 2, "label": "A"})
            await canvas.execute("create-vertex", {"id": "B", "x": 3, "y": 4, "label": "B"})
            assert await canvas.execute("create-edge", {"from": "A", "to": "B"}) == "Drew edge from A to B"
            result = await canvas.execute("highlight", {"elementIds": "A,B"})
            assert result == "Highlighted 2 vertices for 2000ms"
            await canvas.close()

        run(scenario())

    def test_non_finite_numbers_rejected(self):
        async def scenario():
            canvas, surface = make_canvas()
            result = await canvas.execute("create-vertex", {"id": "A", "x": math.nan, "y": 1, "label": "A"})
            assert result.startswith("Invalid arguments for create-vertex:")
            assert canvas.graph.vertex_count == 0

            await canvas.create_vertex("A", 1, 1, "A")
            await canvas.create_vertex("B", 2, 2, "B")
            for weight in (math.nan, math.inf, -math.inf):
                result = await canvas.execute("create-edge", {"from": "A", "to": "B", "weight": weight})
                assert result.startswith("Invalid arguments for create-edge:")
            assert canvas.graph.edge_count == 0
            assert "null" not in canvas.graph.to_json()

            result = await canvas.execute("highlight", {"elementIds": "A", "duration": math.inf})
            assert result.startswith("Invalid arguments for highlight:")
            await canvas.close()

        run(scenario())

    def test_disposed_surface_rejects_commands(self):
        async def scenario():
            canvas, surface = make_canvas()
            await canvas.create_vertex("A", 1, 1, "A")
            surface.dispose()
            result = await canvas.create_vertex("B", 2, 2, "B")
            assert result == NOT_INITIALIZED

        run(scenario())

    def test_handler_crash_is_reported(self):
        async def explode(canvas, params):
            raise RuntimeError("boom")

        registry = CommandRegistry()
        registry.register(CommandSpec(name="explode", fn=explode, params=ClearParams))

        async def scenario():
            canvas = CanvasEngine(make_config(), commands=registry, surface=RecordingSurface())
            assert await canvas.execute("explode") == "Command explode failed: boom"

        run(scenario())


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------

class TestScenarios:
    def test_triangle(self):
        async def scenario():
            canvas, _ = make_canvas()
            results = await draw_triangle(canvas)
            assert all(r.startswith("Drew") for r in results)
            state = canvas.current_state()
            assert [v.id for v in state.vertices] == [v[0] for v in TRIANGLE_VERTICES]
            assert [(e.from_, e.to) for e in state.edges] == TRIANGLE_EDGES
            assert await canvas.create_edge("A", "B") == "Edge from A to B already exists"
            await canvas.scheduler.drain()

        run(scenario())

    def test_snapshot_replay_round_trip(self):
        async def scenario():
            canvas, _ = make_canvas()
            await draw_triangle(canvas)
            await canvas.create_edge("A", "C", weight=3.5, directed=True)
            snapshot = canvas.current_state()

            results = await canvas.restore(snapshot)
            assert results[0] == "Canvas cleared successfully"
            assert all(r.startswith("Drew") for r in results[1:])
            assert canvas.current_state().equivalent_to(snapshot)
            await canvas.scheduler.drain()

        run(scenario())

    def test_read_model_tracks_mutations(self):
        async def scenario():
            canvas, _ = make_canvas()
            await canvas.create_vertex("A", 200, 200, "Start")
            readables = canvas.read_model()
            assert readables[1]["value"] == "A:Start"
            await canvas.create_vertex("B", 400, 200, "B")
            await canvas.create_edge("A", "B", directed=True)
            state_json, listing = (r["value"] for r in canvas.read_model())
            assert listing == "A:Start, B:B"
            assert '"from":"A"' in state_json
            assert '"directed":true' in state_json
            await canvas.scheduler.drain()

        run(scenario())

    def test_snapshot_is_a_copy(self):
        async def scenario():
            canvas, _ = make_canvas()
            await canvas.create_vertex("A", 200, 200, "A")
            snapshot = canvas.current_state()
            snapshot.vertices.clear()
            assert canvas.graph.vertex_count == 1
            await canvas.scheduler.drain()

        run(scenario())


class TestLifecycle:
    def test_close_releases_surface_once(self):
        async def scenario():
            canvas, surface = make_canvas()
            await canvas.create_vertex("A", 200, 200, "A")
            await canvas.close()
            await canvas.close()
            surface.dispose()
            assert surface.release_count == 1
            assert await canvas.create_vertex("B", 1, 1, "B") == NOT_INITIALIZED

        run(scenario())
