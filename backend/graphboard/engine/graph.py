"""GraphModel: the authoritative record of vertices and edges.

Only command handlers mutate it (``add_vertex`` / ``add_edge`` / ``reset``);
everyone else reads snapshots through ``current_state()``.
"""

from __future__ import annotations

from typing import Any

from graphboard.models.graph import Edge, GraphState, Vertex


class GraphModel:
    def __init__(self) -> None:
        self._vertices: list[Vertex] = []
        self._edges: list[Edge] = []

    def current_state(self) -> GraphState:
        """Deep-copied snapshot; mutating it does not touch the model."""
        return GraphState(
            vertices=[v.model_copy() for v in self._vertices],
            edges=[e.model_copy() for e in self._edges],
        )

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def vertex_ids(self) -> list[str]:
        return [v.id for v in self._vertices]

    def get_vertex(self, vertex_id: str) -> Vertex | None:
        for v in self._vertices:
            if v.id == vertex_id:
                return v
        return None

    def vertex_listing(self) -> str:
        """Compact ``id:label`` listing, e.g. ``"A:A, B:B"``."""
        return ", ".join(f"{v.id}:{v.label}" for v in self._vertices)

    def to_json(self) -> str:
        return self.current_state().to_json()

    # --- mutation (command handlers only) ---

    def add_vertex(self, vertex: Vertex) -> None:
        self._vertices.append(vertex)

    def add_edge(self, edge: Edge) -> None:
        self._edges.append(edge)

    def reset(self) -> None:
        self._vertices = []
        self._edges = []


def commands_from_state(state: GraphState) -> list[tuple[str, dict[str, Any]]]:
    """Ordered create-vertex / create-edge calls that rebuild ``state`` on a clear canvas."""
    calls: list[tuple[str, dict[str, Any]]] = []
    for v in state.vertices:
        calls.append(("create-vertex", v.model_dump()))
    for e in state.edges:
        calls.append(("create-edge", e.model_dump(by_alias=True, exclude_none=True)))
    return calls
