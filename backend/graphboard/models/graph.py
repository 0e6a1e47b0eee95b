"""Graph snapshot models: what the driver sees of the world."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


def edge_key(from_id: str, to_id: str) -> str:
    """Direction-sensitive edge key: A|B and B|A are different edges."""
    return f"{from_id}|{to_id}"


class Vertex(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    id: str
    x: float
    y: float
    label: str


class Edge(BaseModel):
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    from_: str = Field(..., alias="from")
    to: str
    weight: float | None = None
    directed: bool = False

    @property
    def key(self) -> str:
        return edge_key(self.from_, self.to)


class GraphState(BaseModel):
    """Ordered vertices and edges, in creation order."""

    vertices: list[Vertex] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)

    def equivalent_to(self, other: "GraphState") -> bool:
        """Same vertex set and edge set, ignoring insertion order."""
        mine_v = {(v.id, v.x, v.y, v.label) for v in self.vertices}
        theirs_v = {(v.id, v.x, v.y, v.label) for v in other.vertices}
        mine_e = {(e.from_, e.to, e.weight, e.directed) for e in self.edges}
        theirs_e = {(e.from_, e.to, e.weight, e.directed) for e in other.edges}
        return mine_v == theirs_v and mine_e == theirs_e
