"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from graphboard.models.graph import GraphState


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    canvas_ready: bool = False
    commands_registered: int = 0


class CommandInfo(BaseModel):
    name: str
    description: str = ""
    parameters: dict[str, Any] = Field(default_factory=dict)


class CommandResponse(BaseModel):
    command: str
    result: str
    graph: GraphState
    vertex_listing: str = ""


class Readable(BaseModel):
    description: str
    value: str


class GraphResponse(BaseModel):
    graph: GraphState
    vertex_listing: str = ""
    readables: list[Readable] = Field(default_factory=list)


class RestoreResponse(BaseModel):
    results: list[str] = Field(default_factory=list)
    graph: GraphState
