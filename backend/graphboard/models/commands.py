"""Parameter schemas for the driver-facing commands.

Field names and aliases are the wire contract: the driver sends ``from``,
``elementIds`` and friends exactly as they appear in the JSON schema.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

ANNOTATION_POSITIONS = ("top", "bottom", "left", "right")


class CommandParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", allow_inf_nan=False)


class CreateVertexParams(CommandParams):
    id: str = Field(..., description="Unique identifier for the vertex (e.g., A, B, C, v1, v2)")
    x: float = Field(..., description="X coordinate position (canvas is 800 wide)")
    y: float = Field(..., description="Y coordinate position (canvas is 600 high)")
    label: str = Field(..., description="Display label for the vertex (typically same as id)")


class CreateEdgeParams(CommandParams):
    from_: str = Field(..., alias="from", description="ID of source vertex (must exist on canvas)")
    to: str = Field(..., description="ID of destination vertex (must exist on canvas)")
    weight: float | None = Field(default=None, description="Optional numeric weight for weighted graphs")
    directed: bool = Field(default=False, description="Draw an arrowhead at the destination")


class ClearParams(CommandParams):
    pass


class AnnotateParams(CommandParams):
    target: str = Field(..., description="ID of vertex to annotate")
    text: str = Field(..., description="Annotation text to display")
    # Plain str so an unrecognised value can fall back to "top" instead of failing.
    position: str = Field(
        ...,
        description="Position relative to vertex",
        json_schema_extra={"enum": list(ANNOTATION_POSITIONS)},
    )


class ShowFormulaParams(CommandParams):
    latex: str = Field(..., description='Formula text (e.g., "V - E + F = 2")')
    x: float = Field(..., description="X coordinate for formula position")
    y: float = Field(..., description="Y coordinate for formula position")


class HighlightParams(CommandParams):
    element_ids: str = Field(
        ...,
        alias="elementIds",
        description='Comma-separated vertex IDs to highlight (e.g., "A,B,C")',
    )
    # None means "use the configured default" (yellow / 2000ms out of the box).
    color: str | None = Field(default=None, description="Highlight color (default yellow)")
    duration: float | None = Field(default=None, ge=0, description="Duration in milliseconds (default 2000)")
