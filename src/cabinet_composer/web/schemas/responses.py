"""Pydantic response schemas for the REST API."""

from pydantic import BaseModel, Field

from cabinet_composer.domain import InteractionState, PartitionKind


class VectorSchema(BaseModel):
    """Three components along x, y and z in meters."""

    x: float
    y: float
    z: float


class CabinetSchema(BaseModel):
    """Active cabinet, dimensions in meters."""

    width: float = Field(..., description="Width in meters")
    height: float = Field(..., description="Height in meters")
    depth: float = Field(..., description="Depth in meters")
    wall_thickness: float = Field(..., description="Wall thickness in meters")
    color: str = Field(..., description="Carcass color as #RRGGBB")


class PartitionSchema(BaseModel):
    """A committed part or the preview candidate."""

    kind: PartitionKind
    center: VectorSchema
    size: VectorSchema
    color: str = Field(..., description="Render color as #RRGGBB")


class SessionSchema(BaseModel):
    """Full state of a layout session."""

    session_id: str
    state: InteractionState
    status: str
    navigation_enabled: bool
    cabinet: CabinetSchema | None = None
    candidate: PartitionSchema | None = None
    partitions: list[PartitionSchema] = Field(default_factory=list)


class FrameSchema(BaseModel):
    """Preview geometry and verdict after a pointer move."""

    size: VectorSchema
    position: VectorSchema
    admissible: bool
    preview_color: str
    status: str


class ReleaseSchema(BaseModel):
    """Result of releasing the preview."""

    committed: bool
    partition: PartitionSchema | None = None
    status: str


class SpanSchema(BaseModel):
    """Free spans at a query point."""

    x: float
    y: float
    available_width: float
    available_height: float
