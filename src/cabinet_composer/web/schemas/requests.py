"""Pydantic request schemas for the REST API."""

from pydantic import BaseModel, Field

from cabinet_composer.domain import PartitionKind


class CabinetFormRequest(BaseModel):
    """Cabinet form values, dimensions in centimetres."""

    width_cm: float = Field(default=200.0, gt=0, le=500.0, description="Width in cm")
    height_cm: float = Field(default=220.0, gt=0, le=400.0, description="Height in cm")
    depth_cm: float = Field(default=60.0, gt=0, le=150.0, description="Depth in cm")
    color: str = Field(
        default="#8B4513", pattern=r"^#[0-9a-fA-F]{6}$", description="Carcass color"
    )
    wall_thickness: float = Field(
        default=0.02, ge=0.0, le=0.1, description="Wall thickness in meters"
    )


class CreateSessionRequest(BaseModel):
    """Request for opening a layout session."""

    cabinet: CabinetFormRequest | None = Field(
        default=None, description="Cabinet to build immediately (optional)"
    )


class SelectRequest(BaseModel):
    """Request for selecting the part to place."""

    kind: PartitionKind = Field(..., description="Part kind token")


class PointerMoveRequest(BaseModel):
    """Cursor position projected onto the cabinet's mid-plane, in meters."""

    x: float = Field(..., description="x from the cabinet center")
    y: float = Field(..., description="y from the floor")
    z: float = Field(default=0.0, description="z from the cabinet center")
