"""Configuration schema for layout files.

A layout file describes a cabinet (as entered in the cabinet form) and a
sequence of scripted drags, each a part kind and the cursor points it is
dragged through.

Example:
    {
      "schema_version": "1.0",
      "cabinet": {"width_cm": 200, "height_cm": 220, "depth_cm": 60},
      "placements": [
        {"kind": "shelf-vertical", "path": [[0.0, 1.1, 0.0]]},
        {"kind": "drawer", "path": [[0.5, 0.3, 0.0]]}
      ]
    }
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from cabinet_composer.domain.constants import DEFAULT_WALL_THICKNESS
from cabinet_composer.domain.value_objects import PartitionKind

# Supported schema versions for layout files
# Version 1.0: Cabinet form values and scripted placements
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class CabinetConfig(BaseModel):
    """Cabinet form values.

    Attributes:
        width_cm: Overall width in centimetres (20 to 500)
        height_cm: Overall height in centimetres (20 to 400)
        depth_cm: Overall depth in centimetres (10 to 150)
        color: Carcass color as "#RRGGBB"
        wall_thickness: Wall thickness in meters (0 to 0.1)
    """

    model_config = ConfigDict(extra="forbid")

    width_cm: float = Field(..., ge=20.0, le=500.0)
    height_cm: float = Field(..., ge=20.0, le=400.0)
    depth_cm: float = Field(..., ge=10.0, le=150.0)
    color: str = Field(default="#8B4513", pattern=r"^#[0-9a-fA-F]{6}$")
    wall_thickness: float = Field(default=DEFAULT_WALL_THICKNESS, ge=0.0, le=0.1)


class PlacementConfig(BaseModel):
    """One scripted drag.

    Attributes:
        kind: Part to place ("shelf-horizontal", "shelf-vertical", "drawer")
        path: Cursor points in meters, in cabinet-local coordinates
    """

    model_config = ConfigDict(extra="forbid")

    kind: PartitionKind
    path: list[tuple[float, float, float]] = Field(..., min_length=1)


class LayoutConfiguration(BaseModel):
    """Root configuration model for layout files."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0")
    cabinet: CabinetConfig
    placements: list[PlacementConfig] = Field(default_factory=list, max_length=200)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        """Ensure the schema version is supported."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v
