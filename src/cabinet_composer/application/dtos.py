"""Data Transfer Objects for the application layer."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from cabinet_composer.domain import (
    Cabinet,
    Partition,
    PartitionKind,
    Point3D,
    Size3D,
)
from cabinet_composer.domain.constants import DEFAULT_WALL_THICKNESS

_HEX_COLOR = re.compile(r"^#?[0-9a-fA-F]{6}$")


class CabinetInputError(ValueError):
    """Raised when form input cannot be turned into a cabinet."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("; ".join(errors))


def parse_color(value: str) -> int:
    """Convert ``"#RRGGBB"`` (or ``"RRGGBB"``) to an integer."""
    if not _HEX_COLOR.match(value):
        raise ValueError(f"Invalid color: {value!r}")
    return int(value.lstrip("#"), 16)


@dataclass
class CabinetInput:
    """Input DTO for the cabinet form, dimensions in centimetres."""

    width_cm: float
    height_cm: float
    depth_cm: float
    color_hex: str = "#8B4513"
    wall_thickness: float = DEFAULT_WALL_THICKNESS

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.width_cm <= 0:
            errors.append("Width must be positive")
        if self.height_cm <= 0:
            errors.append("Height must be positive")
        if self.depth_cm <= 0:
            errors.append("Depth must be positive")
        if self.wall_thickness < 0:
            errors.append("Wall thickness cannot be negative")
        if not _HEX_COLOR.match(self.color_hex):
            errors.append(f"Color must be a hex value like #8B4513, got {self.color_hex!r}")
        if errors:
            return errors
        smallest = min(self.width_cm, self.height_cm, self.depth_cm) / 100
        if smallest <= 2 * self.wall_thickness:
            errors.append("Walls leave no interior space")
        return errors

    def to_cabinet(self) -> Cabinet:
        """Convert to a Cabinet in meters.

        Raises:
            CabinetInputError: If the input does not validate.
        """
        errors = self.validate()
        if errors:
            raise CabinetInputError(errors)
        return Cabinet(
            width=self.width_cm / 100,
            height=self.height_cm / 100,
            depth=self.depth_cm / 100,
            wall_thickness=self.wall_thickness,
            color=parse_color(self.color_hex),
        )


@dataclass(frozen=True)
class FrameUpdate:
    """What the renderer applies to the preview after a pointer move."""

    size: Size3D
    position: Point3D
    admissible: bool
    preview_color: int
    status: str


@dataclass(frozen=True)
class PlacementRequest:
    """One scripted drag: select ``kind``, press, move along ``path``, release."""

    kind: PartitionKind
    path: list[Point3D]


@dataclass(frozen=True)
class PlacementOutcome:
    """Result of replaying one placement request."""

    index: int
    kind: PartitionKind
    committed: bool
    status: str
    partition: Partition | None = None


@dataclass
class LayoutOutput:
    """Output DTO for a replayed layout."""

    cabinet: Cabinet | None
    partitions: list[Partition] = field(default_factory=list)
    outcomes: list[PlacementOutcome] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def rejected(self) -> list[PlacementOutcome]:
        """Placements that were discarded at release."""
        return [o for o in self.outcomes if not o.committed]
