"""Value objects for the cabinet layout domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .constants import (
    DRAWER_FINISH_COLOR,
    DRAWER_HEIGHT,
    SHELF_FINISH_COLOR,
    SHELF_THICKNESS,
)


class OrientationClass(str, Enum):
    """Which in-plane axis a partition occupies.

    Horizontal-spanning parts (shelves, drawers) run along x and are
    free-fit in width between vertical neighbours. Vertical-spanning parts
    run along y and are free-fit in height between horizontal neighbours.
    """

    HORIZONTAL_SPANNING = "horizontal_spanning"
    VERTICAL_SPANNING = "vertical_spanning"


class PartitionKind(str, Enum):
    """Kinds of interior parts, valued by their UI selection token."""

    HORIZONTAL_SHELF = "shelf-horizontal"
    VERTICAL_SHELF = "shelf-vertical"
    DRAWER = "drawer"

    @property
    def orientation(self) -> OrientationClass:
        if self is PartitionKind.VERTICAL_SHELF:
            return OrientationClass.VERTICAL_SPANNING
        return OrientationClass.HORIZONTAL_SPANNING

    @property
    def thickness(self) -> float:
        """Nominal cross-section thickness of the part."""
        if self is PartitionKind.DRAWER:
            return DRAWER_HEIGHT
        return SHELF_THICKNESS

    @property
    def display_name(self) -> str:
        return {
            PartitionKind.HORIZONTAL_SHELF: "Horizontal shelf",
            PartitionKind.VERTICAL_SHELF: "Vertical shelf",
            PartitionKind.DRAWER: "Drawer",
        }[self]

    @property
    def finish_color(self) -> int:
        """Color of the committed part."""
        if self is PartitionKind.DRAWER:
            return DRAWER_FINISH_COLOR
        return SHELF_FINISH_COLOR


class InteractionState(str, Enum):
    """States of a layout session."""

    IDLE = "idle"
    TYPE_SELECTED = "type_selected"
    DRAGGING = "dragging"


@dataclass(frozen=True)
class Point3D:
    """Point in cabinet-local space.

    Origin is the cabinet's horizontal center on the floor, so x and z are
    negative on the left and back halves.
    """

    x: float
    y: float
    z: float = 0.0

    def with_x(self, x: float) -> "Point3D":
        return Point3D(x, self.y, self.z)

    def with_y(self, y: float) -> "Point3D":
        return Point3D(self.x, y, self.z)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Size3D:
    """Full extents of a box along x, y and z."""

    width: float
    height: float
    depth: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.depth <= 0:
            raise ValueError("All dimensions must be positive")

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.width, self.height, self.depth)


@dataclass(frozen=True)
class Interval:
    """A one-dimensional span whose ends may be absent.

    ``None`` on either end means no neighbour bounds that side. Callers
    resolve absent ends against the cabinet interior with :meth:`resolve`.
    """

    lower: float | None = None
    upper: float | None = None

    @property
    def is_unbounded(self) -> bool:
        return self.lower is None and self.upper is None

    def resolve(self, default_lower: float, default_upper: float) -> tuple[float, float]:
        """Return concrete ends, filling absent ones with the defaults."""
        lower = default_lower if self.lower is None else self.lower
        upper = default_upper if self.upper is None else self.upper
        return lower, upper

    def tighten_lower(self, value: float) -> "Interval":
        """Raise the lower end to ``value`` if it is closer."""
        if self.lower is None or value > self.lower:
            return Interval(value, self.upper)
        return self

    def tighten_upper(self, value: float) -> "Interval":
        """Lower the upper end to ``value`` if it is closer."""
        if self.upper is None or value < self.upper:
            return Interval(self.lower, value)
        return self
