"""Domain entities for cabinet interior layout."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from .constants import (
    DEFAULT_CABINET_COLOR,
    DEFAULT_WALL_THICKNESS,
    DRAWER_DEPTH_RATIO,
)
from .value_objects import (
    Interval,
    OrientationClass,
    PartitionKind,
    Point3D,
    Size3D,
)


@dataclass(frozen=True)
class ShellPanel:
    """One fixed panel of the cabinet carcass (back, sides, top, bottom)."""

    name: str
    size: Size3D
    center: Point3D


@dataclass(frozen=True)
class Cabinet:
    """The outer box whose interior hosts all partitions.

    Attributes:
        width: Overall width in meters (x axis).
        height: Overall height in meters (y axis, floor at y=0).
        depth: Overall depth in meters (z axis, centered on z=0).
        wall_thickness: Thickness of the side walls, floor and ceiling.
        color: Carcass color as a 0xRRGGBB integer.
    """

    width: float
    height: float
    depth: float
    wall_thickness: float = DEFAULT_WALL_THICKNESS
    color: int = DEFAULT_CABINET_COLOR

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.depth <= 0:
            raise ValueError("Cabinet dimensions must be positive")
        if self.wall_thickness < 0:
            raise ValueError("Wall thickness cannot be negative")
        if min(self.width, self.height, self.depth) <= 2 * self.wall_thickness:
            raise ValueError("Walls leave no interior space")

    @property
    def interior_width(self) -> float:
        """Width available between the side walls."""
        return self.width - 2 * self.wall_thickness

    @property
    def interior_height(self) -> float:
        """Height available between floor and ceiling."""
        return self.height - 2 * self.wall_thickness

    @property
    def interior_left(self) -> float:
        return -self.width / 2 + self.wall_thickness

    @property
    def interior_right(self) -> float:
        return self.width / 2 - self.wall_thickness

    @property
    def interior_bottom(self) -> float:
        return self.wall_thickness

    @property
    def interior_top(self) -> float:
        return self.height - self.wall_thickness

    @property
    def interior_back(self) -> float:
        return -self.depth / 2 + self.wall_thickness

    @property
    def interior_front(self) -> float:
        return self.depth / 2 - self.wall_thickness

    @property
    def shelf_depth(self) -> float:
        """Depth of shelves, which fill the space between front and back faces."""
        return self.depth - 2 * self.wall_thickness

    @property
    def drawer_depth(self) -> float:
        return self.depth * DRAWER_DEPTH_RATIO

    def interior_box(self) -> tuple[Interval, Interval, Interval]:
        """Usable interior as (x, y, z) intervals."""
        return (
            Interval(self.interior_left, self.interior_right),
            Interval(self.interior_bottom, self.interior_top),
            Interval(self.interior_back, self.interior_front),
        )

    def depth_for(self, kind: PartitionKind) -> float:
        """Depth of a part of the given kind."""
        if kind is PartitionKind.DRAWER:
            return self.drawer_depth
        return self.shelf_depth

    def shell_panels(self) -> list[ShellPanel]:
        """Get the fixed carcass panels for rendering or export."""
        t = self.wall_thickness
        if t == 0:
            return []
        side = Size3D(t, self.height, self.depth)
        top_bottom = Size3D(self.width, t, self.depth)
        return [
            ShellPanel(
                "back",
                Size3D(self.width, self.height, t),
                Point3D(0.0, self.height / 2, -self.depth / 2 + t / 2),
            ),
            ShellPanel("left", side, Point3D(-self.width / 2 + t / 2, self.height / 2, 0.0)),
            ShellPanel("right", side, Point3D(self.width / 2 - t / 2, self.height / 2, 0.0)),
            ShellPanel("top", top_bottom, Point3D(0.0, self.height, 0.0)),
            ShellPanel("bottom", top_bottom, Point3D(0.0, 0.0, 0.0)),
        ]


@dataclass(frozen=True)
class Partition:
    """A committed shelf or drawer.

    Attributes:
        kind: Which part this is; decides thickness and depth.
        center: Centroid in cabinet-local space.
        size: Full extents along x, y and z.
    """

    kind: PartitionKind
    center: Point3D
    size: Size3D

    @property
    def orientation(self) -> OrientationClass:
        return self.kind.orientation

    @property
    def half_thickness(self) -> float:
        """Half of the nominal thickness used when bounding vertical spans."""
        return self.kind.thickness / 2

    @property
    def min_corner(self) -> Point3D:
        return Point3D(
            self.center.x - self.size.width / 2,
            self.center.y - self.size.height / 2,
            self.center.z - self.size.depth / 2,
        )

    @property
    def max_corner(self) -> Point3D:
        return Point3D(
            self.center.x + self.size.width / 2,
            self.center.y + self.size.height / 2,
            self.center.z + self.size.depth / 2,
        )


@dataclass
class PartitionRegistry:
    """Ordered collection of committed partitions.

    Owned by a single layout session and passed explicitly to the span
    functions. Partitions are only ever appended, or all dropped when the
    cabinet is rebuilt.
    """

    _partitions: list[Partition] = field(default_factory=list)

    def add(self, partition: Partition) -> None:
        self._partitions.append(partition)

    def clear(self) -> None:
        self._partitions.clear()

    def horizontal(self) -> list[Partition]:
        """Horizontal-spanning partitions (shelves and drawers), in order."""
        return [
            p
            for p in self._partitions
            if p.orientation is OrientationClass.HORIZONTAL_SPANNING
        ]

    def vertical(self) -> list[Partition]:
        """Vertical-spanning partitions, in order."""
        return [
            p
            for p in self._partitions
            if p.orientation is OrientationClass.VERTICAL_SPANNING
        ]

    def __iter__(self) -> Iterator[Partition]:
        return iter(list(self._partitions))

    def __len__(self) -> int:
        return len(self._partitions)

    def __getitem__(self, index: int) -> Partition:
        return self._partitions[index]
