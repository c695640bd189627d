"""Unit tests for Cabinet, Partition and PartitionRegistry."""

import pytest

from cabinet_composer.domain import (
    Cabinet,
    OrientationClass,
    Partition,
    PartitionKind,
    PartitionRegistry,
    Point3D,
    Size3D,
)


class TestCabinet:
    """Tests for Cabinet entity."""

    def test_interior_extents(self, cabinet: Cabinet) -> None:
        assert cabinet.interior_width == pytest.approx(1.96)
        assert cabinet.interior_height == pytest.approx(2.16)
        assert cabinet.interior_left == pytest.approx(-0.98)
        assert cabinet.interior_right == pytest.approx(0.98)
        assert cabinet.interior_bottom == pytest.approx(0.02)
        assert cabinet.interior_top == pytest.approx(2.18)
        assert cabinet.interior_back == pytest.approx(-0.28)
        assert cabinet.interior_front == pytest.approx(0.28)

    def test_part_depths(self, cabinet: Cabinet) -> None:
        assert cabinet.shelf_depth == pytest.approx(0.56)
        assert cabinet.drawer_depth == pytest.approx(0.42)
        assert cabinet.depth_for(PartitionKind.HORIZONTAL_SHELF) == pytest.approx(0.56)
        assert cabinet.depth_for(PartitionKind.VERTICAL_SHELF) == pytest.approx(0.56)
        assert cabinet.depth_for(PartitionKind.DRAWER) == pytest.approx(0.42)

    def test_defaults(self) -> None:
        cabinet = Cabinet(width=1.0, height=1.0, depth=0.5)
        assert cabinet.wall_thickness == 0.02
        assert cabinet.color == 0x8B4513

    def test_interior_box(self, cabinet: Cabinet) -> None:
        x, y, z = cabinet.interior_box()
        assert (x.lower, x.upper) == pytest.approx((-0.98, 0.98))
        assert (y.lower, y.upper) == pytest.approx((0.02, 2.18))
        assert (z.lower, z.upper) == pytest.approx((-0.28, 0.28))

    @pytest.mark.parametrize(
        "width,height,depth", [(0, 2.2, 0.6), (2.0, -1.0, 0.6), (2.0, 2.2, 0)]
    )
    def test_non_positive_dimensions_raise(
        self, width: float, height: float, depth: float
    ) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            Cabinet(width=width, height=height, depth=depth)

    def test_negative_wall_thickness_raises(self) -> None:
        with pytest.raises(ValueError, match="cannot be negative"):
            Cabinet(width=2.0, height=2.2, depth=0.6, wall_thickness=-0.01)

    def test_walls_filling_cabinet_raise(self) -> None:
        with pytest.raises(ValueError, match="no interior space"):
            Cabinet(width=2.0, height=2.2, depth=0.04, wall_thickness=0.02)

    def test_zero_wall_thickness_is_allowed(self) -> None:
        cabinet = Cabinet(width=2.0, height=2.2, depth=0.6, wall_thickness=0.0)
        assert cabinet.interior_width == pytest.approx(2.0)
        assert cabinet.interior_bottom == 0.0
        assert cabinet.shell_panels() == []

    def test_shell_panels(self, cabinet: Cabinet) -> None:
        panels = {panel.name: panel for panel in cabinet.shell_panels()}
        assert set(panels) == {"back", "left", "right", "top", "bottom"}
        assert panels["left"].center.x == pytest.approx(-0.99)
        assert panels["right"].center.x == pytest.approx(0.99)
        assert panels["top"].center.y == pytest.approx(2.2)
        assert panels["bottom"].center.y == pytest.approx(0.0)
        assert panels["back"].center.z == pytest.approx(-0.29)
        assert panels["back"].size.as_tuple() == pytest.approx((2.0, 2.2, 0.02))

    def test_is_immutable(self, cabinet: Cabinet) -> None:
        with pytest.raises(AttributeError):
            cabinet.width = 3.0  # type: ignore[misc]


class TestPartition:
    """Tests for Partition entity."""

    def test_corners(self) -> None:
        partition = Partition(
            kind=PartitionKind.DRAWER,
            center=Point3D(0.1, 0.5, 0.0),
            size=Size3D(0.4, 0.15, 0.42),
        )
        assert partition.min_corner.as_tuple() == pytest.approx((-0.1, 0.425, -0.21))
        assert partition.max_corner.as_tuple() == pytest.approx((0.3, 0.575, 0.21))

    def test_half_thickness_follows_kind(
        self, center_vertical: Partition, middle_shelf: Partition
    ) -> None:
        drawer = Partition(
            kind=PartitionKind.DRAWER,
            center=Point3D(0.0, 0.5, 0.0),
            size=Size3D(1.0, 0.15, 0.42),
        )
        assert middle_shelf.half_thickness == pytest.approx(0.01)
        assert center_vertical.half_thickness == pytest.approx(0.01)
        assert drawer.half_thickness == pytest.approx(0.075)

    def test_orientation(self, center_vertical: Partition, middle_shelf: Partition) -> None:
        assert center_vertical.orientation is OrientationClass.VERTICAL_SPANNING
        assert middle_shelf.orientation is OrientationClass.HORIZONTAL_SPANNING


class TestPartitionRegistry:
    """Tests for PartitionRegistry."""

    def test_starts_empty(self, registry: PartitionRegistry) -> None:
        assert len(registry) == 0
        assert list(registry) == []

    def test_add_preserves_order(
        self,
        registry: PartitionRegistry,
        center_vertical: Partition,
        middle_shelf: Partition,
    ) -> None:
        registry.add(center_vertical)
        registry.add(middle_shelf)
        assert list(registry) == [center_vertical, middle_shelf]
        assert registry[0] is center_vertical

    def test_orientation_views(
        self,
        registry: PartitionRegistry,
        center_vertical: Partition,
        middle_shelf: Partition,
    ) -> None:
        registry.add(center_vertical)
        registry.add(middle_shelf)
        assert registry.vertical() == [center_vertical]
        assert registry.horizontal() == [middle_shelf]

    def test_clear(self, registry: PartitionRegistry, middle_shelf: Partition) -> None:
        registry.add(middle_shelf)
        registry.clear()
        assert len(registry) == 0

    def test_iteration_is_a_snapshot(
        self, registry: PartitionRegistry, middle_shelf: Partition
    ) -> None:
        registry.add(middle_shelf)
        seen = []
        for partition in registry:
            seen.append(partition)
            registry.add(partition)
        assert seen == [middle_shelf]
        assert len(registry) == 2
