"""Unit tests for domain value objects.

These tests verify:
- PartitionKind orientation, thickness, names and colors
- Point3D and Size3D creation and validation
- Interval tightening and resolution of absent ends
"""

import pytest

from cabinet_composer.domain.value_objects import (
    InteractionState,
    Interval,
    OrientationClass,
    PartitionKind,
    Point3D,
    Size3D,
)


class TestPartitionKind:
    """Tests for PartitionKind enum."""

    def test_values_match_selection_tokens(self) -> None:
        assert PartitionKind("shelf-horizontal") is PartitionKind.HORIZONTAL_SHELF
        assert PartitionKind("shelf-vertical") is PartitionKind.VERTICAL_SHELF
        assert PartitionKind("drawer") is PartitionKind.DRAWER

    def test_unknown_token_raises(self) -> None:
        with pytest.raises(ValueError):
            PartitionKind("cupboard")

    @pytest.mark.parametrize(
        "kind,orientation",
        [
            (PartitionKind.HORIZONTAL_SHELF, OrientationClass.HORIZONTAL_SPANNING),
            (PartitionKind.DRAWER, OrientationClass.HORIZONTAL_SPANNING),
            (PartitionKind.VERTICAL_SHELF, OrientationClass.VERTICAL_SPANNING),
        ],
    )
    def test_orientation(self, kind: PartitionKind, orientation: OrientationClass) -> None:
        assert kind.orientation is orientation

    def test_thickness(self) -> None:
        assert PartitionKind.HORIZONTAL_SHELF.thickness == pytest.approx(0.02)
        assert PartitionKind.VERTICAL_SHELF.thickness == pytest.approx(0.02)
        assert PartitionKind.DRAWER.thickness == pytest.approx(0.15)

    def test_display_names(self) -> None:
        assert PartitionKind.HORIZONTAL_SHELF.display_name == "Horizontal shelf"
        assert PartitionKind.VERTICAL_SHELF.display_name == "Vertical shelf"
        assert PartitionKind.DRAWER.display_name == "Drawer"

    def test_finish_colors(self) -> None:
        assert PartitionKind.HORIZONTAL_SHELF.finish_color == 0xDEB887
        assert PartitionKind.VERTICAL_SHELF.finish_color == 0xDEB887
        assert PartitionKind.DRAWER.finish_color == 0xF5F5DC


class TestInteractionState:
    def test_string_values(self) -> None:
        assert InteractionState.IDLE.value == "idle"
        assert InteractionState.TYPE_SELECTED.value == "type_selected"
        assert InteractionState.DRAGGING.value == "dragging"


class TestPoint3D:
    """Tests for Point3D value object."""

    def test_z_defaults_to_zero(self) -> None:
        point = Point3D(1.0, 2.0)
        assert point.z == 0.0

    def test_with_x_and_with_y_return_new_points(self) -> None:
        point = Point3D(1.0, 2.0, 3.0)
        assert point.with_x(5.0) == Point3D(5.0, 2.0, 3.0)
        assert point.with_y(5.0) == Point3D(1.0, 5.0, 3.0)
        assert point == Point3D(1.0, 2.0, 3.0)

    def test_as_tuple(self) -> None:
        assert Point3D(1.0, 2.0, 3.0).as_tuple() == (1.0, 2.0, 3.0)

    def test_is_immutable(self) -> None:
        point = Point3D(1.0, 2.0)
        with pytest.raises(AttributeError):
            point.x = 3.0  # type: ignore[misc]


class TestSize3D:
    """Tests for Size3D value object."""

    def test_valid_creation(self) -> None:
        size = Size3D(1.0, 0.02, 0.56)
        assert size.as_tuple() == (1.0, 0.02, 0.56)

    @pytest.mark.parametrize("dims", [(0, 1, 1), (1, -1, 1), (1, 1, 0)])
    def test_non_positive_dimension_raises(self, dims: tuple[float, float, float]) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            Size3D(*dims)


class TestInterval:
    """Tests for Interval with absent ends."""

    def test_default_is_unbounded(self) -> None:
        assert Interval().is_unbounded is True
        assert Interval(lower=0.0).is_unbounded is False

    def test_resolve_fills_absent_ends(self) -> None:
        assert Interval().resolve(-1.0, 1.0) == (-1.0, 1.0)
        assert Interval(lower=0.0).resolve(-1.0, 1.0) == (0.0, 1.0)
        assert Interval(upper=0.5).resolve(-1.0, 1.0) == (-1.0, 0.5)

    def test_zero_bound_is_not_absent(self) -> None:
        """A bound at 0.0 must not be mistaken for a missing bound."""
        assert Interval(lower=0.0, upper=0.0).resolve(-1.0, 1.0) == (0.0, 0.0)

    def test_tighten_lower_keeps_closest(self) -> None:
        span = Interval().tighten_lower(-0.5).tighten_lower(-0.8).tighten_lower(-0.2)
        assert span.lower == -0.2

    def test_tighten_upper_keeps_closest(self) -> None:
        span = Interval().tighten_upper(0.5).tighten_upper(0.8).tighten_upper(0.2)
        assert span.upper == 0.2
