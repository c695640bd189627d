"""Free-span resolution for partitions inside a cabinet.

Given the committed partitions, these functions compute the tightest free
interval along one axis at a query position:

- Width spans (for shelves and drawers) are bounded by vertical shelves
  whose own vertical reach covers the query height.
- Height spans (for vertical shelves) are bounded by shelves and drawers
  whose own horizontal reach covers the query x coordinate.

The reach of an existing partition is itself derived from the partitions of
the other orientation, but only from their raw centers. Constraints are
propagated one hop; there is no iteration to a fixed point.

All functions are pure and take the cabinet and registry explicitly.
"""

from __future__ import annotations

from .constants import MIN_SPAN
from .entities import Cabinet, Partition, PartitionRegistry
from .value_objects import Interval, Point3D

__all__ = [
    "available_height",
    "available_width",
    "free_height_span",
    "free_width_span",
    "horizontal_element_bounds",
    "raw_available_height",
    "raw_available_width",
    "relevant_horizontals",
    "relevant_verticals",
    "vertical_element_bounds",
]


def vertical_element_bounds(
    cabinet: Cabinet, registry: PartitionRegistry, vertical: Partition
) -> tuple[float, float]:
    """Get the vertical reach of a vertical shelf.

    Every horizontal-spanning partition is considered, whatever its x
    extent: the nearest one strictly below the shelf's center caps the
    bottom at its top face, the nearest one strictly above caps the top at
    its bottom face.

    Args:
        cabinet: The cabinet being laid out.
        registry: Committed partitions.
        vertical: A vertical-spanning partition.

    Returns:
        Tuple of (bottom, top) in meters.
    """
    span = Interval()
    for other in registry.horizontal():
        if other.center.y < vertical.center.y:
            span = span.tighten_lower(other.center.y + other.half_thickness)
        if other.center.y > vertical.center.y:
            span = span.tighten_upper(other.center.y - other.half_thickness)
    return span.resolve(cabinet.interior_bottom, cabinet.interior_top)


def horizontal_element_bounds(
    cabinet: Cabinet, registry: PartitionRegistry, horizontal: Partition
) -> tuple[float, float]:
    """Get the horizontal reach of a shelf or drawer.

    Every vertical shelf is considered, whatever its height: the nearest
    one left of the partition's center caps the left end, the nearest one
    to the right caps the right end.

    Returns:
        Tuple of (left, right) in meters.
    """
    span = Interval()
    for other in registry.vertical():
        if other.center.x < horizontal.center.x:
            span = span.tighten_lower(other.center.x)
        if other.center.x > horizontal.center.x:
            span = span.tighten_upper(other.center.x)
    return span.resolve(cabinet.interior_left, cabinet.interior_right)


def relevant_verticals(
    cabinet: Cabinet, registry: PartitionRegistry, position: Point3D
) -> list[Partition]:
    """Vertical shelves whose reach contains ``position.y`` (inclusive)."""
    relevant: list[Partition] = []
    for vertical in registry.vertical():
        bottom, top = vertical_element_bounds(cabinet, registry, vertical)
        if bottom <= position.y <= top:
            relevant.append(vertical)
    return relevant


def relevant_horizontals(
    cabinet: Cabinet, registry: PartitionRegistry, position: Point3D
) -> list[Partition]:
    """Shelves and drawers whose reach contains ``position.x`` (inclusive)."""
    relevant: list[Partition] = []
    for horizontal in registry.horizontal():
        left, right = horizontal_element_bounds(cabinet, registry, horizontal)
        if left <= position.x <= right:
            relevant.append(horizontal)
    return relevant


def free_width_span(
    cabinet: Cabinet, registry: PartitionRegistry, position: Point3D
) -> Interval:
    """Nearest relevant vertical shelves left and right of ``position``.

    Absent ends mean no relevant shelf on that side. A shelf exactly at
    ``position.x`` bounds neither side.
    """
    span = Interval()
    for vertical in relevant_verticals(cabinet, registry, position):
        if vertical.center.x < position.x:
            span = span.tighten_lower(vertical.center.x)
        if vertical.center.x > position.x:
            span = span.tighten_upper(vertical.center.x)
    return span


def free_height_span(
    cabinet: Cabinet, registry: PartitionRegistry, position: Point3D
) -> Interval:
    """Nearest relevant faces below and above ``position``.

    The lower end is the top face of the nearest relevant partition below,
    the upper end the bottom face of the nearest one above. Drawers are
    thicker than shelves, so their faces sit further from their centers.
    """
    span = Interval()
    for horizontal in relevant_horizontals(cabinet, registry, position):
        if horizontal.center.y < position.y:
            span = span.tighten_lower(horizontal.center.y + horizontal.half_thickness)
        if horizontal.center.y > position.y:
            span = span.tighten_upper(horizontal.center.y - horizontal.half_thickness)
    return span


def raw_available_width(
    cabinet: Cabinet, registry: PartitionRegistry, position: Point3D
) -> float:
    """Free width at ``position`` without the minimum-span floor.

    May be zero or negative when neighbours are degenerate.
    """
    left, right = free_width_span(cabinet, registry, position).resolve(
        cabinet.interior_left, cabinet.interior_right
    )
    return right - left


def raw_available_height(
    cabinet: Cabinet, registry: PartitionRegistry, position: Point3D
) -> float:
    """Free height at ``position`` without the minimum-span floor."""
    bottom, top = free_height_span(cabinet, registry, position).resolve(
        cabinet.interior_bottom, cabinet.interior_top
    )
    return top - bottom


def available_width(
    cabinet: Cabinet, registry: PartitionRegistry, position: Point3D
) -> float:
    """Width a new shelf or drawer would get at ``position``.

    The full interior width when no vertical shelf reaches this height,
    otherwise the gap between the nearest ones, never less than
    ``MIN_SPAN``.

    Example:
        >>> cabinet = Cabinet(width=2.0, height=2.2, depth=0.6)
        >>> round(available_width(cabinet, PartitionRegistry(), Point3D(0, 1)), 6)
        1.96
    """
    if not relevant_verticals(cabinet, registry, position):
        return cabinet.interior_width
    return max(MIN_SPAN, raw_available_width(cabinet, registry, position))


def available_height(
    cabinet: Cabinet, registry: PartitionRegistry, position: Point3D
) -> float:
    """Height a new vertical shelf would get at ``position``.

    The full interior height when no shelf or drawer reaches this x
    coordinate, otherwise the gap between the nearest faces, never less
    than ``MIN_SPAN``.
    """
    if not relevant_horizontals(cabinet, registry, position):
        return cabinet.interior_height
    return max(MIN_SPAN, raw_available_height(cabinet, registry, position))
