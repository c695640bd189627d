"""Fits a preview part to the free space around the cursor."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .constants import SHELF_THICKNESS
from .entities import Cabinet, Partition, PartitionRegistry
from .span_resolver import (
    available_height,
    available_width,
    free_height_span,
    free_width_span,
    relevant_horizontals,
    relevant_verticals,
)
from .value_objects import OrientationClass, PartitionKind, Point3D, Size3D

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Candidate:
    """A not-yet-committed part following the cursor."""

    kind: PartitionKind
    center: Point3D
    size: Size3D

    @property
    def orientation(self) -> OrientationClass:
        return self.kind.orientation

    def to_partition(self) -> Partition:
        """Freeze the candidate's current geometry into a partition."""
        return Partition(kind=self.kind, center=self.center, size=self.size)


def candidate_size(
    cabinet: Cabinet,
    registry: PartitionRegistry,
    kind: PartitionKind,
    position: Point3D,
) -> Size3D:
    """Full extents a part of ``kind`` takes at ``position``.

    The free-fit axis comes from the span resolver; the other in-plane axis
    is the part's thickness; depth follows the kind.
    """
    depth = cabinet.depth_for(kind)
    if kind.orientation is OrientationClass.VERTICAL_SPANNING:
        return Size3D(
            width=SHELF_THICKNESS,
            height=available_height(cabinet, registry, position),
            depth=depth,
        )
    return Size3D(
        width=available_width(cabinet, registry, position),
        height=kind.thickness,
        depth=depth,
    )


def fit_candidate(
    cabinet: Cabinet,
    registry: PartitionRegistry,
    kind: PartitionKind,
    position: Point3D,
) -> Candidate:
    """Derive a preview's size and snapped position.

    On its free-fit axis the candidate is pushed flush against the nearest
    lower-side neighbour (the vertical shelf to its left, or the face of the
    shelf or drawer below it) and extends by its fitted size from there,
    unless that would carry it past the opposite interior wall. When nothing
    relevant bounds that axis at all, the candidate is centered in the
    interior instead. The remaining coordinates are taken from
    ``position`` as given, so callers clamp it first.

    Args:
        cabinet: The cabinet being laid out.
        registry: Committed partitions.
        kind: Which part to fit.
        position: Cursor position, already clamped to the interior.

    Returns:
        The fitted candidate. Identical inputs give identical results.
    """
    size = candidate_size(cabinet, registry, kind, position)

    # A floored span can be wider than its gap; the far wall still wins.
    if kind.orientation is OrientationClass.VERTICAL_SPANNING:
        if relevant_horizontals(cabinet, registry, position):
            bottom = free_height_span(cabinet, registry, position).lower
            if bottom is None:
                bottom = cabinet.interior_bottom
            y = min(bottom + size.height / 2, cabinet.interior_top - size.height / 2)
            center = position.with_y(y)
        else:
            center = position.with_y(cabinet.height / 2)
    else:
        if relevant_verticals(cabinet, registry, position):
            left = free_width_span(cabinet, registry, position).lower
            if left is None:
                left = cabinet.interior_left
            x = min(left + size.width / 2, cabinet.interior_right - size.width / 2)
            center = position.with_x(x)
        else:
            center = position.with_x(0.0)

    logger.debug(
        f"Fitted {kind.value} at ({center.x:.3f}, {center.y:.3f}, {center.z:.3f}) "
        f"size {size.width:.3f} x {size.height:.3f} x {size.depth:.3f}"
    )
    return Candidate(kind=kind, center=center, size=size)
