"""Placement admissibility and cursor clamping."""

from __future__ import annotations

from .constants import ADMISSIBLE_SPAN
from .entities import Cabinet, PartitionRegistry
from .span_resolver import raw_available_height, raw_available_width
from .value_objects import OrientationClass, Point3D, Size3D


def is_admissible(
    cabinet: Cabinet | None,
    registry: PartitionRegistry,
    orientation: OrientationClass,
    position: Point3D,
) -> bool:
    """Check whether a part may be committed at ``position``.

    The only rule is that the free span on the part's free-fit axis exceeds
    ``ADMISSIBLE_SPAN``. The span is measured before the display floor is
    applied. Overlap with other parts of the same orientation is not
    checked.

    Args:
        cabinet: The active cabinet, or None when none has been built.
        registry: Committed partitions.
        orientation: Orientation class of the part being placed.
        position: Query position.

    Returns:
        True when the placement may be committed.
    """
    if cabinet is None:
        return False
    if orientation is OrientationClass.VERTICAL_SPANNING:
        return raw_available_height(cabinet, registry, position) > ADMISSIBLE_SPAN
    return raw_available_width(cabinet, registry, position) > ADMISSIBLE_SPAN


def _clamp(value: float, lower: float, upper: float) -> float:
    if lower > upper:
        return (lower + upper) / 2
    return max(lower, min(upper, value))


def clamp_to_interior(cabinet: Cabinet, size: Size3D, point: Point3D) -> Point3D:
    """Keep a box of ``size`` centered near ``point`` inside the interior.

    Each axis is clamped to ``[interior_min + size/2, interior_max - size/2]``.
    A box larger than the interior on some axis is centered on that axis.
    """
    return Point3D(
        _clamp(
            point.x,
            cabinet.interior_left + size.width / 2,
            cabinet.interior_right - size.width / 2,
        ),
        _clamp(
            point.y,
            cabinet.interior_bottom + size.height / 2,
            cabinet.interior_top - size.height / 2,
        ),
        _clamp(
            point.z,
            cabinet.interior_back + size.depth / 2,
            cabinet.interior_front - size.depth / 2,
        ),
    )


def clamp_cursor(
    cabinet: Cabinet, orientation: OrientationClass, size: Size3D, point: Point3D
) -> Point3D:
    """Clamp a drag cursor for a candidate of ``size``.

    The spanning and depth axes keep the whole candidate inside the interior,
    as :func:`clamp_to_interior` does. On the free-fit axis only the cursor
    itself is kept inside: the fitter re-derives that coordinate from the bay
    the cursor lands in, so the candidate's current length must not narrow
    which bays are reachable.

    Example:
        >>> cabinet = Cabinet(width=2.0, height=2.2, depth=0.6)
        >>> full_width = Size3D(1.96, 0.02, 0.56)
        >>> clamp_cursor(
        ...     cabinet, OrientationClass.HORIZONTAL_SPANNING, full_width, Point3D(0.5, 1.0)
        ... ).x
        0.5
    """
    clamped = clamp_to_interior(cabinet, size, point)
    if orientation is OrientationClass.VERTICAL_SPANNING:
        return clamped.with_y(
            _clamp(point.y, cabinet.interior_bottom, cabinet.interior_top)
        )
    return clamped.with_x(_clamp(point.x, cabinet.interior_left, cabinet.interior_right))
