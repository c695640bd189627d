"""Domain layer - layout geometry and constraint rules."""

from .entities import Cabinet, Partition, PartitionRegistry, ShellPanel
from .placement import clamp_cursor, clamp_to_interior, is_admissible
from .preview_fitter import Candidate, candidate_size, fit_candidate
from .span_resolver import (
    available_height,
    available_width,
    free_height_span,
    free_width_span,
    horizontal_element_bounds,
    raw_available_height,
    raw_available_width,
    relevant_horizontals,
    relevant_verticals,
    vertical_element_bounds,
)
from .value_objects import (
    InteractionState,
    Interval,
    OrientationClass,
    PartitionKind,
    Point3D,
    Size3D,
)

__all__ = [
    "Cabinet",
    "Candidate",
    "InteractionState",
    "Interval",
    "OrientationClass",
    "Partition",
    "PartitionKind",
    "PartitionRegistry",
    "Point3D",
    "ShellPanel",
    "Size3D",
    "available_height",
    "available_width",
    "candidate_size",
    "clamp_cursor",
    "clamp_to_interior",
    "fit_candidate",
    "free_height_span",
    "free_width_span",
    "horizontal_element_bounds",
    "is_admissible",
    "raw_available_height",
    "raw_available_width",
    "relevant_horizontals",
    "relevant_verticals",
    "vertical_element_bounds",
]
