"""Interactive layout session.

A session owns the cabinet and its committed partitions, and drives one
preview candidate at a time through selection, dragging and release:

    IDLE --select--> TYPE_SELECTED --pointer_down--> DRAGGING
    DRAGGING --pointer_move--> DRAGGING
    DRAGGING --pointer_up--> IDLE (commit when admissible, else discard)

Selecting a kind while a candidate exists replaces it. Everything runs
synchronously on the caller's thread; the registry is only mutated on
commit and when the cabinet is rebuilt.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from cabinet_composer.domain import (
    Cabinet,
    Candidate,
    InteractionState,
    Partition,
    PartitionKind,
    PartitionRegistry,
    Point3D,
    available_height,
    available_width,
    clamp_cursor,
    fit_candidate,
    is_admissible,
)
from cabinet_composer.domain.constants import (
    PREVIEW_COLOR_INVALID,
    PREVIEW_COLOR_VALID,
)

from .dtos import FrameUpdate

logger = logging.getLogger(__name__)

STATUS_READY = "Create a cabinet to start."
STATUS_CABINET_CREATED = "Cabinet created. Select an element to add."
STATUS_NO_CABINET = "Create a cabinet first!"
STATUS_CAN_PLACE = "Release the mouse button to place the element"
STATUS_CANNOT_PLACE = "Cannot place here - not enough space"
STATUS_PLACED = "Element placed! Select a new element."
STATUS_REJECTED = "Cannot place the element here. Try another spot."
STATUS_CANCELLED = "Placement cancelled."


class NoCabinetError(RuntimeError):
    """Raised by inspection helpers that need a cabinet when none exists."""


def drag_status(kind: PartitionKind) -> str:
    return f"Drag the {kind.display_name.lower()} into place and release the mouse button."


@dataclass
class LayoutSession:
    """Coordinates selection, dragging and commit for one cabinet.

    Attributes:
        cabinet: The active cabinet, or None before one is built.
        registry: Committed partitions.
        state: Current interaction state.
        candidate: The preview being placed, if any.
        last_admissible: Verdict of the most recent pointer move, or None
            when the candidate has not moved since selection.
        navigation_enabled: Whether the camera may orbit. Off while dragging.
        status: Human-readable status line for the UI.
    """

    cabinet: Cabinet | None = None
    registry: PartitionRegistry = field(default_factory=PartitionRegistry)
    state: InteractionState = InteractionState.IDLE
    candidate: Candidate | None = None
    last_admissible: bool | None = None
    navigation_enabled: bool = True
    status: str = STATUS_READY

    @property
    def partitions(self) -> list[Partition]:
        return list(self.registry)

    def build_cabinet(self, cabinet: Cabinet) -> None:
        """Replace the cabinet, dropping all partitions and any candidate."""
        self.cabinet = cabinet
        self.registry.clear()
        self._reset_drag()
        self.status = STATUS_CABINET_CREATED
        logger.info(
            f"Built cabinet {cabinet.width:.2f} x {cabinet.height:.2f} x {cabinet.depth:.2f} m"
        )

    def select(self, kind: PartitionKind | str) -> Candidate | None:
        """Start placing a part of ``kind``, replacing any current candidate.

        Returns:
            The new candidate, or None when no cabinet exists.
        """
        if self.cabinet is None:
            self.status = STATUS_NO_CABINET
            return None
        kind = PartitionKind(kind)
        self._reset_drag()
        default_position = Point3D(0.0, self.cabinet.height / 2, 0.0)
        self.candidate = fit_candidate(self.cabinet, self.registry, kind, default_position)
        self.state = InteractionState.TYPE_SELECTED
        self.status = drag_status(kind)
        logger.debug(f"Selected {kind.value}")
        return self.candidate

    def pointer_down(self) -> None:
        """Begin dragging the current candidate."""
        if self.candidate is None or self.state is InteractionState.IDLE:
            return
        self.state = InteractionState.DRAGGING
        self.navigation_enabled = False

    def pointer_move(self, point: Point3D) -> FrameUpdate | None:
        """Move the candidate toward ``point`` and re-fit it.

        The point is clamped using the candidate's size before the move, the
        candidate is re-fitted at the clamped point, and the placement is
        re-validated there. On the free-fit axis only the cursor is clamped,
        so a candidate that currently fills one bay can still be dragged into
        any other.

        Returns:
            The frame update for the renderer, or None when not dragging.
        """
        if (
            self.state is not InteractionState.DRAGGING
            or self.candidate is None
            or self.cabinet is None
        ):
            return None
        position = clamp_cursor(
            self.cabinet, self.candidate.orientation, self.candidate.size, point
        )
        self.candidate = fit_candidate(
            self.cabinet, self.registry, self.candidate.kind, position
        )
        admissible = is_admissible(
            self.cabinet, self.registry, self.candidate.orientation, position
        )
        self.last_admissible = admissible
        self.status = STATUS_CAN_PLACE if admissible else STATUS_CANNOT_PLACE
        logger.debug(
            f"Verdict at ({position.x:.3f}, {position.y:.3f}): "
            f"{'admissible' if admissible else 'inadmissible'}"
        )
        return FrameUpdate(
            size=self.candidate.size,
            position=self.candidate.center,
            admissible=admissible,
            preview_color=PREVIEW_COLOR_VALID if admissible else PREVIEW_COLOR_INVALID,
            status=self.status,
        )

    def pointer_up(self) -> Partition | None:
        """Release the candidate, committing it when admissible.

        Returns:
            The committed partition, or None when the candidate was
            discarded or nothing was being dragged.
        """
        if self.state is not InteractionState.DRAGGING or self.candidate is None:
            return None
        candidate = self.candidate
        admissible = self.last_admissible
        if admissible is None:
            admissible = is_admissible(
                self.cabinet, self.registry, candidate.orientation, candidate.center
            )

        committed: Partition | None = None
        if admissible:
            committed = candidate.to_partition()
            self.registry.add(committed)
            self.status = STATUS_PLACED
            logger.info(
                f"Placed {committed.kind.value} at "
                f"({committed.center.x:.3f}, {committed.center.y:.3f}); "
                f"{len(self.registry)} partition(s)"
            )
        else:
            self.status = STATUS_REJECTED
            logger.warning(
                f"Rejected {candidate.kind.value} at "
                f"({candidate.center.x:.3f}, {candidate.center.y:.3f})"
            )
        self._reset_drag()
        return committed

    def cancel(self) -> None:
        """Discard the current candidate without committing."""
        if self.candidate is None:
            return
        self._reset_drag()
        self.status = STATUS_CANCELLED

    def span_at(self, point: Point3D) -> tuple[float, float]:
        """Available (width, height) at ``point``.

        Raises:
            NoCabinetError: If no cabinet has been built.
        """
        if self.cabinet is None:
            raise NoCabinetError(STATUS_NO_CABINET)
        return (
            available_width(self.cabinet, self.registry, point),
            available_height(self.cabinet, self.registry, point),
        )

    def _reset_drag(self) -> None:
        self.candidate = None
        self.last_admissible = None
        self.navigation_enabled = True
        self.state = InteractionState.IDLE
