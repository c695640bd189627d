"""Application commands (use cases) for cabinet layouts."""

from __future__ import annotations

import logging

from .dtos import (
    CabinetInput,
    LayoutOutput,
    PlacementOutcome,
    PlacementRequest,
)
from .session import LayoutSession

logger = logging.getLogger(__name__)


class BuildLayoutCommand:
    """Command to build a layout by replaying scripted drags.

    Each placement request is played through a layout session exactly as a
    user would drive it: select the kind, press, move along the path, and
    release. Rejected placements are reported, not raised.
    """

    def execute(
        self,
        cabinet_input: CabinetInput,
        placements: list[PlacementRequest],
        session: LayoutSession | None = None,
    ) -> LayoutOutput:
        """Execute the layout command.

        Args:
            cabinet_input: Cabinet form values.
            placements: Drags to replay, in order.
            session: Optional session to drive; a fresh one by default. Its
                cabinet is rebuilt, so existing partitions are dropped.

        Returns:
            LayoutOutput with the cabinet, committed partitions and the
            outcome of every placement.
        """
        errors = cabinet_input.validate()
        for index, request in enumerate(placements):
            if not request.path:
                errors.append(f"Placement {index + 1}: path must contain at least one point")
        if errors:
            return LayoutOutput(cabinet=None, errors=errors)

        cabinet = cabinet_input.to_cabinet()
        session = session or LayoutSession()
        session.build_cabinet(cabinet)

        outcomes: list[PlacementOutcome] = []
        for index, request in enumerate(placements):
            session.select(request.kind)
            session.pointer_down()
            for point in request.path:
                session.pointer_move(point)
            partition = session.pointer_up()
            outcomes.append(
                PlacementOutcome(
                    index=index,
                    kind=request.kind,
                    committed=partition is not None,
                    status=session.status,
                    partition=partition,
                )
            )

        logger.info(
            f"Replayed {len(placements)} placement(s), "
            f"{len(session.registry)} committed"
        )
        return LayoutOutput(
            cabinet=cabinet,
            partitions=session.partitions,
            outcomes=outcomes,
        )
