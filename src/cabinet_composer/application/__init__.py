"""Application layer - sessions, use cases and orchestration."""

from .commands import BuildLayoutCommand
from .dtos import (
    CabinetInput,
    CabinetInputError,
    FrameUpdate,
    LayoutOutput,
    PlacementOutcome,
    PlacementRequest,
)
from .session import LayoutSession, NoCabinetError

__all__ = [
    "BuildLayoutCommand",
    "CabinetInput",
    "CabinetInputError",
    "FrameUpdate",
    "LayoutOutput",
    "LayoutSession",
    "NoCabinetError",
    "PlacementOutcome",
    "PlacementRequest",
]
