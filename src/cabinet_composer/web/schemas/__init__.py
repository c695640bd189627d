"""Pydantic schemas for the REST API."""

from cabinet_composer.web.schemas.requests import (
    CabinetFormRequest,
    CreateSessionRequest,
    PointerMoveRequest,
    SelectRequest,
)
from cabinet_composer.web.schemas.responses import (
    CabinetSchema,
    FrameSchema,
    PartitionSchema,
    ReleaseSchema,
    SessionSchema,
    SpanSchema,
    VectorSchema,
)

__all__ = [
    # Requests
    "CabinetFormRequest",
    "CreateSessionRequest",
    "PointerMoveRequest",
    "SelectRequest",
    # Responses
    "CabinetSchema",
    "FrameSchema",
    "PartitionSchema",
    "ReleaseSchema",
    "SessionSchema",
    "SpanSchema",
    "VectorSchema",
]
