"""Layout session endpoints.

A browser renderer opens a session, builds a cabinet, and forwards
selection and pointer events. Every response carries what the renderer
needs to update the preview and the status line.
"""

from fastapi import APIRouter, Query, status

from cabinet_composer.application import CabinetInput, LayoutSession
from cabinet_composer.domain import Candidate, Partition, Point3D, Size3D
from cabinet_composer.domain.constants import PREVIEW_COLOR_INVALID, PREVIEW_COLOR_VALID
from cabinet_composer.web.dependencies import SessionStoreDep
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

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _vector(value: Point3D | Size3D) -> VectorSchema:
    x, y, z = value.as_tuple()
    return VectorSchema(x=x, y=y, z=z)


def _color(value: int) -> str:
    return f"#{value:06X}"


def _partition_to_schema(part: Partition | Candidate, color: int) -> PartitionSchema:
    return PartitionSchema(
        kind=part.kind,
        center=_vector(part.center),
        size=_vector(part.size),
        color=_color(color),
    )


def _session_to_schema(session_id: str, session: LayoutSession) -> SessionSchema:
    cabinet = None
    if session.cabinet is not None:
        cabinet = CabinetSchema(
            width=session.cabinet.width,
            height=session.cabinet.height,
            depth=session.cabinet.depth,
            wall_thickness=session.cabinet.wall_thickness,
            color=_color(session.cabinet.color),
        )
    candidate = None
    if session.candidate is not None:
        preview_color = (
            PREVIEW_COLOR_INVALID if session.last_admissible is False else PREVIEW_COLOR_VALID
        )
        candidate = _partition_to_schema(session.candidate, preview_color)
    return SessionSchema(
        session_id=session_id,
        state=session.state,
        status=session.status,
        navigation_enabled=session.navigation_enabled,
        cabinet=cabinet,
        candidate=candidate,
        partitions=[_partition_to_schema(p, p.kind.finish_color) for p in session.partitions],
    )


def _form_to_input(form: CabinetFormRequest) -> CabinetInput:
    return CabinetInput(
        width_cm=form.width_cm,
        height_cm=form.height_cm,
        depth_cm=form.depth_cm,
        color_hex=form.color,
        wall_thickness=form.wall_thickness,
    )


@router.post("", response_model=SessionSchema, status_code=status.HTTP_201_CREATED)
async def create_session(
    request: CreateSessionRequest, store: SessionStoreDep
) -> SessionSchema:
    """Open a layout session, optionally building its cabinet right away."""
    cabinet = _form_to_input(request.cabinet).to_cabinet() if request.cabinet else None
    session_id, session = store.create()
    if cabinet is not None:
        session.build_cabinet(cabinet)
    return _session_to_schema(session_id, session)


@router.get("/{session_id}", response_model=SessionSchema)
async def get_session(session_id: str, store: SessionStoreDep) -> SessionSchema:
    """Get the current state of a session."""
    return _session_to_schema(session_id, store.get(session_id))


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(session_id: str, store: SessionStoreDep) -> None:
    """Close a session and drop its layout."""
    store.delete(session_id)


@router.post("/{session_id}/cabinet", response_model=SessionSchema)
async def build_cabinet(
    session_id: str, form: CabinetFormRequest, store: SessionStoreDep
) -> SessionSchema:
    """Build (or rebuild) the cabinet. Existing partitions are discarded."""
    session = store.get(session_id)
    session.build_cabinet(_form_to_input(form).to_cabinet())
    return _session_to_schema(session_id, session)


@router.post("/{session_id}/select", response_model=SessionSchema)
async def select_kind(
    session_id: str, request: SelectRequest, store: SessionStoreDep
) -> SessionSchema:
    """Select the part to place, replacing any preview in flight."""
    session = store.get(session_id)
    session.select(request.kind)
    return _session_to_schema(session_id, session)


@router.post("/{session_id}/pointer-down", response_model=SessionSchema)
async def pointer_down(session_id: str, store: SessionStoreDep) -> SessionSchema:
    """Start dragging the preview."""
    session = store.get(session_id)
    session.pointer_down()
    return _session_to_schema(session_id, session)


@router.post("/{session_id}/pointer-move", response_model=FrameSchema | None)
async def pointer_move(
    session_id: str, request: PointerMoveRequest, store: SessionStoreDep
) -> FrameSchema | None:
    """Move the preview toward the cursor. Returns null when not dragging."""
    session = store.get(session_id)
    frame = session.pointer_move(Point3D(request.x, request.y, request.z))
    if frame is None:
        return None
    return FrameSchema(
        size=_vector(frame.size),
        position=_vector(frame.position),
        admissible=frame.admissible,
        preview_color=_color(frame.preview_color),
        status=frame.status,
    )


@router.post("/{session_id}/pointer-up", response_model=ReleaseSchema)
async def pointer_up(session_id: str, store: SessionStoreDep) -> ReleaseSchema:
    """Release the preview, committing it when admissible."""
    session = store.get(session_id)
    partition = session.pointer_up()
    return ReleaseSchema(
        committed=partition is not None,
        partition=(
            _partition_to_schema(partition, partition.kind.finish_color)
            if partition is not None
            else None
        ),
        status=session.status,
    )


@router.post("/{session_id}/cancel", response_model=SessionSchema)
async def cancel(session_id: str, store: SessionStoreDep) -> SessionSchema:
    """Discard the preview without committing."""
    session = store.get(session_id)
    session.cancel()
    return _session_to_schema(session_id, session)


@router.get("/{session_id}/span", response_model=SpanSchema)
async def span(
    session_id: str,
    store: SessionStoreDep,
    x: float = Query(..., description="x in meters from the cabinet center"),
    y: float = Query(..., description="y in meters from the floor"),
) -> SpanSchema:
    """Free width and height at a point."""
    session = store.get(session_id)
    free_width, free_height = session.span_at(Point3D(x, y, 0.0))
    return SpanSchema(x=x, y=y, available_width=free_width, available_height=free_height)
