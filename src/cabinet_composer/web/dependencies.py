"""FastAPI dependency injection for layout sessions."""

from __future__ import annotations

import uuid
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from cabinet_composer.application import LayoutSession
from cabinet_composer.web.exceptions import SessionNotFoundError


class SessionStore:
    """In-memory registry of layout sessions keyed by id.

    Sessions are only touched from async handlers, so all access happens on
    the event loop thread.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, LayoutSession] = {}

    def create(self) -> tuple[str, LayoutSession]:
        session_id = uuid.uuid4().hex
        session = LayoutSession()
        self._sessions[session_id] = session
        return session_id, session

    def get(self, session_id: str) -> LayoutSession:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None

    def delete(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)

    def __len__(self) -> int:
        return len(self._sessions)


@lru_cache(maxsize=1)
def get_session_store() -> SessionStore:
    """Get the process-wide SessionStore."""
    return SessionStore()


# Type aliases for cleaner endpoint signatures
SessionStoreDep = Annotated[SessionStore, Depends(get_session_store)]
