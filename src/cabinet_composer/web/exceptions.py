"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cabinet_composer.application import CabinetInputError, NoCabinetError


class SessionNotFoundError(Exception):
    """Raised when a session id is unknown."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(SessionNotFoundError)
    async def session_not_found_handler(
        request: Request, exc: SessionNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": {"session_id": exc.session_id},
            },
        )

    @app.exception_handler(CabinetInputError)
    async def cabinet_input_error_handler(
        request: Request, exc: CabinetInputError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid cabinet parameters",
                "error_type": "cabinet_input",
                "details": [{"message": e} for e in exc.errors],
            },
        )

    @app.exception_handler(NoCabinetError)
    async def no_cabinet_handler(request: Request, exc: NoCabinetError) -> JSONResponse:
        return JSONResponse(
            status_code=409,
            content={
                "error": str(exc),
                "error_type": "no_cabinet",
                "details": None,
            },
        )
