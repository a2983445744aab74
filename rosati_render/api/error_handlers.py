"""Error Handlers - global exception handlers for the relay API.

Invariants:
    - RelayError -> its own status with {"error": message}
    - RequestValidationError -> 400 with field-joined message
    - Exception (catch-all) -> 500, never leaks internal details
    - Every handled failure is logged before responding
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from rosati_render.core.errors import RelayError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_relay_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_relay_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RelayError)
    async def relay_error_handler(request: Request, exc: RelayError):
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"RelayError: {exc.message}",
            extra={
                "error_code": exc.code,
                "status_code": exc.http_status,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": _format_validation_errors(exc)},
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "internal error"},
        )


def _format_validation_errors(exc: RequestValidationError) -> str:
    # loc starts with the source ("body", "query"); the field name is what clients need
    parts = []
    for e in exc.errors():
        loc = [str(p) for p in e["loc"][1:]] or [str(p) for p in e["loc"]]
        parts.append(f"{'.'.join(loc)}: {e['msg']}")
    return "; ".join(parts) or "invalid request"
