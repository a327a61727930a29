"""Error Handlers — global exception handlers shared by the backend and the gateway.

Invariants:
    - ExploreError → structured JSON with error code, message, severity and its http_status:
      400 invalid input (bad date, FOLLOWER group for a friend), 403 unmet condition
      (full event, own event, non-pending request, not a friend), 404 missing or
      foreign entity, 409 duplicate email/category/participation, 502 main server
      unreachable (gateway), 503 database
    - 4xx are logged as warnings, 5xx as errors; user_id and event_id path
      params ride along as log extras
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (ExploreError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py so the gateway registers the very same handlers
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from ewm.core.errors import ExploreError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_explore_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_explore_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(ExploreError)
    async def explore_error_handler(request: Request, exc: ExploreError):
        """Handle all Explore With Me domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"ExploreError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                **_path_ids(request),
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _path_ids(request: Request) -> dict:
    """user_id / event_id from the matched route, for log correlation."""
    ids = {}
    for name in ("user_id", "event_id"):
        value = request.path_params.get(name)
        if value is not None:
            ids[name] = int(value) if str(value).isdigit() else value
    return ids


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
