"""
Route-level failures and their HTTP mapping.

- DomainValidationError → 400 {"error": message}
- RouteError            → 500 {"error": route message, "message": detail}
- anything else         → 500 {"error": "Internal server error", "message": ...}

500 responses schedule an error-log entry as a background task, so the
log write never delays or fails the response.
"""

import logging
from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.background import BackgroundTask
from starlette.exceptions import HTTPException as StarletteHTTPException

from itemstore.domain.exceptions import DomainValidationError
from itemstore.domain.ports.event_log import EventLog

logger = logging.getLogger(__name__)


class RouteError(Exception):
    """A route failed for an internal reason; carries the client-facing message."""

    def __init__(self, error: str, route: str, method: str, cause: BaseException):
        super().__init__(error)
        self.error = error
        self.route = route
        self.method = method
        self.cause = cause


async def _log_task(
    request: Request, error: BaseException, context: dict[str, Any]
) -> BackgroundTask:
    event_log = await request.app.state.dishka_container.get(EventLog)
    return BackgroundTask(event_log.log_error, error, context)


async def route_error_handler(request: Request, exc: RouteError) -> JSONResponse:
    logger.error(f"[HTTP] {exc.method} {exc.route} failed: {exc.cause}")
    return JSONResponse(
        status_code=500,
        content={"error": exc.error, "message": str(exc.cause)},
        background=await _log_task(
            request, exc.cause, {"route": exc.route, "method": exc.method}
        ),
    )


async def validation_error_handler(
    request: Request, exc: DomainValidationError
) -> JSONResponse:
    logger.info(f"[HTTP] Rejected {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=400, content={"error": exc.message})


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = jsonable_encoder(exc.errors())
    logger.info(f"[HTTP] Invalid request body for {request.url.path}: {errors}")
    return JSONResponse(
        status_code=400,
        content={"error": "Validation error", "details": errors},
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"[HTTP] Unhandled {type(exc).__name__} on {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "message": str(exc)},
        background=await _log_task(
            request, exc, {"route": request.url.path, "method": request.method}
        ),
    )
