"""
RequestAuditMiddleware - append one record per request to the requests document.

Runs after the route so the identity bound during the request is the
one recorded. Requests that end in an unhandled error are recorded with
status 500 before the error propagates. A failed audit write is logged
and never fails the request.
"""

import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from itemstore.application.commands.records import (
    AppendRecordCommand,
    AppendRecordHandler,
)
from itemstore.config.settings import REQUESTS
from itemstore.domain.ports.event_log import EventLog
from itemstore.domain.ports.repositories import DocumentStore
from itemstore.presentation.dependencies import current_identity

logger = logging.getLogger(__name__)

EXCLUDED_PATHS = frozenset({"/", "/health"})


class RequestAuditMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        try:
            response = await call_next(request)
        except Exception:
            # Unhandled route errors become a 500 further out
            await self._record(request, 500)
            raise
        await self._record(request, response.status_code)
        return response

    async def _record(self, request: Request, status_code: int) -> None:
        if request.url.path in EXCLUDED_PATHS:
            return

        container = request.app.state.dishka_container
        fields = {
            "method": request.method,
            "path": request.url.path,
            "query": request.url.query,
            "headers": dict(request.headers),
            "status_code": status_code,
        }
        try:
            store = await container.get(DocumentStore)
            await AppendRecordHandler(store).execute(
                AppendRecordCommand(
                    document=REQUESTS,
                    fields=fields,
                    user=current_identity(request),
                )
            )
        except Exception as e:
            logger.warning(f"[Audit] Failed to record {request.method} {request.url.path}: {e}")
            event_log = await container.get(EventLog)
            await event_log.log_error(
                e, {"route": request.url.path, "method": request.method, "audit": True}
            )
