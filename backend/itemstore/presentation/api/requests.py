"""
Requests API Router - read the request audit log.

Entries are written by RequestAuditMiddleware, one per handled request.
"""

from typing import Any

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter

from itemstore.application.queries.records import ListRecordsHandler, ListRecordsQuery
from itemstore.config.settings import REQUESTS
from itemstore.domain.exceptions import StorageError
from itemstore.presentation.errors import RouteError

router = APIRouter(prefix="/requests", tags=["requests"])


@router.get("")
@inject
async def list_requests(handler: FromDishka[ListRecordsHandler]) -> list[Any]:
    try:
        return await handler.execute(ListRecordsQuery(document=REQUESTS))
    except StorageError as e:
        raise RouteError("Failed to retrieve requests", "/requests", "GET", e) from e
