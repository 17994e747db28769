"""
Items API Router - store and list conversation items.

Flow:
  HTTP Request → Router → Command/Query → Handler → DocumentStore → JSON file
                                     ↓
  HTTP Response ← Router ← Record(s) ←
"""

from logging import getLogger
from typing import Any, Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, ConfigDict

from itemstore.application.commands.records import (
    AppendRecordCommand,
    AppendRecordHandler,
)
from itemstore.application.queries.records import (
    FilterRecordsByUserHandler,
    FilterRecordsByUserQuery,
    ListRecordsHandler,
    ListRecordsQuery,
)
from itemstore.config.settings import ITEMS
from itemstore.domain.exceptions import StorageError
from itemstore.presentation.dependencies import bind_identity
from itemstore.presentation.errors import RouteError

logger = getLogger(__name__)


# ==================== REQUEST MODELS ====================


class UserPayload(BaseModel):
    email: Optional[str] = None
    name: Optional[str] = None


class CreateItemRequest(BaseModel):
    """
    Request body for storing an item.

    Extra top-level fields are stored on the record alongside content.
    """

    model_config = ConfigDict(extra="allow")

    content: Any = None
    user: Optional[UserPayload] = None


# ==================== ROUTER ====================

router = APIRouter(prefix="/items", tags=["items"])


@router.post("", status_code=status.HTTP_201_CREATED)
@inject
async def create_item(
    request: Request,
    body: CreateItemRequest,
    handler: FromDishka[AppendRecordHandler],
) -> dict[str, Any]:
    """Store a conversation item. 400 if content is missing."""
    identity = bind_identity(
        request, body.user.model_dump() if body.user is not None else None
    )
    fields = {**(body.model_extra or {}), "content": body.content}
    command = AppendRecordCommand(
        document=ITEMS,
        fields=fields,
        user=identity,
        required=("content",),
    )
    try:
        record = await handler.execute(command)
    except StorageError as e:
        raise RouteError("Failed to store conversation", "/items", "POST", e) from e
    return record.to_dict()


@router.get("")
@inject
async def list_items(handler: FromDishka[ListRecordsHandler]) -> list[Any]:
    """All stored items, oldest first."""
    try:
        return await handler.execute(ListRecordsQuery(document=ITEMS))
    except StorageError as e:
        raise RouteError("Failed to retrieve conversations", "/items", "GET", e) from e


@router.get("/user/{email}")
@inject
async def list_items_for_user(
    email: str,
    handler: FromDishka[FilterRecordsByUserHandler],
) -> list[Any]:
    """Items whose embedded user email equals the path value exactly."""
    try:
        return await handler.execute(FilterRecordsByUserQuery(document=ITEMS, email=email))
    except StorageError as e:
        raise RouteError(
            "Failed to retrieve user conversations", "/items/user", "GET", e
        ) from e
