"""Health check routes."""

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter

from itemstore.domain.ports.repositories import DocumentStore

router = APIRouter(tags=["health"])


@router.get("/")
async def root():
    return {"message": "Item store server is running."}


@router.get("/health")
@inject
async def health(store: FromDishka[DocumentStore]):
    # Leftover .backup files mean a write was interrupted
    return {"status": "healthy", "interrupted_writes": store.interrupted_writes()}
