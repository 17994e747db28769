"""
API Routers - FastAPI endpoint definitions.
"""

from itemstore.presentation.api.health import router as health_router
from itemstore.presentation.api.items import router as items_router
from itemstore.presentation.api.requests import router as requests_router

__all__ = [
    "health_router",
    "items_router",
    "requests_router",
]
