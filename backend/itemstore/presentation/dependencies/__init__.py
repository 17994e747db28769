"""Request-scoped helpers shared by routers and middleware."""

from itemstore.presentation.dependencies.identity import bind_identity, current_identity

__all__ = ["bind_identity", "current_identity"]
