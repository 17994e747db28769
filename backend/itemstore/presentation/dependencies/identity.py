"""
Request identity.

The identity is resolved once per request (from the body's "user"
object) and kept on request.state so every record produced while
handling the request, including the audit record, carries the same one.
"""

from collections.abc import Mapping
from typing import Any, Optional

from fastapi import Request

from itemstore.domain.value_objects.identity import (
    Anonymous,
    Identity,
    resolve_identity,
)


def bind_identity(request: Request, user: Optional[Mapping[str, Any]]) -> Identity:
    identity = resolve_identity(user)
    request.state.identity = identity
    return identity


def current_identity(request: Request) -> Identity:
    return getattr(request.state, "identity", None) or Anonymous()
