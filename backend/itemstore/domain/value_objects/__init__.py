"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value)
- Is immutable (frozen dataclass)
- Validates itself on creation
"""

from itemstore.domain.value_objects.identity import (
    ANONYMOUS_EMAIL,
    Anonymous,
    Authenticated,
    Identity,
    resolve_identity,
)

__all__ = [
    "ANONYMOUS_EMAIL",
    "Anonymous",
    "Authenticated",
    "Identity",
    "resolve_identity",
]
