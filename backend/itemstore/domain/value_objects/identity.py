"""
Identity Value Object - Who produced a record.

Either an Authenticated user supplied by the caller, or the Anonymous
sentinel. Embedded in every record as {"email": ..., "name": ...}.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

ANONYMOUS_EMAIL = "anonymous"
ANONYMOUS_NAME = "Anonymous"
UNKNOWN_NAME = "Unknown"


@dataclass(frozen=True)
class Authenticated:
    email: str
    name: str = UNKNOWN_NAME

    def __post_init__(self):
        if not self.email:
            raise ValueError("Authenticated identity requires an email")

    def to_dict(self) -> dict[str, str]:
        return {"email": self.email, "name": self.name}


@dataclass(frozen=True)
class Anonymous:
    @property
    def email(self) -> str:
        return ANONYMOUS_EMAIL

    @property
    def name(self) -> str:
        return ANONYMOUS_NAME

    def to_dict(self) -> dict[str, str]:
        return {"email": ANONYMOUS_EMAIL, "name": ANONYMOUS_NAME}


Identity = Union[Authenticated, Anonymous]


def resolve_identity(user: Optional[Mapping[str, Any]]) -> Identity:
    """
    Resolve the caller-supplied user payload into an Identity.

    A payload with a non-empty email is Authenticated (name defaults to
    "Unknown"); anything else is Anonymous.
    """
    if not isinstance(user, Mapping):
        return Anonymous()

    email = user.get("email")
    if not isinstance(email, str) or not email.strip():
        return Anonymous()

    name = user.get("name")
    if not isinstance(name, str) or not name.strip():
        name = UNKNOWN_NAME
    return Authenticated(email=email, name=name)
