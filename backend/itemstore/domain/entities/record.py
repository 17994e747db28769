"""
Record Entity - One immutable entry in a document's list.
"""

import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from itemstore.domain.value_objects.identity import Identity

# Keys owned by the record itself; caller fields never override them
RESERVED_FIELDS = frozenset({"id", "timestamp", "user"})


def now_millis() -> int:
    return time.time_ns() // 1_000_000


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """UTC ISO-8601 with millisecond precision and a Z suffix."""
    moment = moment or datetime.now(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def next_record_id(last_id: Optional[int], now: Optional[int] = None) -> int:
    """Creation time in ms, bumped past last_id so ids strictly increase."""
    candidate = now if now is not None else now_millis()
    if last_id is not None and candidate <= last_id:
        return last_id + 1
    return candidate


@dataclass(frozen=True)
class Record:
    id: int
    timestamp: str
    user: Identity
    fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        user: Identity,
        fields: dict[str, Any],
        last_id: Optional[int] = None,
    ) -> "Record":
        return cls(
            id=next_record_id(last_id),
            timestamp=iso_timestamp(),
            user=user,
            fields={k: v for k, v in fields.items() if k not in RESERVED_FIELDS},
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "user": self.user.to_dict(),
            **self.fields,
        }


def record_email(record: dict[str, Any]) -> Optional[str]:
    """
    Email embedded in a stored record.

    Older records store the user as a bare email string; current ones
    store {"email": ..., "name": ...}.
    """
    user = record.get("user")
    if isinstance(user, str):
        return user
    if isinstance(user, dict):
        email = user.get("email")
        return email if isinstance(email, str) else None
    return None
