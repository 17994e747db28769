"""
Document Entity - A named JSON file holding one top-level keyed list.

On disk: {<collection_key>: [record, ...]}
"""

from dataclasses import dataclass, field
from typing import Any, Optional


class MalformedDocumentError(ValueError):
    """Persisted content does not have the canonical document shape."""


@dataclass
class Document:
    name: str
    collection_key: str
    records: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def empty(cls, name: str, collection_key: str) -> "Document":
        return cls(name=name, collection_key=collection_key, records=[])

    @classmethod
    def from_json(cls, name: str, collection_key: str, data: Any) -> "Document":
        """
        Validate parsed JSON against the canonical shape.

        Raises:
            MalformedDocumentError: top level is not an object, or the
                collection key is missing or not a list
        """
        if not isinstance(data, dict):
            raise MalformedDocumentError(
                f"Document '{name}' top level is {type(data).__name__}, expected object"
            )
        if collection_key not in data:
            raise MalformedDocumentError(
                f"Document '{name}' is missing key '{collection_key}'"
            )
        records = data[collection_key]
        if not isinstance(records, list):
            raise MalformedDocumentError(
                f"Document '{name}' key '{collection_key}' is not a list"
            )
        return cls(name=name, collection_key=collection_key, records=records)

    def to_json(self) -> dict[str, Any]:
        return {self.collection_key: self.records}

    def append(self, record: dict[str, Any]) -> None:
        self.records.append(record)

    def last_id(self) -> Optional[int]:
        ids = [
            r["id"]
            for r in self.records
            if isinstance(r, dict)
            and isinstance(r.get("id"), int)
            and not isinstance(r.get("id"), bool)
        ]
        return max(ids) if ids else None
