"""
Filter Records By User Query.

Exact match on the email embedded in each record, insertion order kept.
An email with no records yields an empty list.
"""

from dataclasses import dataclass
from typing import Any

from itemstore.application.common.interfaces import Query, QueryHandler
from itemstore.domain.entities.record import record_email
from itemstore.domain.ports.repositories import DocumentStore


@dataclass(frozen=True)
class FilterRecordsByUserQuery(Query[list[dict[str, Any]]]):
    document: str
    email: str


class FilterRecordsByUserHandler(QueryHandler[list[dict[str, Any]]]):
    def __init__(self, store: DocumentStore):
        self._store = store

    async def execute(self, query: FilterRecordsByUserQuery) -> list[dict[str, Any]]:
        document = await self._store.read(query.document)
        return [
            record
            for record in document.records
            if isinstance(record, dict) and record_email(record) == query.email
        ]
