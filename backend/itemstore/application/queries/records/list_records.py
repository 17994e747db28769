"""List Records Query."""

from dataclasses import dataclass
from typing import Any

from itemstore.application.common.interfaces import Query, QueryHandler
from itemstore.domain.ports.repositories import DocumentStore


@dataclass(frozen=True)
class ListRecordsQuery(Query[list[dict[str, Any]]]):
    document: str


class ListRecordsHandler(QueryHandler[list[dict[str, Any]]]):
    def __init__(self, store: DocumentStore):
        self._store = store

    async def execute(self, query: ListRecordsQuery) -> list[dict[str, Any]]:
        document = await self._store.read(query.document)
        return document.records
