"""
Base interfaces for the command/query split.

Commands change a document, queries only read one. Each has a handler
whose execute() is the single entry point.

Usage:
    @dataclass(frozen=True)
    class ListRecordsQuery(Query[list[dict]]):
        document: str

    class ListRecordsHandler(QueryHandler[list[dict]]):
        def __init__(self, store: DocumentStore):
            self._store = store

        async def execute(self, query: ListRecordsQuery) -> list[dict]:
            return (await self._store.read(query.document)).records
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

R = TypeVar("R")


class Command(ABC, Generic[R]):
    """Input for an operation that writes a document"""


class CommandHandler(ABC, Generic[R]):
    @abstractmethod
    async def execute(self, command: Command[R]) -> R: ...


class Query(ABC, Generic[R]):
    """Input for a read-only operation"""


class QueryHandler(ABC, Generic[R]):
    @abstractmethod
    async def execute(self, query: Query[R]) -> R: ...
