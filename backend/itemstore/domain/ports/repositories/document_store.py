"""
Document Store Port - Interface for whole-document persistence.
Implementation: itemstore/infrastructure/storage/json_document_store.py
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager

from itemstore.domain.entities.document import Document


class DocumentStore(ABC):
    @abstractmethod
    async def initialize(self) -> None: ...

    @abstractmethod
    async def read(self, name: str) -> Document: ...

    @abstractmethod
    async def write(self, name: str, document: Document) -> None: ...

    @abstractmethod
    def edit(self, name: str) -> AbstractAsyncContextManager[Document]:
        """Read, let the caller mutate, and write back under a per-document lock."""
        ...

    @abstractmethod
    def interrupted_writes(self) -> list[str]: ...
