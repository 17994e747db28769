"""File-backed document storage."""

from itemstore.infrastructure.storage.json_document_store import (
    BACKUP_SUFFIX,
    JsonDocumentStore,
)

__all__ = ["BACKUP_SUFFIX", "JsonDocumentStore"]
