"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- storage/: JSON file document store (JsonDocumentStore)
- eventlog/: Append-only error log (ErrorLog)
"""

from itemstore.infrastructure.storage import JsonDocumentStore
from itemstore.infrastructure.eventlog import ErrorLog

__all__ = [
    "JsonDocumentStore",
    "ErrorLog",
]
