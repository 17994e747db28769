"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the application needs,
without specifying HOW it's done.

- repositories/document_store.py → whole-document persistence
- event_log.py                   → append-only error log
"""

from itemstore.domain.ports.event_log import EventLog
from itemstore.domain.ports.repositories import DocumentStore

__all__ = [
    "DocumentStore",
    "EventLog",
]
