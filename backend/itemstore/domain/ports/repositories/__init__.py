"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the application layer needs
- Does NOT specify implementation (JSON files, database, etc.)

Infrastructure layer provides implementations.
"""

from itemstore.domain.ports.repositories.document_store import DocumentStore

__all__ = [
    "DocumentStore",
]
