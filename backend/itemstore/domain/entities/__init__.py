"""
ENTITIES - Business objects with identity

- Record: one stored entry, identified by its millisecond id
- Document: the named keyed list that records live in
"""

from itemstore.domain.entities.document import Document, MalformedDocumentError
from itemstore.domain.entities.record import Record, record_email

__all__ = [
    "Document",
    "MalformedDocumentError",
    "Record",
    "record_email",
]
