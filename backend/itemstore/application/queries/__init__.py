"""
QUERIES - Read operations (CQRS)

Queries retrieve records without modifying the document. Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read

Subfolders:
- records/ → list_records, filter_records_by_user
"""

from itemstore.application.queries.records import (
    ListRecordsQuery,
    ListRecordsHandler,
    FilterRecordsByUserQuery,
    FilterRecordsByUserHandler,
)

__all__ = [
    "ListRecordsQuery",
    "ListRecordsHandler",
    "FilterRecordsByUserQuery",
    "FilterRecordsByUserHandler",
]
