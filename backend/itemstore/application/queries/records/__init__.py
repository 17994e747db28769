"""Record queries."""

from itemstore.application.queries.records.list_records import (
    ListRecordsQuery,
    ListRecordsHandler,
)
from itemstore.application.queries.records.filter_records_by_user import (
    FilterRecordsByUserQuery,
    FilterRecordsByUserHandler,
)

__all__ = [
    "ListRecordsQuery",
    "ListRecordsHandler",
    "FilterRecordsByUserQuery",
    "FilterRecordsByUserHandler",
]
