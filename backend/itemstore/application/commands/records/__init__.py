"""Record commands."""

from .append_record import AppendRecordCommand, AppendRecordHandler

__all__ = [
    "AppendRecordCommand",
    "AppendRecordHandler",
]
