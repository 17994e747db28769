"""Append-only error log."""

from itemstore.infrastructure.eventlog.error_log import ErrorLog

__all__ = ["ErrorLog"]
