"""
StorageError - Raised when a document cannot be written to disk.
Maps to: HTTP 500 Internal Server Error
"""

from typing import Optional


class StorageError(Exception):
    """Exception raised when the document store hits an I/O failure."""

    def __init__(self, message: str, document: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.document = document
