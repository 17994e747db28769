"""
DOMAIN EXCEPTIONS - Business rule violations and storage failures

These exceptions are raised below the presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from itemstore.domain.exceptions.validation_error import DomainValidationError
from itemstore.domain.exceptions.storage_error import StorageError

__all__ = [
    "DomainValidationError",
    "StorageError",
]
