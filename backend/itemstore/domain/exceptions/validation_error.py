"""
DomainValidationError - Raised when caller input breaks a record rule.
Maps to: HTTP 400 Bad Request
"""

from typing import Optional


class DomainValidationError(Exception):
    """A required field is missing or unusable; nothing was persisted."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field
