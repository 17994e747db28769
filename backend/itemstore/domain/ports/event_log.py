"""
Event Log Port - Write-only sink for error and audit entries.
Implementation: itemstore/infrastructure/eventlog/error_log.py
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class EventLog(ABC):
    @abstractmethod
    async def log_error(
        self, error: BaseException, context: Optional[dict[str, Any]] = None
    ) -> None:
        """Append one entry. Must never raise."""
        ...
