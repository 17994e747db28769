"""
ErrorLog - Append-only NDJSON sink for error entries.

One compact JSON object per line:
    {"timestamp", "message", "type", "stack", "context"}

Never raises: a failed append is reported through the application
logger (console handler) and dropped. No rotation, no read API.
"""

import asyncio
import json
import logging
import traceback
from pathlib import Path
from typing import Any, Optional

from itemstore.domain.entities.record import iso_timestamp
from itemstore.domain.ports.event_log import EventLog

logger = logging.getLogger(__name__)


class ErrorLog(EventLog):
    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @staticmethod
    def build_entry(
        error: BaseException, context: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        stack = None
        if error.__traceback__ is not None:
            stack = "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            )
        return {
            "timestamp": iso_timestamp(),
            "message": str(error),
            "type": type(error).__name__,
            "stack": stack,
            "context": context or {},
        }

    async def log_error(
        self, error: BaseException, context: Optional[dict[str, Any]] = None
    ) -> None:
        try:
            line = json.dumps(self.build_entry(error, context), default=str)
            await asyncio.to_thread(self._append, line + "\n")
        except Exception as e:
            logger.error(f"[ErrorLog] Failed to write {self._path}: {e} (original: {error!r})")

    def _append(self, line: str) -> None:
        with open(self._path, "a", encoding="utf-8") as f:
            f.write(line)
