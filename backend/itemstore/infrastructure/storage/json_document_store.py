"""
JsonDocumentStore - Durable whole-document persistence on flat JSON files.

Each document is one file holding {<collection_key>: [...]}.

Write sequence:
1. Copy the current file to <file>.backup (best effort)
2. Overwrite the file with the full pretty-printed document
3. Delete the backup (best effort)

A leftover .backup therefore marks an interrupted write. It is reported
at startup and by interrupted_writes(), never restored automatically.

Reads never raise on bad content: a missing, unparseable or misshapen
file is logged, reset to the canonical empty shape and persisted.

File I/O runs in worker threads via asyncio.to_thread.
"""

import asyncio
import json
import logging
import os
import shutil
from collections import defaultdict
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

from itemstore.config.settings import StoreSettings
from itemstore.domain.entities.document import Document, MalformedDocumentError
from itemstore.domain.exceptions import StorageError
from itemstore.domain.ports.event_log import EventLog
from itemstore.domain.ports.repositories import DocumentStore

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".backup"


class JsonDocumentStore(DocumentStore):
    """
    File-backed document store.

    Every public read(), write() and edit() holds the document's
    asyncio.Lock, so a reader never sees a file mid-overwrite. edit()
    holds it across the whole read-modify-write span and uses the
    unlocked _read()/_write() inside it.
    """

    def __init__(self, settings: StoreSettings, event_log: Optional[EventLog] = None):
        self._settings = settings
        self._event_log = event_log
        self._locks: dict[str, asyncio.Lock] = defaultdict(asyncio.Lock)

    # ==================== PATHS ====================

    def path_for(self, name: str) -> Path:
        return self._settings.path_for(name)

    def backup_path_for(self, name: str) -> Path:
        path = self.path_for(name)
        return path.with_name(path.name + BACKUP_SUFFIX)

    # ==================== LIFECYCLE ====================

    async def initialize(self) -> None:
        """
        Prepare the data directory.

        - Create base and log directories (recursive, idempotent)
        - Seed every missing document with its canonical empty shape
        - Report leftover backups as interrupted writes

        Raises:
            StorageError: directories or seed files cannot be created
        """
        try:
            await asyncio.to_thread(self._make_dirs)
        except OSError as e:
            raise StorageError(f"Failed to create data directories: {e}") from e

        for name in self._settings.documents:
            if not await asyncio.to_thread(self.path_for(name).exists):
                spec = self._settings.document(name)
                await self._write_file(name, Document.empty(name, spec.collection_key))
                logger.info(f"[Store] Initialized document '{name}' at {self.path_for(name)}")

        for name in self.interrupted_writes():
            backup = self.backup_path_for(name)
            logger.warning(
                f"[Store] Interrupted write detected for '{name}': {backup} left for manual recovery"
            )
            await self._log_event(
                RuntimeError(f"Interrupted write detected: {backup}"),
                {"document": name, "operation": "initialize"},
            )

    def _make_dirs(self) -> None:
        os.makedirs(self._settings.base_dir, exist_ok=True)
        os.makedirs(self._settings.log_dir, exist_ok=True)

    def interrupted_writes(self) -> list[str]:
        return [
            name
            for name in self._settings.documents
            if self.backup_path_for(name).exists()
        ]

    # ==================== READ ====================

    async def read(self, name: str) -> Document:
        """
        Load a document, recovering from corruption.

        Returns:
            The stored document, or the canonical empty document if the
            file was missing or malformed (the reset is persisted)

        Raises:
            StorageError: the file is unreadable, or the reset could not
                be written
        """
        self._settings.document(name)
        async with self._locks[name]:
            return await self._read(name)

    async def _read(self, name: str) -> Document:
        spec = self._settings.document(name)
        path = self.path_for(name)
        try:
            raw = await asyncio.to_thread(path.read_text, encoding="utf-8")
            return Document.from_json(name, spec.collection_key, json.loads(raw))
        except (FileNotFoundError, ValueError) as e:
            # json.JSONDecodeError and MalformedDocumentError are ValueErrors
            logger.warning(f"[Store] Resetting document '{name}' ({path}): {e}")
            await self._log_event(e, {"document": name, "operation": "read"})
        except OSError as e:
            logger.error(f"[Store] Cannot read document '{name}' ({path}): {e}")
            raise StorageError(f"Failed to read document '{name}': {e}", name) from e

        document = Document.empty(name, spec.collection_key)
        await self._write(name, document)
        return document

    # ==================== WRITE ====================

    async def write(self, name: str, document: Document) -> None:
        """
        Persist a whole document with backup-then-overwrite.

        Raises:
            StorageError: the target file could not be written
        """
        self._settings.document(name)
        async with self._locks[name]:
            await self._write(name, document)

    async def _write(self, name: str, document: Document) -> None:
        backup = self.backup_path_for(name)
        try:
            await asyncio.to_thread(shutil.copyfile, self.path_for(name), backup)
        except FileNotFoundError:
            logger.debug(f"[Store] No existing file to back up for '{name}'")
        except OSError as e:
            logger.warning(f"[Store] Backup failed for '{name}': {e}")

        await self._write_file(name, document)

        try:
            await asyncio.to_thread(backup.unlink, missing_ok=True)
        except OSError as e:
            logger.warning(f"[Store] Failed to remove backup {backup}: {e}")

    async def _write_file(self, name: str, document: Document) -> None:
        path = self.path_for(name)
        payload = json.dumps(document.to_json(), indent=2, ensure_ascii=False)
        try:
            await asyncio.to_thread(path.write_text, payload, encoding="utf-8")
        except OSError as e:
            logger.error(f"[Store] Failed to write '{name}' ({path}): {e}")
            raise StorageError(f"Failed to write document '{name}': {e}", name) from e
        logger.debug(
            f"[Store] Wrote '{name}' ({len(document.records)} records, {len(payload)} bytes)"
        )

    # ==================== TRANSACTION ====================

    @asynccontextmanager
    async def edit(self, name: str) -> AsyncIterator[Document]:
        """
        Scoped write transaction for one document.

        Usage:
            async with store.edit("items") as document:
                document.append(record)

        The document is written back only if the block exits normally.
        """
        self._settings.document(name)  # unknown names fail before locking
        async with self._locks[name]:
            document = await self._read(name)
            yield document
            await self._write(name, document)

    async def _log_event(self, error: BaseException, context: dict) -> None:
        if self._event_log is not None:
            await self._event_log.log_error(error, context)
