"""
Append Record Command.

Handler flow (inside one store.edit transaction):
1. Reject the command if a required field is missing (nothing persisted)
2. Read the document under its lock
3. Build a Record: fresh id past the last one, current timestamp,
   caller fields, resolved identity
4. Append it; the transaction writes the whole document back
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from itemstore.application.common.interfaces import Command, CommandHandler
from itemstore.domain.entities.record import Record
from itemstore.domain.exceptions import DomainValidationError
from itemstore.domain.ports.repositories import DocumentStore
from itemstore.domain.value_objects.identity import Anonymous, Identity

logger = logging.getLogger(__name__)


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


@dataclass(frozen=True)
class AppendRecordCommand(Command[Record]):
    document: str
    fields: dict[str, Any]
    user: Identity = field(default_factory=Anonymous)
    required: tuple[str, ...] = ()


class AppendRecordHandler(CommandHandler[Record]):
    _store: DocumentStore

    def __init__(self, store: DocumentStore):
        self._store = store

    async def execute(self, command: AppendRecordCommand) -> Record:
        for name in command.required:
            if _is_missing(command.fields.get(name)):
                raise DomainValidationError(f"{name.capitalize()} is required", field=name)

        async with self._store.edit(command.document) as document:
            record = Record.create(
                user=command.user,
                fields=command.fields,
                last_id=document.last_id(),
            )
            document.append(record.to_dict())

        logger.info(
            f"[Records] Appended record {record.id} to '{command.document}' "
            f"({len(document.records)} total)"
        )
        return record
