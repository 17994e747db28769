"""Tests for the append / list / filter handlers."""

import pytest
import pytest_asyncio

from itemstore.application.commands.records import (
    AppendRecordCommand,
    AppendRecordHandler,
)
from itemstore.application.queries.records import (
    FilterRecordsByUserHandler,
    FilterRecordsByUserQuery,
    ListRecordsHandler,
    ListRecordsQuery,
)
from itemstore.config.settings import ITEMS
from itemstore.domain.entities.document import Document
from itemstore.domain.exceptions import DomainValidationError
from itemstore.domain.value_objects.identity import Anonymous, Authenticated

ALICE = Authenticated(email="alice@example.com", name="Alice")
BOB = Authenticated(email="bob@example.com", name="Bob")


@pytest_asyncio.fixture
async def initialized_store(store):
    await store.initialize()
    return store


async def _append(store, content, user=ALICE, **extra):
    command = AppendRecordCommand(
        document=ITEMS,
        fields={"content": content, **extra},
        user=user,
        required=("content",),
    )
    return await AppendRecordHandler(store).execute(command)


class TestAppendRecord:
    @pytest.mark.asyncio
    async def test_returns_and_persists_record(self, initialized_store):
        record = await _append(initialized_store, {"message": "hi", "response": "hello"})

        stored = (await initialized_store.read(ITEMS)).records
        assert stored == [record.to_dict()]
        assert stored[0]["user"] == {"email": "alice@example.com", "name": "Alice"}
        assert stored[0]["content"] == {"message": "hi", "response": "hello"}
        assert stored[0]["timestamp"].endswith("Z")

    @pytest.mark.asyncio
    async def test_ids_strictly_increase(self, initialized_store):
        records = [await _append(initialized_store, f"m{i}") for i in range(5)]

        ids = [r.id for r in records]
        assert ids == sorted(ids)
        assert len(set(ids)) == len(ids)

    @pytest.mark.asyncio
    async def test_ids_continue_past_existing_records(self, initialized_store):
        far_future = 10**15
        await initialized_store.write(
            ITEMS, Document(ITEMS, "conversations", [{"id": far_future}])
        )

        record = await _append(initialized_store, "next")

        assert record.id == far_future + 1

    @pytest.mark.asyncio
    async def test_caller_cannot_override_reserved_fields(self, initialized_store):
        record = await _append(
            initialized_store, "x", id=1, timestamp="yesterday", extra="kept"
        )

        data = record.to_dict()
        assert data["id"] != 1
        assert data["timestamp"] != "yesterday"
        assert data["extra"] == "kept"

    @pytest.mark.asyncio
    async def test_anonymous_user(self, initialized_store):
        record = await _append(initialized_store, "x", user=Anonymous())

        assert record.to_dict()["user"] == {"email": "anonymous", "name": "Anonymous"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [None, ""])
    async def test_missing_required_field_is_rejected(self, initialized_store, content):
        await _append(initialized_store, "existing")

        with pytest.raises(DomainValidationError) as exc_info:
            await _append(initialized_store, content)

        assert exc_info.value.message == "Content is required"
        assert exc_info.value.field == "content"
        assert len((await initialized_store.read(ITEMS)).records) == 1


class TestQueries:
    @pytest.mark.asyncio
    async def test_list_preserves_insertion_order(self, initialized_store):
        for content in ("a", "b", "c"):
            await _append(initialized_store, content)

        records = await ListRecordsHandler(initialized_store).execute(
            ListRecordsQuery(document=ITEMS)
        )

        assert [r["content"] for r in records] == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_filter_by_user_exact_match(self, initialized_store):
        await _append(initialized_store, "a1", user=ALICE)
        await _append(initialized_store, "b1", user=BOB)
        await _append(initialized_store, "a2", user=ALICE)
        await _append(initialized_store, "anon", user=Anonymous())

        handler = FilterRecordsByUserHandler(initialized_store)
        alice = await handler.execute(FilterRecordsByUserQuery(ITEMS, "alice@example.com"))
        partial = await handler.execute(FilterRecordsByUserQuery(ITEMS, "alice"))
        anonymous = await handler.execute(FilterRecordsByUserQuery(ITEMS, "anonymous"))

        assert [r["content"] for r in alice] == ["a1", "a2"]
        assert partial == []
        assert [r["content"] for r in anonymous] == ["anon"]

    @pytest.mark.asyncio
    async def test_filter_with_no_matches_returns_empty(self, initialized_store):
        await _append(initialized_store, "a1", user=ALICE)

        result = await FilterRecordsByUserHandler(initialized_store).execute(
            FilterRecordsByUserQuery(ITEMS, "nobody@example.com")
        )

        assert result == []

    @pytest.mark.asyncio
    async def test_filter_matches_records_with_bare_email_user(self, initialized_store):
        await initialized_store.write(
            ITEMS,
            Document(
                ITEMS,
                "conversations",
                [
                    {"id": 1, "user": "alice@example.com", "content": "old"},
                    {"id": 2, "user": "anonymous", "content": "old anon"},
                ],
            ),
        )

        result = await FilterRecordsByUserHandler(initialized_store).execute(
            FilterRecordsByUserQuery(ITEMS, "alice@example.com")
        )

        assert [r["content"] for r in result] == ["old"]
