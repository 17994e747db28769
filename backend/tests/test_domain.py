"""Tests for identities, record construction and document validation."""

from datetime import datetime, timezone

import pytest

from itemstore.domain.entities.document import Document, MalformedDocumentError
from itemstore.domain.entities.record import (
    Record,
    iso_timestamp,
    next_record_id,
    record_email,
)
from itemstore.domain.value_objects.identity import (
    Anonymous,
    Authenticated,
    resolve_identity,
)


class TestResolveIdentity:
    def test_authenticated_user(self):
        identity = resolve_identity({"email": "a@example.com", "name": "Ann"})
        assert identity == Authenticated(email="a@example.com", name="Ann")

    @pytest.mark.parametrize("user", [{"email": "a@example.com"}, {"email": "a@example.com", "name": ""}])
    def test_name_defaults_to_unknown(self, user):
        assert resolve_identity(user).name == "Unknown"

    @pytest.mark.parametrize("user", [None, {}, {"name": "Ann"}, {"email": ""}, {"email": "  "}, "a@example.com"])
    def test_anything_without_email_is_anonymous(self, user):
        assert resolve_identity(user) == Anonymous()

    def test_anonymous_sentinel_shape(self):
        assert Anonymous().to_dict() == {"email": "anonymous", "name": "Anonymous"}
        assert Anonymous().email == "anonymous"

    def test_authenticated_requires_email(self):
        with pytest.raises(ValueError):
            Authenticated(email="")


class TestRecord:
    def test_next_id_uses_clock_when_ahead(self):
        assert next_record_id(100, now=500) == 500

    def test_next_id_bumps_past_last_id(self):
        assert next_record_id(500, now=500) == 501
        assert next_record_id(900, now=500) == 901

    def test_next_id_without_previous_records(self):
        assert next_record_id(None, now=42) == 42

    def test_iso_timestamp_format(self):
        moment = datetime(2024, 5, 6, 7, 8, 9, 123456, tzinfo=timezone.utc)
        assert iso_timestamp(moment) == "2024-05-06T07:08:09.123Z"

    def test_to_dict_embeds_user(self):
        record = Record(
            id=1,
            timestamp="2024-01-01T00:00:00.000Z",
            user=Authenticated(email="a@example.com"),
            fields={"content": "x"},
        )
        assert record.to_dict() == {
            "id": 1,
            "timestamp": "2024-01-01T00:00:00.000Z",
            "user": {"email": "a@example.com", "name": "Unknown"},
            "content": "x",
        }

    @pytest.mark.parametrize(
        "record, expected",
        [
            ({"user": {"email": "a@example.com", "name": "A"}}, "a@example.com"),
            ({"user": "a@example.com"}, "a@example.com"),
            ({"user": {"name": "A"}}, None),
            ({}, None),
        ],
    )
    def test_record_email(self, record, expected):
        assert record_email(record) == expected


class TestDocument:
    def test_from_json_accepts_canonical_shape(self):
        document = Document.from_json("items", "items", {"items": [{"id": 1}]})
        assert document.records == [{"id": 1}]
        assert document.to_json() == {"items": [{"id": 1}]}

    @pytest.mark.parametrize("data", [[], None, "x", {"other": []}, {"items": {}}])
    def test_from_json_rejects_other_shapes(self, data):
        with pytest.raises(MalformedDocumentError):
            Document.from_json("items", "items", data)

    def test_last_id_ignores_records_without_int_id(self):
        document = Document("items", "items", [{"id": 3}, {"id": "9"}, {"id": True}, {}, {"id": 5}])
        assert document.last_id() == 5

    def test_last_id_of_empty_document(self):
        assert Document.empty("items", "items").last_id() is None
