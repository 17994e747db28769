"""Tests for the append-only error log."""

import json
import logging

import pytest

from itemstore.infrastructure.eventlog import ErrorLog


def _raised(exc):
    try:
        raise exc
    except Exception as e:
        return e


class TestErrorLog:
    @pytest.mark.asyncio
    async def test_appends_one_json_line_per_entry(self, tmp_path):
        log = ErrorLog(tmp_path / "error.log")

        await log.log_error(_raised(ValueError("first")), {"route": "/items", "method": "GET"})
        await log.log_error(RuntimeError("second"))

        lines = (tmp_path / "error.log").read_text().splitlines()
        assert len(lines) == 2
        first, second = (json.loads(line) for line in lines)
        assert first["message"] == "first"
        assert first["type"] == "ValueError"
        assert first["context"] == {"route": "/items", "method": "GET"}
        assert "Traceback" in first["stack"]
        assert first["timestamp"].endswith("Z")
        assert second["stack"] is None
        assert second["context"] == {}

    @pytest.mark.asyncio
    async def test_never_raises_when_directory_is_missing(self, tmp_path, caplog):
        log = ErrorLog(tmp_path / "missing" / "error.log")

        with caplog.at_level(logging.ERROR):
            await log.log_error(ValueError("lost"))

        assert not (tmp_path / "missing").exists()
        assert "Failed to write" in caplog.text

    @pytest.mark.asyncio
    async def test_unserializable_context_is_stringified(self, tmp_path):
        log = ErrorLog(tmp_path / "error.log")

        await log.log_error(ValueError("x"), {"path": tmp_path})

        entry = json.loads((tmp_path / "error.log").read_text())
        assert entry["context"]["path"] == str(tmp_path)
