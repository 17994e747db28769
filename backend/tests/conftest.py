import json
import pytest

from fastapi.testclient import TestClient

from itemstore.config.settings import StoreSettings
from itemstore.fastapi_app import create_fastapi_app
from itemstore.infrastructure.eventlog import ErrorLog
from itemstore.infrastructure.storage import JsonDocumentStore


@pytest.fixture()
def settings(tmp_path):
    """Store settings rooted in a per-test temporary data directory."""
    return StoreSettings.for_directory(tmp_path / "data")


@pytest.fixture()
def error_log(settings):
    return ErrorLog(settings.error_log_path)


@pytest.fixture()
def store(settings, error_log):
    return JsonDocumentStore(settings, error_log)


@pytest.fixture()
def app(settings):
    """Create and configure a new FastAPI app instance for each test."""
    return create_fastapi_app(settings)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app (runs startup and shutdown)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def read_error_log(settings):
    """Parsed entries of the NDJSON error log."""

    def _read():
        path = settings.error_log_path
        if not path.exists():
            return []
        return [json.loads(line) for line in path.read_text().splitlines() if line]

    return _read
