"""Application configuration settings"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


class Config:
    # Server settings
    APP_ENV = os.getenv("APP_ENV", "development")
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3005"))
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

    # Storage
    DATA_DIR = os.getenv("DATA_DIR", os.path.join(os.getcwd(), "data"))
    LOG_DIR = os.getenv("LOG_DIR", os.path.join(DATA_DIR, "logs"))
    ERROR_LOG_FILE = os.getenv("ERROR_LOG_FILE", "error.log")
    STORAGE_FILE = os.getenv("STORAGE_FILE", "storage.json")
    ITEMS_COLLECTION_KEY = os.getenv("ITEMS_COLLECTION_KEY", "conversations")
    REQUESTS_FILE = os.getenv("REQUESTS_FILE", "requests.json")

    # Request audit log (GET /requests)
    REQUEST_LOG_ENABLED = _env_flag("REQUEST_LOG_ENABLED", "true")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )


# Document names used throughout the service
ITEMS = "items"
REQUESTS = "requests"


@dataclass(frozen=True)
class DocumentSpec:
    """Where a document lives on disk and which key holds its records."""

    name: str
    filename: str
    collection_key: str


@dataclass(frozen=True)
class StoreSettings:
    """
    Explicit configuration for the document store and error log.

    Built from Config in production; tests build it directly
    against a temporary directory.
    """

    base_dir: Path
    log_dir: Path
    error_log_file: str = "error.log"
    documents: dict[str, DocumentSpec] = field(default_factory=dict)
    request_log_enabled: bool = True

    @property
    def error_log_path(self) -> Path:
        return self.log_dir / self.error_log_file

    def document(self, name: str) -> DocumentSpec:
        try:
            return self.documents[name]
        except KeyError:
            raise KeyError(f"Unknown document: {name}") from None

    def path_for(self, name: str) -> Path:
        return self.base_dir / self.document(name).filename

    @classmethod
    def for_directory(
        cls,
        base_dir: Path,
        items_key: str = "conversations",
        request_log_enabled: bool = True,
    ) -> "StoreSettings":
        base_dir = Path(base_dir)
        return cls(
            base_dir=base_dir,
            log_dir=base_dir / "logs",
            documents=default_documents(items_key=items_key),
            request_log_enabled=request_log_enabled,
        )

    @classmethod
    def from_config(cls, config=Config) -> "StoreSettings":
        return cls(
            base_dir=Path(config.DATA_DIR),
            log_dir=Path(config.LOG_DIR),
            error_log_file=config.ERROR_LOG_FILE,
            documents=default_documents(
                items_file=config.STORAGE_FILE,
                items_key=config.ITEMS_COLLECTION_KEY,
                requests_file=config.REQUESTS_FILE,
            ),
            request_log_enabled=config.REQUEST_LOG_ENABLED,
        )


def default_documents(
    items_file: str = "storage.json",
    items_key: str = "conversations",
    requests_file: str = "requests.json",
) -> dict[str, DocumentSpec]:
    return {
        ITEMS: DocumentSpec(ITEMS, items_file, items_key),
        REQUESTS: DocumentSpec(REQUESTS, requests_file, "requests"),
    }
