"""
Dishka DI Container Setup.

- StoreSettings is supplied by the caller (Config in production,
  a temporary directory in tests)
- ErrorLog and JsonDocumentStore are app-scoped singletons: the store
  owns the per-document locks, so there must be exactly one
- Command/query handlers are request-scoped

Flow:
  Container → StoreSettings → ErrorLog → JsonDocumentStore → handlers
"""

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from itemstore.application.commands.records import AppendRecordHandler
from itemstore.application.queries.records import (
    FilterRecordsByUserHandler,
    ListRecordsHandler,
)
from itemstore.config.settings import StoreSettings
from itemstore.domain.ports.event_log import EventLog
from itemstore.domain.ports.repositories import DocumentStore
from itemstore.infrastructure.eventlog import ErrorLog
from itemstore.infrastructure.storage import JsonDocumentStore


class AppProvider(Provider):
    """Application dependency provider."""

    def __init__(self, settings: StoreSettings):
        super().__init__()
        self._settings = settings

    # ==================== SETTINGS ====================

    @provide(scope=Scope.APP)
    def get_settings(self) -> StoreSettings:
        return self._settings

    # ==================== STORAGE ====================

    @provide(scope=Scope.APP)
    def get_event_log(self, settings: StoreSettings) -> EventLog:
        return ErrorLog(settings.error_log_path)

    @provide(scope=Scope.APP)
    def get_document_store(
        self, settings: StoreSettings, event_log: EventLog
    ) -> DocumentStore:
        """
        Provide DocumentStore implementation.

        - Return type is ABSTRACT (DocumentStore)
        - Implementation is CONCRETE (JsonDocumentStore)
        """
        return JsonDocumentStore(settings, event_log)

    # ==================== HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_append_record_handler(self, store: DocumentStore) -> AppendRecordHandler:
        return AppendRecordHandler(store)

    @provide(scope=Scope.REQUEST)
    def get_list_records_handler(self, store: DocumentStore) -> ListRecordsHandler:
        return ListRecordsHandler(store)

    @provide(scope=Scope.REQUEST)
    def get_filter_records_handler(
        self, store: DocumentStore
    ) -> FilterRecordsByUserHandler:
        return FilterRecordsByUserHandler(store)


def create_container(settings: StoreSettings) -> AsyncContainer:
    return make_async_container(AppProvider(settings))
