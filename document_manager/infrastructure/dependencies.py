"""Composition root — wires infrastructure to the application layer.

Each call builds an independent store → repository → service graph; there is
no process-wide document store.
"""

import logging

from document_manager.application.services import DocumentService
from document_manager.config import Settings, get_settings
from document_manager.domain.entities import Document
from document_manager.infrastructure.repositories import InMemoryDocumentRepository
from document_manager.infrastructure.storage.record_store import RecordStore

logger = logging.getLogger(__name__)


def build_document_repository(settings: Settings | None = None) -> InMemoryDocumentRepository:
    """Provides an in-memory repository over a fresh RecordStore."""
    settings = settings or get_settings()
    store: RecordStore[Document] = RecordStore(stripes=settings.store_lock_stripes)
    return InMemoryDocumentRepository(store)


def build_document_service(settings: Settings | None = None) -> DocumentService:
    """Provides a DocumentService instance with its repository wired up."""
    settings = settings or get_settings()
    repository = build_document_repository(settings)
    logger.info(
        "Document service ready (%s %s, env=%s, stripes=%d)",
        settings.app_title,
        settings.app_version,
        settings.app_env,
        settings.store_lock_stripes,
    )
    return DocumentService(
        repository,
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
    )
