"""Concrete repository implementation backed by the in-process RecordStore."""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from document_manager.application.interfaces import DocumentRepository
from document_manager.domain.entities import Document, DocumentQuery
from document_manager.domain.identity import ensure_utc
from document_manager.infrastructure.storage.record_store import RecordStore

logger = logging.getLogger(__name__)

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


class InMemoryDocumentRepository(DocumentRepository):
    """Implements the DocumentRepository port on top of a RecordStore.

    The store only ever holds private copies; callers receive copies as well,
    so a stored document can't be modified except through ``upsert``.
    """

    def __init__(self, store: RecordStore[Document]):
        self._store = store

    def get_by_id(self, document_id: str) -> Document | None:
        stored = self._store.get(document_id)
        return stored.copy() if stored is not None else None

    def get_all(self, skip: int = 0, limit: int = 100) -> list[Document]:
        documents = sorted(
            self._store.values(),
            key=lambda doc: ensure_utc(doc.created_at) or _OLDEST,
            reverse=True,
        )
        return [doc.copy() for doc in documents[skip : skip + limit]]

    def search(self, query: DocumentQuery) -> list[Document]:
        predicates = query.predicates()
        matches = [
            doc.copy()
            for doc in self._store.values()
            if all(predicate(doc) for predicate in predicates)
        ]
        logger.debug("Search matched %d document(s) using %d criteria group(s)", len(matches), len(predicates))
        return matches

    def upsert(
        self,
        document_id: str,
        build: Callable[[Document | None], Document],
    ) -> Document:
        stored = self._store.compute(document_id, lambda current: build(current).copy())
        return stored.copy()

    def count(self) -> int:
        return len(self._store)
