"""Application service (use case) for Document operations."""

import logging
from collections.abc import Callable
from datetime import datetime

from document_manager.application.interfaces import DocumentRepository
from document_manager.application.schemas import DocumentUpsert, SearchRequest
from document_manager.domain.entities import Document, DocumentQuery
from document_manager.domain.exceptions import EntityNotFoundError, InvalidArgumentError
from document_manager.domain.identity import ensure_utc, new_document_id, utc_now

logger = logging.getLogger(__name__)


class DocumentService:
    """Orchestrates document upsert, search and lookup. Depends on the repository port (DI).

    ``id_factory`` and ``clock`` are the identity-assignment and wall-clock
    policies; tests substitute deterministic versions.
    """

    def __init__(
        self,
        repository: DocumentRepository,
        *,
        id_factory: Callable[[], str] = new_document_id,
        clock: Callable[[], datetime] = utc_now,
        default_page_size: int = 100,
        max_page_size: int = 1000,
    ):
        self._repository = repository
        self._id_factory = id_factory
        self._clock = clock
        self._default_page_size = default_page_size
        self._max_page_size = max_page_size

    # ── Core operations ─────────────────────────────────────────────

    def upsert(self, document: Document) -> Document:
        """Create or fully replace a document, freezing its first ``created_at``.

        The candidate receives the resolved ``id`` and ``created_at``. Title,
        content and author are stored exactly as given; omitted fields are
        cleared rather than inherited from the previous version.
        """
        if document is None:
            raise InvalidArgumentError("document", "must not be None")
        if not isinstance(document, Document):
            raise InvalidArgumentError("document", f"expected Document, got {type(document).__name__}")

        if not document.id:
            document.id = self._id_factory()

        is_new = False

        def _freeze_created_at(existing: Document | None) -> Document:
            nonlocal is_new
            is_new = existing is None
            if existing is not None and existing.created_at is not None:
                document.created_at = existing.created_at
            elif document.created_at is not None:
                document.created_at = ensure_utc(document.created_at)
            else:
                document.created_at = self._clock()
            return document

        stored = self._repository.upsert(document.id, _freeze_created_at)
        logger.debug(
            "%s document %s (created_at=%s)",
            "Created" if is_new else "Updated",
            stored.id,
            stored.created_at.isoformat(),
        )
        return stored

    def search(self, query: DocumentQuery) -> list[Document]:
        """Return every stored document satisfying all active criteria groups."""
        if query is None:
            raise InvalidArgumentError("query", "must not be None")
        if not isinstance(query, DocumentQuery):
            raise InvalidArgumentError("query", f"expected DocumentQuery, got {type(query).__name__}")
        return self._repository.search(query)

    def find_by_id(self, document_id: str) -> Document | None:
        """Direct lookup; ``None`` when nothing is stored under ``document_id``."""
        if not document_id:
            return None
        return self._repository.get_by_id(document_id)

    # ── Convenience operations ──────────────────────────────────────

    def get_document(self, document_id: str) -> Document:
        document = self.find_by_id(document_id)
        if document is None:
            raise EntityNotFoundError("Document", document_id)
        return document

    def list_documents(self, skip: int = 0, limit: int | None = None) -> list[Document]:
        if limit is None:
            limit = self._default_page_size
        if skip < 0:
            raise InvalidArgumentError("skip", "must not be negative")
        if limit < 1:
            raise InvalidArgumentError("limit", "must be at least 1")
        return self._repository.get_all(skip=skip, limit=min(limit, self._max_page_size))

    def count_documents(self) -> int:
        return self._repository.count()

    def save_document(self, data: DocumentUpsert) -> Document:
        if data is None:
            raise InvalidArgumentError("data", "must not be None")
        return self.upsert(data.to_entity())

    def search_documents(self, request: SearchRequest) -> list[Document]:
        if request is None:
            raise InvalidArgumentError("request", "must not be None")
        return self.search(request.to_query())
