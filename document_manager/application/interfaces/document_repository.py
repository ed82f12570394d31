"""Abstract repository interface (port) for Document storage."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from document_manager.domain.entities import Document, DocumentQuery


class DocumentRepository(ABC):
    """Port for document storage — implemented in the infrastructure layer."""

    @abstractmethod
    def get_by_id(self, document_id: str) -> Document | None:
        """Retrieve a single document by its identity."""
        ...

    @abstractmethod
    def get_all(self, skip: int = 0, limit: int = 100) -> list[Document]:
        """Retrieve a page of documents, newest ``created_at`` first."""
        ...

    @abstractmethod
    def search(self, query: DocumentQuery) -> list[Document]:
        """Return every document matching ``query``. Order is unspecified."""
        ...

    @abstractmethod
    def upsert(
        self,
        document_id: str,
        build: Callable[[Document | None], Document],
    ) -> Document:
        """Atomically replace the document under ``document_id``.

        ``build`` receives the currently stored document (or ``None``) and
        returns the document to store. Returns the stored document.
        """
        ...

    @abstractmethod
    def count(self) -> int:
        """Number of documents currently stored."""
        ...
