"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, replace
from datetime import datetime


@dataclass(frozen=True)
class Author:
    """Value object embedded in a document; matched only by ``id`` during search."""

    id: str
    name: str | None = None


@dataclass
class Document:
    """Core domain entity representing a stored document.

    ``id`` and ``created_at`` are resolved on the first upsert and never change
    afterwards. Every other field is replaced wholesale by each upsert.
    """

    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created_at: datetime | None = None

    def copy(self) -> "Document":
        """Return a detached copy (``Author`` is immutable, so a shallow copy suffices)."""
        return replace(self)
