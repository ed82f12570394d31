"""Domain entity for structured document search.

A ``DocumentQuery`` holds up to five independent criteria groups. A document
matches when it satisfies every *active* group (AND); list groups are
satisfied when any one alternative matches (OR). A group set to ``None`` or
to an empty list is inactive and matches everything.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from document_manager.domain.entities.document import Document
from document_manager.domain.identity import ensure_utc

DocumentPredicate = Callable[[Document], bool]


@dataclass
class DocumentQuery:
    """Criteria for ``DocumentService.search``."""

    title_prefixes: list[str] | None = None
    contains_contents: list[str] | None = None
    author_ids: list[str] | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None

    def __post_init__(self) -> None:
        self.created_from = ensure_utc(self.created_from)
        self.created_to = ensure_utc(self.created_to)

    def is_empty(self) -> bool:
        """True when no group is active, i.e. the query matches every document."""
        return not self.predicates()

    def matches(self, document: Document) -> bool:
        return all(predicate(document) for predicate in self.predicates())

    def predicates(self) -> list[DocumentPredicate]:
        """Build one predicate per active criteria group."""
        active: list[DocumentPredicate] = []

        if self.title_prefixes:
            prefixes = tuple(self.title_prefixes)
            active.append(
                lambda doc: doc.title is not None and doc.title.startswith(prefixes)
            )

        if self.contains_contents:
            fragments = list(self.contains_contents)
            active.append(
                lambda doc: doc.content is not None
                and any(fragment in doc.content for fragment in fragments)
            )

        if self.author_ids:
            ids = frozenset(self.author_ids)
            active.append(lambda doc: doc.author is not None and doc.author.id in ids)

        if self.created_from is not None:
            lower = self.created_from
            active.append(
                lambda doc: doc.created_at is not None
                and ensure_utc(doc.created_at) >= lower
            )

        if self.created_to is not None:
            upper = self.created_to
            active.append(
                lambda doc: doc.created_at is not None
                and ensure_utc(doc.created_at) <= upper
            )

        return active
