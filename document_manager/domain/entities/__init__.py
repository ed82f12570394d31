from .document import Author, Document
from .query import DocumentPredicate, DocumentQuery

__all__ = [
    "Author",
    "Document",
    "DocumentPredicate",
    "DocumentQuery",
]
