from .document import AuthorSchema, DocumentUpsert, DocumentResponse, SearchRequest

__all__ = [
    "AuthorSchema",
    "DocumentUpsert",
    "DocumentResponse",
    "SearchRequest",
]
