"""Pydantic DTOs (Data Transfer Objects) for the Document feature."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field

from document_manager.domain.entities import Author, Document, DocumentQuery


class AuthorSchema(BaseModel):
    """Author embedded in a document payload."""

    id: str = Field(..., min_length=1, examples=["author1"])
    name: str | None = Field(None, examples=["John"])

    model_config = {"from_attributes": True}

    def to_entity(self) -> Author:
        return Author(id=self.id, name=self.name)


class DocumentUpsert(BaseModel):
    """Schema for creating or replacing a document — omit ``id`` to create."""

    id: str | None = None
    title: str | None = Field(None, examples=["Java Tasks"])
    content: str | None = Field(None, examples=["Some content"])
    author: AuthorSchema | None = None
    created_at: datetime | None = Field(
        None,
        validation_alias=AliasChoices("created_at", "created"),
    )

    def to_entity(self) -> Document:
        return Document(
            id=self.id,
            title=self.title,
            content=self.content,
            author=self.author.to_entity() if self.author else None,
            created_at=self.created_at,
        )


class DocumentResponse(BaseModel):
    """Schema returned to the caller."""

    id: str
    title: str | None = None
    content: str | None = None
    author: AuthorSchema | None = None
    created_at: datetime

    model_config = {"from_attributes": True}


class SearchRequest(BaseModel):
    """Search criteria — every group is optional; omitted groups match everything."""

    title_prefixes: list[str] | None = Field(None, examples=[["Java"]])
    contains_contents: list[str] | None = Field(None, examples=[["Stream"]])
    author_ids: list[str] | None = Field(None, examples=[["author1"]])
    created_from: datetime | None = None
    created_to: datetime | None = None

    def to_query(self) -> DocumentQuery:
        return DocumentQuery(
            title_prefixes=self.title_prefixes,
            contains_contents=self.contains_contents,
            author_ids=self.author_ids,
            created_from=self.created_from,
            created_to=self.created_to,
        )
