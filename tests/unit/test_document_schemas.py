"""Unit tests for the Document DTOs."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from document_manager.application.schemas import (
    AuthorSchema,
    DocumentResponse,
    DocumentUpsert,
    SearchRequest,
)
from document_manager.domain.entities import Author, Document


def test_upsert_payload_to_entity():
    payload = DocumentUpsert.model_validate(
        {
            "title": "Java Tasks",
            "content": "Some content",
            "author": {"id": "a1", "name": "John"},
            "created": "2025-01-01T08:00:00Z",
        }
    )

    document = payload.to_entity()

    assert document.id is None
    assert document.title == "Java Tasks"
    assert document.author == Author(id="a1", name="John")
    assert document.created_at == datetime(2025, 1, 1, 8, 0, tzinfo=timezone.utc)


def test_upsert_payload_accepts_created_at_name():
    payload = DocumentUpsert(created_at=datetime(2025, 1, 1, tzinfo=timezone.utc))
    assert payload.created_at is not None


def test_author_requires_id():
    with pytest.raises(ValidationError):
        AuthorSchema.model_validate({"name": "Nameless"})


def test_search_request_to_query_keeps_absent_groups_absent():
    query = SearchRequest(title_prefixes=["Java"]).to_query()
    assert query.title_prefixes == ["Java"]
    assert query.contains_contents is None
    assert query.author_ids is None
    assert query.created_from is None
    assert query.created_to is None


def test_response_from_entity():
    document = Document(
        id="123",
        title="Original",
        author=Author(id="a1"),
        created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
    )

    response = DocumentResponse.model_validate(document)

    assert response.id == "123"
    assert response.author is not None
    assert response.author.id == "a1"
    assert response.content is None
