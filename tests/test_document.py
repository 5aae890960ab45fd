"""Unit tests for doctree.domains.documents.entities: Document aggregate."""

import pytest

from doctree.domains.documents.entities import Document, DocumentStatus
from doctree.domains.errors import InvalidArgumentError, InvalidOperationError


@pytest.fixture
def document(user_id):
    return Document.create("Title", "Body", user_id, description="About")


class TestDocumentCreation:

    def test_created_as_draft(self, document, user_id):
        assert document.status == DocumentStatus.DRAFT
        assert document.is_draft
        assert document.created_by == user_id
        assert document.description == "About"
        assert document.last_modified_at == document.created_at

    @pytest.mark.parametrize("title", [None, "", "   "])
    def test_rejects_missing_title(self, user_id, title):
        with pytest.raises(InvalidArgumentError):
            Document.create(title, "Body", user_id)

    @pytest.mark.parametrize("content", [None, ""])
    def test_rejects_missing_content(self, user_id, content):
        with pytest.raises(InvalidArgumentError):
            Document.create("Title", content, user_id)

    def test_invalid_argument_is_value_error(self, user_id):
        with pytest.raises(ValueError):
            Document.create(None, "Body", user_id)


class TestDocumentMutation:

    def test_update_content(self, document):
        before = document.last_modified_at
        document.update_content("New", "New body")
        assert document.title == "New"
        assert document.content == "New body"
        assert document.description is None
        assert document.last_modified_at > before

    def test_update_content_rejects_empty_without_changes(self, document):
        before = document.last_modified_at
        with pytest.raises(InvalidArgumentError):
            document.update_content("New", "")
        assert document.title == "Title"
        assert document.content == "Body"
        assert document.last_modified_at == before

    def test_publish(self, document):
        before = document.last_modified_at
        document.publish()
        assert document.is_published
        assert document.last_modified_at > before

    def test_archive_from_draft(self, document):
        document.archive()
        assert document.is_archived

    def test_archive_from_published(self, document):
        document.publish()
        document.archive()
        assert document.status == DocumentStatus.ARCHIVED

    def test_archived_cannot_be_published(self, document):
        document.archive()
        with pytest.raises(InvalidOperationError):
            document.publish()
        assert document.is_archived

    def test_equality_by_id(self, document, user_id):
        other = Document.create("Title", "Body", user_id)
        assert document != other
        assert document == Document(document.id, "Other", "Other", user_id)
