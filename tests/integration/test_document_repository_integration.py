import uuid

import pytest

from handnotes.database.models import DocumentRecord
from handnotes.database.repositories.document_repository import DocumentRepository


@pytest.mark.integration
class TestDocumentRepositoryCreate:
    def test_create_applies_defaults(self, seed_document: DocumentRecord, db_conn) -> None:
        with db_conn.cursor() as cur:
            cur.execute(
                "SELECT title, template_type, created_at FROM documents WHERE id = %s",
                (seed_document.id,),
            )
            row = cur.fetchone()
        assert row is not None
        assert row[0] == "Untitled"
        assert row[1] == "work_doc_notes"
        assert row[2] is not None
        assert seed_document.created_at is not None

    def test_create_with_custom_title(self, integration_cleanup: list[str]) -> None:
        document = DocumentRepository().create(title="Standup", template_type="meeting")
        integration_cleanup.append(document.id)
        assert document.title == "Standup"
        assert document.template_type == "meeting"


@pytest.mark.integration
class TestDocumentRepositoryExists:
    def test_exists_for_created_document(self, seed_document: DocumentRecord) -> None:
        assert DocumentRepository().exists(seed_document.id) is True

    def test_missing_document(self, integration_pool: None) -> None:
        assert DocumentRepository().exists(str(uuid.uuid4())) is False
