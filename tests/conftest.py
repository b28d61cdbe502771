import uuid
from datetime import datetime, timezone
from typing import Any

import pytest

from handnotes.database.models import DocumentRecord, PageRecord, is_uuid
from handnotes.pages.exceptions import PageNotFoundError

# Image bytes are never decoded, only stored, fetched and base64-encoded.
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 56


@pytest.fixture()
def png_bytes() -> bytes:
    return PNG_BYTES


@pytest.fixture()
def jpeg_10kb() -> bytes:
    """A 10 KB payload framed like a JPEG (SOI ... EOI)."""
    return b"\xff\xd8\xff\xe0" + b"\x00" * (10 * 1024 - 6) + b"\xff\xd9"


class InMemoryDocumentRepository:
    """Stand-in for DocumentRepository backed by a dict."""

    def __init__(self) -> None:
        self.rows: dict[str, DocumentRecord] = {}

    def create(
        self,
        title: str = "Untitled",
        template_type: str = "work_doc_notes",
    ) -> DocumentRecord:
        record = DocumentRecord(
            id=str(uuid.uuid4()),
            title=title,
            template_type=template_type,
            created_at=datetime.now(timezone.utc),
        )
        self.rows[record.id] = record
        return record

    def exists(self, document_id: str) -> bool:
        return document_id in self.rows


class InMemoryPageRepository:
    """Stand-in for PageRepository backed by a dict."""

    def __init__(self, documents: InMemoryDocumentRepository) -> None:
        self._documents = documents
        self.rows: dict[str, PageRecord] = {}
        self.fail_insert: Exception | None = None

    def find_by_id(self, page_id: str) -> PageRecord:
        if page_id not in self.rows:
            raise PageNotFoundError(f"Page {page_id} not found")
        return self.rows[page_id]

    def find_image_url(self, page_id: str) -> str | None:
        page = self.rows.get(page_id)
        return page.image_original_url if page is not None else None

    def list_by_document(self, document_id: str) -> list[PageRecord]:
        pages = [p for p in self.rows.values() if p.document_id == document_id]
        return sorted(pages, key=lambda p: p.page_index)

    def latest_page_index(self, document_id: str) -> int | None:
        indexes = [p.page_index for p in self.list_by_document(document_id)]
        return max(indexes) if indexes else None

    def insert(self, **fields: Any) -> PageRecord:
        if self.fail_insert is not None:
            raise self.fail_insert
        if not is_uuid(fields["document_id"]) or not self._documents.exists(
            fields["document_id"]
        ):
            raise RuntimeError("insert violates foreign key constraint")
        record = PageRecord(
            id=str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc),
            **fields,
        )
        self.rows[record.id] = record
        return record

    def update_ocr_result(
        self,
        page_id: str,
        *,
        ocr_text: str,
        processed_at: datetime,
        ocr_json: dict[str, Any] | None = None,
    ) -> None:
        page = self.find_by_id(page_id)
        page.ocr_text = ocr_text
        page.ocr_json = ocr_json
        page.processed_at = processed_at


@pytest.fixture()
def document_repo() -> InMemoryDocumentRepository:
    return InMemoryDocumentRepository()


@pytest.fixture()
def page_repo(document_repo: InMemoryDocumentRepository) -> InMemoryPageRepository:
    return InMemoryPageRepository(document_repo)
