from datetime import datetime
from typing import Any

from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from handnotes.database.connection import get_connection
from handnotes.database.models import PageRecord, is_uuid
from handnotes.pages.exceptions import PageNotFoundError

_PAGE_COLUMNS = """
    id, document_id, page_index, image_original_url, storage_path,
    original_filename, mime_type, ocr_text, ocr_json, processed_at, created_at
"""


def _row_to_page(row: dict[str, Any]) -> PageRecord:
    return PageRecord(
        id=str(row["id"]),
        document_id=str(row["document_id"]),
        page_index=row["page_index"],
        image_original_url=row["image_original_url"],
        storage_path=row["storage_path"],
        original_filename=row["original_filename"],
        mime_type=row["mime_type"],
        ocr_text=row["ocr_text"],
        ocr_json=row["ocr_json"],
        processed_at=row["processed_at"],
        created_at=row["created_at"],
    )


class PageRepository:
    """Database operations for the pages table."""

    def find_by_id(self, page_id: str) -> PageRecord:
        """Find a page by ID.

        Raises:
            PageNotFoundError: if no page with this ID exists.
        """
        if not is_uuid(page_id):
            raise PageNotFoundError(f"Page {page_id} not found")
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_PAGE_COLUMNS} FROM pages WHERE id = %s",
                    (page_id,),
                )
                row = cur.fetchone()

        if row is None:
            raise PageNotFoundError(f"Page {page_id} not found")
        return _row_to_page(row)

    def find_image_url(self, page_id: str) -> str | None:
        """Return the page's image_original_url, or None if the page is absent."""
        if not is_uuid(page_id):
            return None
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    "SELECT id, image_original_url FROM pages WHERE id = %s",
                    (page_id,),
                )
                row = cur.fetchone()

        if row is None:
            return None
        return row[1]

    def list_by_document(self, document_id: str) -> list[PageRecord]:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    SELECT {_PAGE_COLUMNS}
                    FROM pages
                    WHERE document_id = %s
                    ORDER BY page_index, created_at
                    """,
                    (document_id,),
                )
                rows = cur.fetchall()
        return [_row_to_page(row) for row in rows]

    def latest_page_index(self, document_id: str) -> int | None:
        """Highest page_index stored for a document, or None if it has no pages."""
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    SELECT page_index
                    FROM pages
                    WHERE document_id = %s
                    ORDER BY page_index DESC
                    LIMIT 1
                    """,
                    (document_id,),
                )
                row = cur.fetchone()

        if row is None:
            return None
        return row[0]

    def insert(
        self,
        *,
        document_id: str,
        page_index: int,
        image_original_url: str,
        storage_path: str,
        original_filename: str | None,
        mime_type: str,
    ) -> PageRecord:
        """Insert a page with empty OCR fields and return the stored row."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    INSERT INTO pages
                    (document_id, page_index, image_original_url, storage_path,
                     original_filename, mime_type)
                    VALUES (%s, %s, %s, %s, %s, %s)
                    RETURNING {_PAGE_COLUMNS}
                    """,
                    (
                        document_id,
                        page_index,
                        image_original_url,
                        storage_path,
                        original_filename,
                        mime_type,
                    ),
                )
                row = cur.fetchone()
            conn.commit()

        if row is None:
            raise RuntimeError("INSERT INTO pages returned no row")
        return _row_to_page(row)

    def update_ocr_result(
        self,
        page_id: str,
        *,
        ocr_text: str,
        processed_at: datetime,
        ocr_json: dict[str, Any] | None = None,
    ) -> None:
        """Overwrite the OCR columns of a page.

        A plain-text result clears any earlier ocr_json so the columns always
        describe the same transcription.

        Raises:
            PageNotFoundError: if no page with this ID exists.
        """
        ocr_json_value = Jsonb(ocr_json) if ocr_json is not None else None
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    UPDATE pages
                    SET ocr_text = %s, ocr_json = %s, processed_at = %s
                    WHERE id = %s
                    """,
                    (ocr_text, ocr_json_value, processed_at, page_id),
                )
                if cur.rowcount == 0:
                    raise PageNotFoundError(f"Page {page_id} not found")
            conn.commit()
