from psycopg.rows import dict_row

from handnotes.database.connection import get_connection
from handnotes.database.models import DocumentRecord, is_uuid

DEFAULT_TITLE = "Untitled"
DEFAULT_TEMPLATE_TYPE = "work_doc_notes"


class DocumentRepository:
    """Database operations for the documents table."""

    def create(
        self,
        title: str = DEFAULT_TITLE,
        template_type: str = DEFAULT_TEMPLATE_TYPE,
    ) -> DocumentRecord:
        """Insert a document and return it with its generated ID."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    INSERT INTO documents (title, template_type)
                    VALUES (%s, %s)
                    RETURNING id, title, template_type, created_at
                    """,
                    (title, template_type),
                )
                row = cur.fetchone()
            conn.commit()

        if row is None:
            raise RuntimeError("INSERT INTO documents returned no row")

        return DocumentRecord(
            id=str(row["id"]),
            title=row["title"],
            template_type=row["template_type"],
            created_at=row["created_at"],
        )

    def exists(self, document_id: str) -> bool:
        if not is_uuid(document_id):
            return False
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT 1 FROM documents WHERE id = %s", (document_id,))
                return cur.fetchone() is not None
