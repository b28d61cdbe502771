import uuid
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any


def is_uuid(value: str) -> bool:
    """True if value parses as a UUID (ids in both tables are uuid columns)."""
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


@dataclass
class DocumentRecord:
    """Represents a row from the documents table."""

    id: str
    title: str
    template_type: str
    created_at: datetime | None = None


@dataclass
class PageRecord:
    """Represents a row from the pages table."""

    id: str
    document_id: str
    page_index: int
    image_original_url: str
    storage_path: str | None = None
    original_filename: str | None = None
    mime_type: str | None = None
    ocr_text: str | None = None
    ocr_json: dict[str, Any] | None = None
    processed_at: datetime | None = None
    created_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation; timestamps as ISO 8601 strings."""
        data = asdict(self)
        for key in ("processed_at", "created_at"):
            value = data[key]
            if isinstance(value, datetime):
                data[key] = value.isoformat()
        return data
