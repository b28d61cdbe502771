import base64
from dataclasses import dataclass
from typing import Any

from handnotes.database.models import PageRecord


@dataclass(frozen=True)
class IncomingFile:
    """An uploaded file as received from the client."""

    filename: str | None
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class FetchedImage:
    """Image bytes downloaded from a page's image_original_url."""

    content_type: str
    data: bytes

    def to_data_url(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.content_type};base64,{encoded}"


@dataclass(slots=True)
class UploadContext:
    """Accumulates state as an upload moves through the saga steps."""

    document_id: str
    file: IncomingFile
    storage_path: str
    image_original_url: str = ""
    page_index: int = 0
    page: PageRecord | None = None


@dataclass
class OcrOutcome:
    """Result of one OCR invocation for a page."""

    page_id: str
    text: str
    model: str
    structured_json: dict[str, Any] | None = None
    page: PageRecord | None = None
    persisted: bool = False
