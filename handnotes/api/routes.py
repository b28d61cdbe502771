from typing import Any

from fastapi import APIRouter, Depends, File, Form, UploadFile
from starlette.datastructures import UploadFile as StarletteUploadFile

from handnotes.api.dependencies import Services, get_services
from handnotes.api.schemas import OcrRequest
from handnotes.logging.logger import Log
from handnotes.pages.exceptions import DocumentNotFoundError, InvalidRequestError
from handnotes.pages.models import IncomingFile

router = APIRouter(prefix="/api", tags=["handnotes"])


@router.post("/documents")
def create_document(services: Services = Depends(get_services)) -> dict[str, str]:
    """Create an empty document that pages can be uploaded into."""
    document = services.documents.create()
    Log.info(f"Created document {document.id}")
    return {"id": document.id}


@router.get("/documents/{document_id}/pages")
def list_document_pages(
    document_id: str,
    services: Services = Depends(get_services),
) -> dict[str, Any]:
    if not services.documents.exists(document_id):
        raise DocumentNotFoundError(f"Document {document_id} not found")
    pages = services.pages.list_by_document(document_id)
    return {"pages": [page.to_dict() for page in pages]}


@router.post("/pages")
def upload_page(
    document_id: str | None = Form(default=None, alias="documentId"),
    file: UploadFile | str | None = File(default=None),
    services: Services = Depends(get_services),
) -> dict[str, Any]:
    """Store an uploaded image and create its page row.

    A plain text "file" field counts as a missing file.
    """
    incoming = None
    if isinstance(file, StarletteUploadFile):
        incoming = IncomingFile(
            filename=file.filename,
            content_type=file.content_type or "",
            data=file.file.read(),
        )
    page = services.uploader.upload(document_id, incoming)
    return {"page": page.to_dict()}


@router.get("/pages/{page_id}")
def get_page(page_id: str, services: Services = Depends(get_services)) -> dict[str, Any]:
    return {"page": services.pages.find_by_id(page_id).to_dict()}


@router.post("/pages/{page_id}/process")
def process_page(page_id: str, services: Services = Depends(get_services)) -> dict[str, Any]:
    """Run OCR for one page and return its id and transcription."""
    outcome = services.ocr.run(page_id)
    return {"page": {"id": outcome.page_id, "ocr_text": outcome.text}}


@router.post("/ocr")
def run_ocr(
    body: OcrRequest | None = None,
    services: Services = Depends(get_services),
) -> dict[str, Any]:
    """Transcribe a page image; with structured=true also return paragraphs."""
    request = body or OcrRequest()
    page_id = (request.page_id or "").strip()
    if not page_id:
        raise InvalidRequestError("Missing pageId")

    outcome = services.ocr.run(page_id, structured=request.structured)
    response: dict[str, Any] = {"text": outcome.text, "model": outcome.model}
    if request.structured:
        response["structured_json"] = outcome.structured_json
        response["page"] = outcome.page.to_dict() if outcome.page is not None else None
    return response
