import uuid
from pathlib import PurePosixPath

from handnotes.database.models import PageRecord
from handnotes.database.repositories.page_repository import PageRepository
from handnotes.logging.logger import Log
from handnotes.pages.exceptions import InvalidUploadError
from handnotes.pages.models import IncomingFile, UploadContext
from handnotes.pages.saga import Saga
from handnotes.pages.upload_steps import (
    ComputePageIndexStep,
    InsertPageStep,
    ResolvePublicUrlStep,
    StoreImageStep,
)
from handnotes.storage.base import BaseObjectStore

DEFAULT_EXTENSION = "png"


def build_storage_path(document_id: str, filename: str | None) -> str:
    """Build the object key: {document_id}/{random token}.{extension}"""
    suffix = PurePosixPath(filename or "").suffix.lstrip(".").lower()
    extension = suffix or DEFAULT_EXTENSION
    return f"{document_id}/{uuid.uuid4()}.{extension}"


class PageUploader:
    """Validates an upload and runs the store-then-insert saga for it."""

    def __init__(self, saga: Saga) -> None:
        self._saga = saga

    def upload(self, document_id: str | None, file: IncomingFile | None) -> PageRecord:
        """Store the image and create its page row.

        Raises:
            InvalidUploadError: if the request fails validation; nothing is stored.
            SagaStepError: if a storage or database step fails; the uploaded
                object has been deleted.
        """
        document_id = (document_id or "").strip()
        file = self._validate(document_id, file)

        context = UploadContext(
            document_id=document_id,
            file=file,
            storage_path=build_storage_path(document_id, file.filename),
        )
        Log.info(
            f"Uploading '{file.filename}' ({file.size} bytes) to document {document_id}"
        )
        context = self._saga.run(context)
        if context.page is None:
            raise RuntimeError("Upload saga finished without a page row")
        return context.page

    @staticmethod
    def _validate(document_id: str, file: IncomingFile | None) -> IncomingFile:
        if not document_id:
            raise InvalidUploadError("Missing documentId")
        if file is None:
            raise InvalidUploadError("Missing file")
        if not file.content_type.startswith("image/"):
            raise InvalidUploadError(
                f"File must be an image. Got: {file.content_type or 'unknown'}"
            )
        if file.size <= 0:
            raise InvalidUploadError("Empty file")
        return file


def build_page_uploader(store: BaseObjectStore, page_repo: PageRepository) -> PageUploader:
    """Build a PageUploader with the steps in saga order."""
    saga = Saga(
        steps=[
            StoreImageStep(store),
            ResolvePublicUrlStep(store),
            ComputePageIndexStep(page_repo),
            InsertPageStep(page_repo),
        ]
    )
    return PageUploader(saga)
