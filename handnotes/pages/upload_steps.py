from handnotes.database.repositories.page_repository import PageRepository
from handnotes.logging.logger import Log
from handnotes.pages.exceptions import PublicUrlError
from handnotes.pages.models import UploadContext
from handnotes.pages.saga import SagaStep
from handnotes.storage.base import BaseObjectStore


class StoreImageStep(SagaStep):
    name = "storage.upload"

    def __init__(self, store: BaseObjectStore) -> None:
        self._store = store

    def run(self, context: UploadContext) -> UploadContext:
        self._store.upload(
            context.storage_path,
            context.file.data,
            context.file.content_type,
        )
        Log.info(f"Stored {context.file.size} bytes at {context.storage_path}")
        return context

    def compensate(self, context: UploadContext) -> None:
        self._store.delete(context.storage_path)
        Log.info(f"Deleted {context.storage_path}")


class ResolvePublicUrlStep(SagaStep):
    name = "storage.public_url"

    def __init__(self, store: BaseObjectStore) -> None:
        self._store = store

    def run(self, context: UploadContext) -> UploadContext:
        url = self._store.public_url(context.storage_path)
        if not url:
            raise PublicUrlError("Failed to create public URL for uploaded file.")
        context.image_original_url = url
        return context


class ComputePageIndexStep(SagaStep):
    """Next page_index = highest existing index + 1, or 1 for a new document.

    Not atomic with the insert that follows: concurrent uploads to one
    document may receive the same index.
    """

    name = "pages.select_latest_index"

    def __init__(self, page_repo: PageRepository) -> None:
        self._page_repo = page_repo

    def run(self, context: UploadContext) -> UploadContext:
        latest = self._page_repo.latest_page_index(context.document_id)
        context.page_index = (latest or 0) + 1
        return context


class InsertPageStep(SagaStep):
    name = "pages.insert"

    def __init__(self, page_repo: PageRepository) -> None:
        self._page_repo = page_repo

    def run(self, context: UploadContext) -> UploadContext:
        context.page = self._page_repo.insert(
            document_id=context.document_id,
            page_index=context.page_index,
            image_original_url=context.image_original_url,
            storage_path=context.storage_path,
            original_filename=context.file.filename,
            mime_type=context.file.content_type,
        )
        Log.info(
            f"Inserted page {context.page.id} (index {context.page_index}) "
            f"for document {context.document_id}"
        )
        return context
