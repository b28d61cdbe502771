from dataclasses import dataclass

from fastapi import Request

from handnotes.config.settings import Settings
from handnotes.database.repositories.document_repository import DocumentRepository
from handnotes.database.repositories.page_repository import PageRepository
from handnotes.pages.image_fetcher import ImageFetcher
from handnotes.pages.ocr import PageOcr
from handnotes.pages.uploader import PageUploader, build_page_uploader
from handnotes.storage.factory import ObjectStoreFactory
from handnotes.transcription.factory import TranscriberFactory


@dataclass
class Services:
    """Process-wide collaborators shared by every request handler."""

    documents: DocumentRepository
    pages: PageRepository
    uploader: PageUploader
    ocr: PageOcr
    fetcher: ImageFetcher | None = None

    def close(self) -> None:
        if self.fetcher is not None:
            self.fetcher.close()


def build_services(settings: Settings) -> Services:
    """Build all clients once from settings. The DB pool must already be initialized."""
    store = ObjectStoreFactory.create(settings)
    page_repo = PageRepository()
    fetcher = ImageFetcher(timeout_seconds=settings.image_fetch_timeout_seconds)
    transcriber = TranscriberFactory.create(settings)
    return Services(
        documents=DocumentRepository(),
        pages=page_repo,
        uploader=build_page_uploader(store, page_repo),
        ocr=PageOcr(page_repo=page_repo, fetcher=fetcher, transcriber=transcriber),
        fetcher=fetcher,
    )


def get_services(request: Request) -> Services:
    return request.app.state.services
