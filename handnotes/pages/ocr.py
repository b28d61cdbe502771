from datetime import datetime, timezone

from handnotes.database.repositories.page_repository import PageRepository
from handnotes.logging.logger import Log
from handnotes.pages.exceptions import PageNotFoundError, PersistenceError
from handnotes.pages.image_fetcher import ImageFetcher
from handnotes.pages.models import OcrOutcome
from handnotes.transcription.base import BaseTranscriber


class PageOcr:
    """Transcribes a stored page image and records the result on the page row.

    Flow: load page -> fetch image -> inline as data URL -> transcribe -> persist.
    The plain variant persists best-effort; the structured variant must persist.
    """

    def __init__(
        self,
        page_repo: PageRepository,
        fetcher: ImageFetcher,
        transcriber: BaseTranscriber,
    ) -> None:
        self._page_repo = page_repo
        self._fetcher = fetcher
        self._transcriber = transcriber

    def run(self, page_id: str, structured: bool = False) -> OcrOutcome:
        """Run OCR for a page.

        Raises:
            PageNotFoundError: if the page is absent or has no image URL.
            ImageDownloadError / NotAnImageError: if the image cannot be fetched.
            TranscriptionError: if the model call or its output fails.
            PersistenceError: structured variant only, if saving fails.
        """
        image_url = (self._page_repo.find_image_url(page_id) or "").strip()
        if not image_url:
            raise PageNotFoundError("Page not found / missing image_original_url")

        image = self._fetcher.fetch(image_url)
        Log.info(f"Fetched {len(image.data)} bytes ({image.content_type}) for page {page_id}")
        data_url = image.to_data_url()

        if structured:
            return self._run_structured(page_id, data_url)
        return self._run_plain(page_id, data_url)

    def _run_plain(self, page_id: str, data_url: str) -> OcrOutcome:
        text = self._transcriber.transcribe(data_url)
        outcome = OcrOutcome(page_id=page_id, text=text, model=self._transcriber.model)
        try:
            self._page_repo.update_ocr_result(
                page_id,
                ocr_text=text,
                processed_at=datetime.now(timezone.utc),
            )
            outcome.persisted = True
        except Exception as exc:
            Log.warning(f"OCR result for page {page_id} was not saved: {exc}")
        return outcome

    def _run_structured(self, page_id: str, data_url: str) -> OcrOutcome:
        result = self._transcriber.transcribe_structured(data_url)
        structured_json = result.structured_json()
        try:
            self._page_repo.update_ocr_result(
                page_id,
                ocr_text=result.cleaned_text,
                ocr_json=structured_json,
                processed_at=datetime.now(timezone.utc),
            )
            page = self._page_repo.find_by_id(page_id)
        except Exception as exc:
            raise PersistenceError(f"Failed to save OCR result: {exc}") from exc

        return OcrOutcome(
            page_id=page_id,
            text=result.cleaned_text,
            model=self._transcriber.model,
            structured_json=structured_json,
            page=page,
            persisted=True,
        )
