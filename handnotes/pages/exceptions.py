class PageError(Exception):
    """Base exception for all page upload and OCR errors."""


class InvalidRequestError(PageError):
    """Raised when a request is missing or has malformed input."""


class InvalidUploadError(InvalidRequestError):
    """Raised when an upload request fails input validation."""


class DocumentNotFoundError(PageError):
    """Raised when a referenced document does not exist."""


class PageNotFoundError(PageError):
    """Raised when a page cannot be found or has no image to process."""


class PublicUrlError(PageError):
    """Raised when the object store cannot produce a public URL for an upload."""


class ImageDownloadError(PageError):
    """Raised when the page image cannot be downloaded."""


class NotAnImageError(PageError):
    """Raised when the page image URL serves something other than an image."""


class PersistenceError(PageError):
    """Raised when an OCR result that must be saved could not be saved."""


class SagaStepError(PageError):
    """Raised when a saga step fails; completed steps have been compensated."""

    def __init__(self, step: str, cause: Exception) -> None:
        super().__init__(str(cause) or type(cause).__name__)
        self.step = step
        self.cause = cause
