import httpx

from handnotes.pages.exceptions import ImageDownloadError, NotAnImageError
from handnotes.pages.models import FetchedImage


class ImageFetcher:
    """Downloads page images over HTTP. Every call fetches fresh bytes."""

    def __init__(
        self,
        timeout_seconds: float = 30,
        client: httpx.Client | None = None,
    ) -> None:
        self._client = client if client is not None else httpx.Client(
            timeout=timeout_seconds,
            follow_redirects=True,
        )

    def fetch(self, url: str) -> FetchedImage:
        """Download an image.

        Raises:
            ImageDownloadError: on a transport failure or non-success status.
            NotAnImageError: if the response is not declared as an image.
        """
        try:
            response = self._client.get(url, headers={"Cache-Control": "no-cache"})
        except httpx.HTTPError as exc:
            raise ImageDownloadError(f"Failed to download image: {exc}") from exc

        if not response.is_success:
            raise ImageDownloadError(
                f"Failed to download image: {response.status_code} {response.reason_phrase}"
            )

        content_type = response.headers.get("content-type") or "application/octet-stream"
        if not content_type.startswith("image/"):
            raise NotAnImageError(f"URL did not return an image (got {content_type})")

        media_type = content_type.split(";", 1)[0].strip()
        return FetchedImage(content_type=media_type, data=response.content)

    def close(self) -> None:
        self._client.close()
