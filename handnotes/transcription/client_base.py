from abc import ABC, abstractmethod


class BaseVisionClient(ABC):
    """Contract for provider-specific vision model clients."""

    @abstractmethod
    def transcribe_image(
        self,
        *,
        model: str,
        instruction: str,
        image_data_url: str,
        detail: str,
        json_schema: dict[str, object] | None = None,
    ) -> str:
        """Return the provider response for one image as plain text.

        When json_schema is given the provider is asked for strict JSON
        matching it.
        """
