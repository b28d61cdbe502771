from abc import ABC, abstractmethod

from handnotes.transcription.models import StructuredTranscription


class BaseTranscriber(ABC):
    """Contract for all handwriting transcribers."""

    @property
    @abstractmethod
    def model(self) -> str:
        """Identifier of the model that produces transcriptions."""

    @abstractmethod
    def transcribe(self, image_data_url: str) -> str:
        """Transcribe handwriting into free text.

        Args:
            image_data_url: Inline image as a data: URL (base64 with content type).

        Returns:
            The trimmed transcription.

        Raises:
            TranscriptionError: on any failure, including empty output.
        """

    @abstractmethod
    def transcribe_structured(self, image_data_url: str) -> StructuredTranscription:
        """Transcribe handwriting into cleaned text plus paragraph items.

        Raises:
            TranscriptionError: on any failure, including malformed output.
        """
