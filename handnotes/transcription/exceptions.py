class TranscriptionError(Exception):
    """Raised when transcription fails."""


class TranscriptionOutputError(TranscriptionError):
    """Raised when the model output is empty, malformed, or incomplete."""

    def __init__(self, message: str, raw_excerpt: str | None = None) -> None:
        super().__init__(message)
        self.raw_excerpt = raw_excerpt


class TranscriptionNetworkError(TranscriptionError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
