from typing import ClassVar

from handnotes.config.settings import Settings
from handnotes.transcription.base import BaseTranscriber
from handnotes.transcription.example_client_adapter import ExampleClientAdapter
from handnotes.transcription.openai_client_adapter import OpenAIClientAdapter
from handnotes.transcription.transcriber import Transcriber


class TranscriberFactory:
    """Creates the configured transcriber."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseTranscriber:
        """Create a configured transcriber from application settings."""
        provider = settings.transcription_provider.lower()
        if provider == "example":
            return Transcriber(client=ExampleClientAdapter(), model="example")
        client = OpenAIClientAdapter(
            api_key=settings.openai_api_key,
            timeout_seconds=settings.openai_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )
        return Transcriber(client=client, model=settings.openai_model_name)

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return settings.openai_base_url.strip() or None
        if provider == "openai_compatible":
            url = settings.openai_base_url.strip()
            if not url:
                raise ValueError(
                    "openai_base_url is required for "
                    "transcription_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return settings.openai_base_url.strip() or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown transcription provider '{provider}'. Choose from: {supported}"
        )
