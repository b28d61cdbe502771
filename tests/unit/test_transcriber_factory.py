"""Tests for TranscriberFactory."""

from unittest.mock import patch

import pytest

from handnotes.config.settings import Settings
from handnotes.transcription.base import BaseTranscriber
from handnotes.transcription.factory import TranscriberFactory
from handnotes.transcription.transcriber import Transcriber


class TestTranscriberFactory:
    def test_creates_example_transcriber(self) -> None:
        transcriber = TranscriberFactory.create(Settings(transcription_provider="example"))
        assert isinstance(transcriber, BaseTranscriber)
        assert transcriber.model == "example"
        assert transcriber.transcribe("data:image/png;base64,AA==").startswith("Example")

    def test_creates_openai_transcriber(self) -> None:
        settings = Settings(
            transcription_provider="openai",
            openai_api_key="test-key",
            openai_model_name="gpt-4.1",
            openai_timeout_seconds=42,
        )
        with patch("handnotes.transcription.factory.OpenAIClientAdapter") as mock_adapter:
            transcriber = TranscriberFactory.create(settings)
        assert isinstance(transcriber, Transcriber)
        assert transcriber.model == "gpt-4.1"
        mock_adapter.assert_called_once_with(
            api_key="test-key",
            timeout_seconds=42,
            base_url=None,
        )

    def test_provider_name_is_case_insensitive(self) -> None:
        transcriber = TranscriberFactory.create(Settings(transcription_provider="EXAMPLE"))
        assert transcriber.model == "example"

    def test_openai_compatible_requires_base_url(self) -> None:
        settings = Settings(transcription_provider="openai_compatible")
        with pytest.raises(ValueError, match="openai_base_url is required"):
            TranscriberFactory.create(settings)

    def test_openai_compatible_uses_base_url(self) -> None:
        settings = Settings(
            transcription_provider="openai_compatible",
            openai_base_url="http://vllm:8000/v1",
        )
        with patch("handnotes.transcription.factory.OpenAIClientAdapter") as mock_adapter:
            TranscriberFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "http://vllm:8000/v1"

    @pytest.mark.parametrize("provider", ["openrouter", "groq", "together", "ollama"])
    def test_known_providers_use_default_base_url(self, provider: str) -> None:
        settings = Settings(transcription_provider=provider)
        with patch("handnotes.transcription.factory.OpenAIClientAdapter") as mock_adapter:
            TranscriberFactory.create(settings)
        assert (
            mock_adapter.call_args.kwargs["base_url"]
            == TranscriberFactory.OPENAI_COMPATIBLE_BASE_URLS[provider]
        )

    def test_base_url_override_wins_for_known_provider(self) -> None:
        settings = Settings(transcription_provider="ollama", openai_base_url="http://gpu:11434/v1")
        with patch("handnotes.transcription.factory.OpenAIClientAdapter") as mock_adapter:
            TranscriberFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "http://gpu:11434/v1"

    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown transcription provider"):
            TranscriberFactory.create(Settings(transcription_provider="unknown"))
