"""AI-powered handwriting transcriber."""

import json
from pathlib import Path

from handnotes.logging.logger import Log
from handnotes.transcription.base import BaseTranscriber
from handnotes.transcription.client_base import BaseVisionClient
from handnotes.transcription.exceptions import TranscriptionOutputError
from handnotes.transcription.models import StructuredTranscription
from handnotes.transcription.prompt_loader import load_json_schema, load_prompt
from handnotes.transcription.validator import parse_structured_output

IMAGE_DETAIL = "high"


class Transcriber(BaseTranscriber):
    """Transcribes photographed handwriting with a vision-capable model."""

    def __init__(
        self,
        *,
        client: BaseVisionClient,
        model: str,
        prompt_dir: Path | None = None,
        json_schema_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._instruction = load_prompt("transcription_prompt.txt", prompt_dir)
        self._structured_instruction = load_prompt("structured_prompt.txt", prompt_dir)
        self._json_schema = json.loads(load_json_schema(json_schema_path))

    @property
    def model(self) -> str:
        return self._model

    def transcribe(self, image_data_url: str) -> str:
        raw = self._client.transcribe_image(
            model=self._model,
            instruction=self._instruction,
            image_data_url=image_data_url,
            detail=IMAGE_DETAIL,
        )
        text = raw.strip()
        if not text:
            raise TranscriptionOutputError("Model returned empty output")
        Log.info(f"Transcription complete: {len(text)} chars from {self._model}")
        return text

    def transcribe_structured(self, image_data_url: str) -> StructuredTranscription:
        raw = self._client.transcribe_image(
            model=self._model,
            instruction=self._structured_instruction,
            image_data_url=image_data_url,
            detail=IMAGE_DETAIL,
            json_schema=self._json_schema,
        )
        Log.debug(f"AI raw response:\n{raw}")
        if not raw.strip():
            raise TranscriptionOutputError("Model returned empty output")

        result = parse_structured_output(raw)
        Log.info(
            f"Structured transcription complete: {len(result.paragraphs)} paragraphs "
            f"from {self._model}"
        )
        return result
