"""Example vision client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseVisionClient and register the provider in TranscriberFactory.
"""

import json
from typing import ClassVar

from handnotes.transcription.client_base import BaseVisionClient


class ExampleClientAdapter(BaseVisionClient):
    """Example adapter that returns a fixed transcription.

    No network calls. Useful for local development, tests, and as a template
    for building real provider adapters.
    """

    DEFAULT_TEXT: ClassVar[str] = "Example transcription\n- first note\n- second note"

    def __init__(self) -> None:
        self.calls = 0

    def transcribe_image(
        self,
        *,
        model: str,
        instruction: str,
        image_data_url: str,
        detail: str,
        json_schema: dict[str, object] | None = None,
    ) -> str:
        _ = model, instruction, image_data_url, detail
        self.calls += 1
        if json_schema is None:
            return self.DEFAULT_TEXT
        return json.dumps({
            "cleaned_text": self.DEFAULT_TEXT,
            "structured_json": {
                "paragraphs": [{"index": 1, "text": self.DEFAULT_TEXT}],
            },
        })
