from typing import Any

import httpx
import openai

from handnotes.transcription.client_base import BaseVisionClient
from handnotes.transcription.exceptions import (
    TranscriptionNetworkError,
    TranscriptionOutputError,
)


class OpenAIClientAdapter(BaseVisionClient):
    """Vision client adapter built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def transcribe_image(
        self,
        *,
        model: str,
        instruction: str,
        image_data_url: str,
        detail: str,
        json_schema: dict[str, object] | None = None,
    ) -> str:
        request: dict[str, Any] = {
            "model": model,
            "messages": [
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": instruction},
                        {
                            "type": "image_url",
                            "image_url": {"url": image_data_url, "detail": detail},
                        },
                    ],
                },
            ],
        }
        if json_schema is not None:
            request["response_format"] = {
                "type": "json_schema",
                "json_schema": {
                    "name": "handwriting_transcription",
                    "strict": True,
                    "schema": json_schema,
                },
            }

        try:
            response = self._client.chat.completions.create(**request)
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise TranscriptionNetworkError(
                f"AI provider network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise TranscriptionNetworkError(
                f"AI provider API error: {exc}"
            ) from exc

        if not response.choices:
            raise TranscriptionOutputError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise TranscriptionOutputError("AI returned empty response")
        return content
