"""Parses and validates the structured transcription returned by the model."""

import json
from typing import Any

from handnotes.transcription.exceptions import TranscriptionOutputError
from handnotes.transcription.models import Paragraph, StructuredTranscription

RAW_EXCERPT_LENGTH = 500


def parse_structured_output(raw: str) -> StructuredTranscription:
    """Parse strict-JSON model output into a StructuredTranscription.

    Raises:
        TranscriptionOutputError: if the output is not a JSON object or lacks
            cleaned_text / structured_json.
    """
    data = _parse_json(raw)
    cleaned_text = data.get("cleaned_text")
    structured = data.get("structured_json")
    if not isinstance(cleaned_text, str) or not isinstance(structured, dict):
        raise TranscriptionOutputError(
            "Model output missing expected fields",
            raw_excerpt=raw[:RAW_EXCERPT_LENGTH],
        )
    return StructuredTranscription(
        cleaned_text=cleaned_text.strip(),
        paragraphs=_build_paragraphs(structured.get("paragraphs", []), raw),
    )


def _parse_json(raw: str) -> dict[str, Any]:
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise TranscriptionOutputError(
            f"Model output not valid JSON: {exc}",
            raw_excerpt=raw[:RAW_EXCERPT_LENGTH],
        ) from exc

    if not isinstance(parsed, dict):
        raise TranscriptionOutputError(
            "Model output not valid JSON: expected an object",
            raw_excerpt=raw[:RAW_EXCERPT_LENGTH],
        )
    return parsed


def _build_paragraphs(raw_items: Any, raw: str) -> list[Paragraph]:
    if not isinstance(raw_items, list):
        raise TranscriptionOutputError(
            "Model output missing expected fields: 'paragraphs' must be a list",
            raw_excerpt=raw[:RAW_EXCERPT_LENGTH],
        )
    paragraphs: list[Paragraph] = []
    for position, item in enumerate(raw_items, start=1):
        if not isinstance(item, dict) or not isinstance(item.get("text"), str):
            raise TranscriptionOutputError(
                f"Model output missing expected fields: paragraph {position} has no text",
                raw_excerpt=raw[:RAW_EXCERPT_LENGTH],
            )
        index = item.get("index")
        if not isinstance(index, int) or isinstance(index, bool):
            index = position
        paragraphs.append(Paragraph(index=index, text=item["text"]))
    return paragraphs
