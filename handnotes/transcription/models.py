from dataclasses import asdict, dataclass, field


@dataclass(frozen=True)
class Paragraph:
    """One paragraph of a structured transcription, in reading order."""

    index: int
    text: str


@dataclass(frozen=True)
class StructuredTranscription:
    """Output of the structured transcription variant."""

    cleaned_text: str
    paragraphs: list[Paragraph] = field(default_factory=list)

    def structured_json(self) -> dict[str, object]:
        """Payload stored in pages.ocr_json."""
        return {"paragraphs": [asdict(p) for p in self.paragraphs]}
