from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OcrRequest(BaseModel):
    """Body of POST /api/ocr."""

    model_config = ConfigDict(populate_by_name=True)

    page_id: str | None = Field(default=None, alias="pageId")
    structured: bool = False

    @field_validator("page_id", mode="before")
    @classmethod
    def _stringify_page_id(cls, value: Any) -> Any:
        """Numeric ids are looked up by their text form."""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value
