"""Book configuration models."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mobicreator.config import DEFAULT_COVER, DEFAULT_STYLESHEET


class BookMetadata(BaseModel):
    """Descriptive metadata written to the package document."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    language: str = "en"
    identifier: str = Field("", alias="isbn")
    creator: str = ""
    publisher: str = ""
    subject: str = ""
    date: str = ""
    description: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        # YAML turns dates and bare ISBNs into non-string scalars.
        if value is None:
            return ""
        if hasattr(value, "isoformat"):
            return value.isoformat()
        if isinstance(value, (int, float)):
            return str(value)
        return value


class BookConfig(BaseModel):
    """Everything needed to assemble a book.

    Attributes:
        output: Output directory, relative paths resolve against the base dir.
        name: Package name used for the .opf and .ncx file names.
        chapters: Chapter source names in reading order.
        meta: Book metadata.
        cover: Cover image file name inside the media directory.
        stylesheet: Stylesheet linked from every generated document.
    """

    output: Path
    name: str = Field(..., min_length=1)
    chapters: list[str] = Field(..., min_length=1)
    meta: BookMetadata
    cover: str = DEFAULT_COVER
    stylesheet: str = DEFAULT_STYLESHEET
