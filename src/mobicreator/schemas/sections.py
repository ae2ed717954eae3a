"""Section models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Section(BaseModel):
    """An addressable heading inside a chapter.

    Attributes:
        title: Plain-text title used by navigation documents.
        label: Heading label as emitted in the chapter, inline markup included.
        level: Heading level.
        chapter_index: 1-based number of the owning chapter.
        position: 1-based occurrence of the heading within the chapter.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    label: str
    level: int = Field(..., ge=1, le=6)
    chapter_index: int = Field(..., ge=1)
    position: int = Field(..., ge=1)

    @property
    def id(self) -> str:
        return f"{self.chapter_index}-{self.position}"
