"""Custom exceptions for mobicreator."""

from __future__ import annotations

from pathlib import Path


class MobiCreatorError(Exception):
    """Base exception for mobicreator operations."""


class InvalidEntityKindError(MobiCreatorError):
    """Entity constructed with a tag name outside the supported vocabulary."""


class MalformedAttributeListError(MobiCreatorError):
    """Attribute list of a raw tag line could not be parsed."""


class ChapterParseError(MobiCreatorError):
    """Error while parsing a chapter source, with file and line context."""

    def __init__(self, message: str, *, source: Path | str, line: int) -> None:
        self.source = str(source)
        self.line = line
        super().__init__(f"{self.source}:{line}: {message}")


class ConfigError(MobiCreatorError):
    """Book configuration is missing or invalid."""


class SourceNotFoundError(MobiCreatorError):
    """Chapter source file does not exist."""


class MediaNotFoundError(MobiCreatorError):
    """Referenced media file does not exist."""
