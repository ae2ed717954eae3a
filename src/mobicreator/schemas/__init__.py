"""Shared schemas for mobicreator."""

from mobicreator.schemas.book import BookConfig, BookMetadata
from mobicreator.schemas.sections import Section

__all__ = ["BookConfig", "BookMetadata", "Section"]
