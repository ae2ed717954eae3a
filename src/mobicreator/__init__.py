"""mobicreator: build e-book packages from plain-text markup."""

from mobicreator.assembly import Book, create_book, create_book_async
from mobicreator.chapter import Chapter, ChapterParser, load_chapter, parse_chapter
from mobicreator.config_loader import load_config
from mobicreator.entity import Entity
from mobicreator.exceptions import (
    ChapterParseError,
    ConfigError,
    InvalidEntityKindError,
    MalformedAttributeListError,
    MediaNotFoundError,
    MobiCreatorError,
    SourceNotFoundError,
)
from mobicreator.formatting import Footnote, InlineFormatter
from mobicreator.schemas import BookConfig, BookMetadata, Section

__all__ = [
    "Book",
    "BookConfig",
    "BookMetadata",
    "Chapter",
    "ChapterParseError",
    "ChapterParser",
    "ConfigError",
    "Entity",
    "Footnote",
    "InlineFormatter",
    "InvalidEntityKindError",
    "MalformedAttributeListError",
    "MediaNotFoundError",
    "MobiCreatorError",
    "Section",
    "SourceNotFoundError",
    "create_book",
    "create_book_async",
    "load_chapter",
    "load_config",
    "parse_chapter",
]
