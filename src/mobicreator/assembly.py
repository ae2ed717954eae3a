"""Assemble a book: chapters, media, package and navigation documents."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

from mobicreator.chapter import Chapter, load_chapter
from mobicreator.config import MOBICREATOR_MEDIA_DIR, MOBICREATOR_SOURCE_DIR, MOBICREATOR_SOURCE_SUFFIX
from mobicreator.config_loader import load_config
from mobicreator.exceptions import MediaNotFoundError, SourceNotFoundError
from mobicreator.media import collect_media, copy_media
from mobicreator.output_formatter import format_navigation, format_package, format_toc
from mobicreator.schemas import BookConfig
from mobicreator.sections import TOC_FILE, count_sections
from mobicreator.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class Book:
    """An assembled book.

    Attributes:
        config: The configuration the book was built from.
        chapters: Parsed chapters in reading order.
        media: Media files found in the media directory.
        output_dir: Directory the documents were written to.
        written: Every file written, in write order.
    """

    config: BookConfig
    chapters: list[Chapter]
    media: list[Path]
    output_dir: Path
    written: list[Path] = field(default_factory=list)

    @property
    def section_count(self) -> int:
        return count_sections(self.chapters)


def create_book(
    base_dir: Path | str,
    *,
    config: BookConfig | None = None,
    config_file: str | Path | None = None,
) -> Book:
    """Build the complete book found in ``base_dir``.

    Args:
        base_dir: Book directory with ``source/`` and ``media/``.
        config: Configuration to use instead of reading the config file.
        config_file: Configuration file name, relative to ``base_dir``.

    Returns:
        The assembled book.

    Raises:
        ConfigError: If the configuration is missing or invalid.
        SourceNotFoundError: If a chapter source file is missing.
        MediaNotFoundError: If the configured cover is missing.
        ChapterParseError: If a chapter cannot be parsed.
    """
    base_dir = Path(base_dir)
    opts = config or load_config(base_dir, config_file)
    sources = _chapter_sources(base_dir, opts)
    media = _prepare_media(base_dir, opts)

    chapters = [load_chapter(source, index=index) for index, source in enumerate(sources, start=1)]
    return _write_book(base_dir, opts, chapters, media)


async def create_book_async(
    base_dir: Path | str,
    *,
    config: BookConfig | None = None,
    config_file: str | Path | None = None,
) -> Book:
    """Build the book, parsing chapters concurrently.

    Chapter numbers come from the declared order, so the result matches
    create_book exactly.
    """
    base_dir = Path(base_dir)
    opts = config or load_config(base_dir, config_file)
    sources = _chapter_sources(base_dir, opts)
    media = _prepare_media(base_dir, opts)

    chapters = await asyncio.gather(
        *(
            asyncio.to_thread(load_chapter, source, index=index)
            for index, source in enumerate(sources, start=1)
        )
    )
    return await asyncio.to_thread(_write_book, base_dir, opts, list(chapters), media)


def _chapter_sources(base_dir: Path, config: BookConfig) -> list[Path]:
    source_dir = base_dir / MOBICREATOR_SOURCE_DIR
    sources = [source_dir / f"{name}{MOBICREATOR_SOURCE_SUFFIX}" for name in config.chapters]
    for source in sources:
        if not source.is_file():
            raise SourceNotFoundError(f"Chapter source not found: {source}")
    return sources


def _prepare_media(base_dir: Path, config: BookConfig) -> list[Path]:
    media_dir = base_dir / MOBICREATOR_MEDIA_DIR
    media = collect_media(media_dir)
    if config.cover not in {path.name for path in media}:
        raise MediaNotFoundError(f"Cover image not found: {media_dir / config.cover}")
    return media


def _write_book(base_dir: Path, config: BookConfig, chapters: list[Chapter], media: list[Path]) -> Book:
    output_dir = config.output if config.output.is_absolute() else base_dir / config.output
    output_dir.mkdir(parents=True, exist_ok=True)
    book = Book(config=config, chapters=chapters, media=media, output_dir=output_dir)

    for chapter in chapters:
        _write(book, chapter.file_name, chapter.render(stylesheet=config.stylesheet))

    book.written.extend(copy_media(media, output_dir))

    _write(book, f"{config.name}.opf", format_package(config, chapters, media))
    _write(book, f"{config.name}.ncx", format_navigation(config, chapters))
    _write(book, TOC_FILE, format_toc(config, chapters))

    logger.info(
        "Assembled %s: %d chapters, %d sections, %d media files",
        config.name,
        len(chapters),
        book.section_count,
        len(media),
    )
    return book


def _write(book: Book, name: str, content: str) -> None:
    path = book.output_dir / name
    path.write_text(content, encoding="utf-8")
    logger.info("Wrote %s", path)
    book.written.append(path)
