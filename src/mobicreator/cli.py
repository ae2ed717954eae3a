"""Command line entry point for building a book."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from mobicreator.assembly import Book, create_book, create_book_async
from mobicreator.exceptions import MobiCreatorError
from mobicreator.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mobicreator",
        description="Build an e-book package from plain-text chapter sources.",
    )
    parser.add_argument(
        "base_dir",
        nargs="?",
        default=".",
        help="Book directory holding the config file, source/ and media/ (default: current directory)",
    )
    parser.add_argument("--config", help="Configuration file name relative to the book directory")
    parser.add_argument(
        "--async",
        dest="use_async",
        action="store_true",
        help="Parse chapters concurrently",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)

    base_dir = Path(args.base_dir)
    try:
        if args.use_async:
            book = asyncio.run(create_book_async(base_dir, config_file=args.config))
        else:
            book = create_book(base_dir, config_file=args.config)
    except MobiCreatorError as exc:
        logger.debug("Build failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(_summary(book))
    return 0


def _summary(book: Book) -> str:
    return (
        f"{book.config.name}: {len(book.chapters)} chapters, "
        f"{book.section_count} sections, {len(book.media)} media files -> {book.output_dir}"
    )
