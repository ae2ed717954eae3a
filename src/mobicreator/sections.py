"""Section bookkeeping and navigation order."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable

from mobicreator.schemas import Section

if TYPE_CHECKING:
    from mobicreator.chapter import Chapter

TOC_FILE = "toc.html"
TOC_TITLE = "Table of Contents"


class SectionCounter:
    """Allocate section ids for one chapter, in header order."""

    def __init__(self, chapter_index: int) -> None:
        self.chapter_index = chapter_index
        self.sections: list[Section] = []

    def allocate(self, title: str, label: str, level: int) -> Section:
        section = Section(
            title=title,
            label=label,
            level=level,
            chapter_index=self.chapter_index,
            position=len(self.sections) + 1,
        )
        self.sections.append(section)
        return section


@dataclass
class NavPoint:
    """One entry of the navigation map."""

    id: str
    label: str
    src: str
    play_order: int
    children: list[NavPoint] = field(default_factory=list)


def count_sections(chapters: Iterable[Chapter]) -> int:
    """Count sections across all chapters."""
    return sum(len(chapter.sections) for chapter in chapters)


def build_nav_points(chapters: Iterable[Chapter]) -> list[NavPoint]:
    """Build navigation entries with sequential play order.

    The table of contents comes first, then every chapter immediately
    followed by its own sections.
    """
    play_order = 1
    points = [NavPoint(id="toc", label=TOC_TITLE, src=TOC_FILE, play_order=play_order)]
    for chapter in chapters:
        play_order += 1
        chapter_point = NavPoint(
            id=f"chapter-{chapter.index}",
            label=chapter.title,
            src=chapter.file_name,
            play_order=play_order,
        )
        for section in chapter.sections:
            play_order += 1
            chapter_point.children.append(
                NavPoint(
                    id=f"section-{section.id}",
                    label=section.title,
                    src=f"{chapter.file_name}#{section.id}",
                    play_order=play_order,
                )
            )
        points.append(chapter_point)
    return points
