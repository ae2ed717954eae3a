"""Format the package, navigation and table-of-contents documents."""

from __future__ import annotations

from html import escape
from pathlib import Path
from typing import Sequence

from mobicreator.chapter import Chapter, render_document
from mobicreator.entity import Entity
from mobicreator.html_utils import plain_label
from mobicreator.media import media_type_for
from mobicreator.schemas import BookConfig
from mobicreator.sections import TOC_FILE, TOC_TITLE, NavPoint, build_nav_points

NCX_ID = "My_Table_of_Contents"
COVER_ID = "My_Cover"
TOC_ID = "toc"


def format_package(config: BookConfig, chapters: Sequence[Chapter], media: Sequence[Path]) -> str:
    """Create the OPF document: metadata, manifest, spine and guide."""
    meta = config.meta
    lines = [
        '<?xml version="1.0" encoding="utf-8"?>',
        '<package xmlns="http://www.idpf.org/2007/opf" version="2.0" unique-identifier="BookId">',
        '<metadata xmlns:dc="http://purl.org/dc/elements/1.1/" xmlns:opf="http://www.idpf.org/2007/opf">',
        "",
        f"<dc:title>{escape(meta.title)}</dc:title>",
        f"<dc:language>{escape(meta.language)}</dc:language>",
        f'<meta name="cover" content="{COVER_ID}" />',
        f'<dc:identifier id="BookId" opf:scheme="ISBN">{escape(meta.identifier)}</dc:identifier>',
        f"<dc:creator>{escape(meta.creator)}</dc:creator>",
        f"<dc:publisher>{escape(meta.publisher)}</dc:publisher>",
        f"<dc:subject>{escape(meta.subject)}</dc:subject>",
        f"<dc:date>{escape(meta.date)}</dc:date>",
        f"<dc:description>{escape(meta.description)}</dc:description>",
        "",
        "</metadata>",
        "<manifest>",
    ]
    for chapter in chapters:
        lines.append(
            f'  <item id="{_chapter_item_id(chapter)}" media-type="application/xhtml+xml" href="{chapter.file_name}"></item>'
        )
    lines.append(f'  <item id="{TOC_ID}" media-type="application/xhtml+xml" href="{TOC_FILE}"></item>')
    lines.append("")
    for path in media:
        lines.append(f'  <item id="{path.name}" media-type="{media_type_for(path)}" href="{path.name}" />')
    lines.append("")
    lines.append(f'  <item id="{NCX_ID}" media-type="application/x-dtbncx+xml" href="{config.name}.ncx"/>')
    lines.append(f'  <item id="{COVER_ID}" media-type="{media_type_for(config.cover)}" href="{config.cover}"/>')
    lines.append("</manifest>")

    lines.append(f'<spine toc="{NCX_ID}">')
    for chapter in chapters:
        lines.append(f'  <itemref idref="{_chapter_item_id(chapter)}" />')
    lines.append("</spine>")

    lines.append("<guide>")
    lines.append(f'  <reference type="toc" title="{TOC_TITLE}" href="{TOC_FILE}"></reference>')
    if chapters:
        first = chapters[0]
        lines.append(
            f'  <reference type="text" title="{escape(first.title)}" href="{first.file_name}"></reference>'
        )
    lines.append("</guide>")
    lines.append("</package>")
    return "\n".join(lines) + "\n"


def format_navigation(config: BookConfig, chapters: Sequence[Chapter]) -> str:
    """Create the NCX navigation document."""
    meta = config.meta
    points = build_nav_points(chapters)
    depth = 2 if any(point.children for point in points) else 1
    lines = [
        '<?xml version="1.0" encoding="utf-8"?>',
        '<!DOCTYPE ncx PUBLIC "-//NISO//DTD ncx 2005-1//EN" "http://www.daisy.org/z3986/2005/ncx-2005-1.dtd">',
        '<ncx xmlns="http://www.daisy.org/z3986/2005/ncx/" version="2005-1">',
        "<head>",
        f'  <meta name="dtb:uid" content="{escape(meta.identifier)}"/>',
        f'  <meta name="dtb:depth" content="{depth}"/>',
        '  <meta name="dtb:totalPageCount" content="0"/>',
        '  <meta name="dtb:maxPageNumber" content="0"/>',
        "</head>",
        f"<docTitle><text>{escape(meta.title)}</text></docTitle>",
        f"<docAuthor><text>{escape(meta.creator)}</text></docAuthor>",
        "<navMap>",
    ]
    for point in points:
        lines.extend(_render_nav_point(point, indent=1))
    lines.append("</navMap>")
    lines.append("</ncx>")
    return "\n".join(lines) + "\n"


def format_toc(config: BookConfig, chapters: Sequence[Chapter]) -> str:
    """Create the HTML table of contents with nested section links."""
    listing = Entity("ul")
    for chapter in chapters:
        item = Entity("li", children=Entity("a", {"href": chapter.file_name}, escape(chapter.title, quote=False)))
        if chapter.sections:
            sections = Entity("ul")
            for section in chapter.sections:
                href = f"{chapter.file_name}#{section.id}"
                link = Entity("a", {"href": href}, escape(section.title, quote=False))
                sections.append(Entity("li", children=link))
            item.append(sections)
        listing.append(item)

    heading = Entity("h1", children=TOC_TITLE).add_class("centered")
    body = heading.render() + "\n" + listing.render()
    return render_document(TOC_TITLE, body, stylesheet=config.stylesheet)


def _render_nav_point(point: NavPoint, *, indent: int) -> list[str]:
    pad = "  " * indent
    lines = [
        f'{pad}<navPoint id="{point.id}" playOrder="{point.play_order}">',
        f"{pad}  <navLabel><text>{plain_label(point.label)}</text></navLabel>",
        f'{pad}  <content src="{point.src}"/>',
    ]
    for child in point.children:
        lines.extend(_render_nav_point(child, indent=indent + 1))
    lines.append(f"{pad}</navPoint>")
    return lines


def _chapter_item_id(chapter: Chapter) -> str:
    return f"item_{chapter.index - 1}"
