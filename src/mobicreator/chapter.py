"""Parse chapter sources into entity trees."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from html import escape
from pathlib import Path
from typing import Callable, Iterable

from mobicreator.attributes import parse_attributes
from mobicreator.config import DEFAULT_STYLESHEET, MAX_HEADER_DEPTH, MAX_TITLE_LENGTH
from mobicreator.entity import Entity, render_content
from mobicreator.exceptions import (
    ChapterParseError,
    InvalidEntityKindError,
    MalformedAttributeListError,
    SourceNotFoundError,
)
from mobicreator.formatting import Footnote, InlineFormatter
from mobicreator.html_utils import strip_markup
from mobicreator.schemas import Section
from mobicreator.sections import SectionCounter
from mobicreator.utils.logging_config import get_logger

logger = get_logger(__name__)

_HEADER_PREFIX_RE = re.compile(r"^=+\s*")
_LIST_PREFIX_RE = re.compile(r"^\*\s*")
_DIV_RE = re.compile(r"^-(?:\.([\w-]+))?")
_TAG_RE = re.compile(r"^<([\w:]+)(?:\.([\w-]+))?(?:\s+([^>]*?))?\s*/?>")

CHAPTER_TEMPLATE = """\
<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.1//EN" "http://www.w3.org/TR/xhtml11/DTD/xhtml11.dtd">
<html xmlns="http://www.w3.org/1999/xhtml">
<head>
<title>{title}</title>
<link rel="stylesheet" href="{stylesheet}" type="text/css" />
</head>
<body>

{body}

</body>
</html>
"""


def render_document(title: str, body: str, *, stylesheet: str = DEFAULT_STYLESHEET) -> str:
    """Wrap rendered body markup in the XHTML document template."""
    return CHAPTER_TEMPLATE.format(title=escape(title, quote=False), stylesheet=stylesheet, body=body)


@dataclass(frozen=True)
class Chapter:
    """One parsed chapter source.

    Attributes:
        index: 1-based position of the chapter in the book.
        title: Plain-text chapter title.
        entities: Top-level entities in document order.
        sections: Sections in header order.
        footnotes: Footnotes in allocation order.
        source: Path of the source file.
        file_name: Output document name.
    """

    index: int
    title: str
    entities: tuple[Entity, ...]
    sections: tuple[Section, ...]
    footnotes: tuple[Footnote, ...]
    source: Path
    file_name: str

    def render(self, *, stylesheet: str = DEFAULT_STYLESHEET) -> str:
        """Render the full XHTML document, footnotes last."""
        body = render_content(self.entities)
        body += "".join(footnote.render() + "\n" for footnote in self.footnotes)
        return render_document(self.title, body, stylesheet=stylesheet)


@dataclass
class _ParserState:
    """Per-chapter parser state, never shared between chapters."""

    sections: SectionCounter
    root: list[Entity] = field(default_factory=list)
    divs: list[Entity] = field(default_factory=list)
    footnotes: list[Footnote] = field(default_factory=list)
    paragraph: Entity = field(default_factory=lambda: Entity("p"))
    pending_list: Entity | None = None
    title: str | None = None

    @property
    def container(self) -> list:
        return self.divs[-1].children if self.divs else self.root

    def flush_list(self) -> None:
        if self.pending_list is not None:
            self.container.append(self.pending_list)
        self.pending_list = None

    def flush_paragraph(self) -> None:
        if not self.paragraph.is_empty():
            self.container.append(self.paragraph)
        self.paragraph = Entity("p")

    def close_div(self) -> None:
        div = self.divs.pop()
        self.container.append(div)


class ChapterParser:
    """Line-oriented state machine building one chapter.

    The first character of each raw line selects a command; anything else
    is body text collected into paragraphs.
    """

    def __init__(self, formatter: InlineFormatter | None = None) -> None:
        self.formatter = formatter or InlineFormatter()
        self._commands: dict[str, Callable[[_ParserState, str], None]] = {
            "#": self._title,
            "=": self._header,
            "*": self._list_item,
            "-": self._div,
            "<": self._tag,
            "^": self._section_marker,
            "!": self._page_break,
            ":": self._end_of_chapter,
        }

    def parse(
        self,
        lines: Iterable[str],
        *,
        index: int,
        source: Path | str,
        file_name: str | None = None,
    ) -> Chapter:
        """Parse source lines into a chapter.

        Args:
            lines: Source lines, with or without line endings.
            index: 1-based chapter number, used in section ids.
            source: Source path, used for error context and default names.
            file_name: Output document name. Defaults to ``<stem>.html``.

        Returns:
            The parsed chapter.

        Raises:
            ChapterParseError: If a line holds an unknown tag or a malformed
                attribute list.
        """
        source = Path(source)
        state = _ParserState(sections=SectionCounter(index))

        for number, raw in enumerate(lines, start=1):
            try:
                self._parse_line(state, raw.rstrip())
            except (InvalidEntityKindError, MalformedAttributeListError) as exc:
                raise ChapterParseError(str(exc), source=source, line=number) from exc

        state.flush_paragraph()
        state.flush_list()
        if state.divs:
            logger.warning("Unclosed div at end of %s, closing it", source)
        while state.divs:
            state.close_div()

        chapter = Chapter(
            index=index,
            title=state.title if state.title is not None else source.stem,
            entities=tuple(state.root),
            sections=tuple(state.sections.sections),
            footnotes=tuple(state.footnotes),
            source=source,
            file_name=file_name or f"{source.stem}.html",
        )
        logger.debug(
            "Parsed chapter %d from %s: %d entities, %d sections, %d footnotes",
            index,
            source,
            len(chapter.entities),
            len(chapter.sections),
            len(chapter.footnotes),
        )
        return chapter

    def _parse_line(self, state: _ParserState, raw: str) -> None:
        command = self._commands.get(raw[:1])
        if command == self._tag:
            # Tag lines carry attribute values such as file names, read them raw.
            line = raw
        elif command == self._list_item:
            # The marker must not pair with an inline "*".
            line = self.formatter.format(_LIST_PREFIX_RE.sub("", raw), state.footnotes)
        else:
            line = self.formatter.format(raw, state.footnotes)

        if command is not None:
            if command not in (self._title, self._section_marker):
                state.flush_paragraph()
            if command != self._list_item:
                state.flush_list()
            command(state, line)
            return

        state.flush_list()
        if line:
            state.paragraph.append(line)
        else:
            state.flush_paragraph()

    def _title(self, state: _ParserState, line: str) -> None:
        state.title = strip_markup(line[1:])[:MAX_TITLE_LENGTH]

    def _header(self, state: _ParserState, line: str) -> None:
        depth = len(line) - len(line.lstrip("="))
        level = min(depth, MAX_HEADER_DEPTH)
        label = _HEADER_PREFIX_RE.sub("", line)
        section = state.sections.allocate(title=strip_markup(label), label=label, level=level)
        heading = Entity(f"h{level}")
        heading.append(Entity("a", {"name": section.id}))
        heading.append(label)
        state.container.append(heading)

    def _list_item(self, state: _ParserState, line: str) -> None:
        if state.pending_list is None:
            state.pending_list = Entity("ul")
        state.pending_list.append(Entity("li", children=line))

    def _div(self, state: _ParserState, line: str) -> None:
        if state.divs:
            state.close_div()
            return
        div = Entity("div")
        match = _DIV_RE.match(line)
        if match and match.group(1):
            div.add_class(match.group(1))
        state.divs.append(div)

    def _tag(self, state: _ParserState, line: str) -> None:
        match = _TAG_RE.match(line)
        if not match:
            raise MalformedAttributeListError(f"Cannot read tag line {line!r}")
        name, css_class, attributes = match.groups()
        entity = Entity(name, parse_attributes(attributes or ""))
        if css_class:
            entity.add_class(css_class)
        state.container.append(entity)

    def _section_marker(self, state: _ParserState, line: str) -> None:
        """Reserved for custom markers."""

    def _page_break(self, state: _ParserState, line: str) -> None:
        state.container.append(Entity("mbp:pagebreak"))

    def _end_of_chapter(self, state: _ParserState, line: str) -> None:
        state.container.append(Entity("h1", children="* * *").add_class("centered"))


def parse_chapter(
    text: str,
    *,
    index: int = 1,
    source: Path | str = "chapter.txt",
    file_name: str | None = None,
) -> Chapter:
    """Parse chapter source text."""
    return ChapterParser().parse(text.splitlines(), index=index, source=source, file_name=file_name)


def load_chapter(source: Path, *, index: int) -> Chapter:
    """Read and parse a chapter source file.

    Raises:
        SourceNotFoundError: If the source file does not exist.
        ChapterParseError: If the source cannot be parsed.
    """
    if not source.is_file():
        raise SourceNotFoundError(f"Chapter source not found: {source}")
    with source.open("r", encoding="utf-8") as handle:
        return ChapterParser().parse(handle, index=index, source=source)
