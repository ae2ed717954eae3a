"""Markup tree nodes that serialize themselves to XHTML."""

from __future__ import annotations

from typing import Iterable, Union

from mobicreator.exceptions import InvalidEntityKindError

BLOCK_KINDS = frozenset(
    {
        "title",
        "div",
        "p",
        "br",
        "img",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "ul",
        "li",
        "mbp:pagebreak",
    }
)
INLINE_KINDS = frozenset({"a", "b"})
VALID_KINDS = BLOCK_KINDS | INLINE_KINDS

Content = Union["Entity", str]


class Entity:
    """A tag of the generated document.

    Children are other entities or literal strings. Strings are emitted
    verbatim, so inline markup produced by the formatter passes through.
    """

    def __init__(
        self,
        name: str,
        attributes: dict[str, str] | None = None,
        children: Iterable[Content] | Content | None = None,
    ) -> None:
        if name not in VALID_KINDS:
            raise InvalidEntityKindError(f"{name!r} is not a supported entity")
        self.name = name
        self.attributes: dict[str, str] = dict(attributes or {})
        self.classes: list[str] = []
        if children is None:
            self.children: list[Content] = []
        elif isinstance(children, (str, Entity)):
            self.children = [children]
        else:
            self.children = list(children)

    def append(self, child: Content) -> Entity:
        self.children.append(child)
        return self

    def set_attribute(self, key: str, value: str) -> Entity:
        self.attributes[key] = value
        return self

    def __setitem__(self, key: str, value: str) -> None:
        self.set_attribute(key, value)

    def __getitem__(self, key: str) -> str:
        return self.attributes[key]

    def add_class(self, name: str) -> Entity:
        self.classes.append(name)
        return self

    def is_empty(self) -> bool:
        return not self.children

    @property
    def is_block(self) -> bool:
        return self.name in BLOCK_KINDS

    def render(self) -> str:
        """Serialize the entity and its children."""
        parts = [f"<{self.name}"]
        if self.attributes:
            parts.append(" " + " ".join(f'{key}="{value}"' for key, value in self.attributes.items()))
        if self.classes:
            parts.append(f' class="{" ".join(self.classes)}"')
        if self.children:
            parts.append(f">{render_content(self.children)}</{self.name}>")
        else:
            parts.append("/>")
        if self.is_block:
            parts.append("\n")
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Entity({self.name!r}, attributes={self.attributes!r}, children={len(self.children)})"


def render_content(content: Iterable[Content]) -> str:
    """Render a sequence of entities and strings, one per line."""
    return "\n".join(item.render() if isinstance(item, Entity) else str(item) for item in content)
