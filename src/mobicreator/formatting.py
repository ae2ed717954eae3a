"""Inline formatting rules applied to each source line."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Union

from mobicreator.entity import Entity

_FRAGMENT_RE = re.compile(r"\x00(\d+)\x00")


@dataclass
class Footnote:
    """A footnote collected while formatting a chapter."""

    ordinal: int
    body: Entity

    @property
    def anchor(self) -> str:
        return f"fn-{self.ordinal}"

    def render(self) -> str:
        return self.body.render()


@dataclass
class FormatState:
    """Mutable state for formatting one line of a chapter.

    Attributes:
        footnotes: The chapter's footnote list, appended to in place.
        fragments: Markup produced by delegate rules for the current line.
            It is kept out of the line until the end so that later rules do
            not rewrite characters inside it.
    """

    footnotes: list[Footnote]
    fragments: list[str] = field(default_factory=list)

    def hold(self, markup: str) -> str:
        self.fragments.append(markup)
        return f"\x00{len(self.fragments) - 1}\x00"

    def release(self, text: str) -> str:
        def restore(match: re.Match[str]) -> str:
            index = int(match.group(1))
            if index >= len(self.fragments):
                return match.group(0)
            return self.release(self.fragments[index])

        return _FRAGMENT_RE.sub(restore, text)


@dataclass(frozen=True)
class WrapRule:
    """Wrap capture group 1 in a fixed tag."""

    name: str
    pattern: re.Pattern[str]
    tag: str

    def apply(self, match: re.Match[str], state: FormatState, formatter: InlineFormatter) -> str:
        return f"<{self.tag}>{match.group(1)}</{self.tag}>"


@dataclass(frozen=True)
class DelegateRule:
    """Hand the match to a named transform that returns finished markup."""

    name: str
    pattern: re.Pattern[str]
    transform: Callable[[re.Match[str], FormatState, "InlineFormatter"], str]

    def apply(self, match: re.Match[str], state: FormatState, formatter: InlineFormatter) -> str:
        return state.hold(self.transform(match, state, formatter))


Rule = Union[WrapRule, DelegateRule]


def link_transform(match: re.Match[str], state: FormatState, formatter: InlineFormatter) -> str:
    """Render ``[@,target,label]`` as an anchor."""
    target = state.release(match.group(1)).strip()
    label = match.group(2)
    text = state.release(label).strip() if label is not None and label.strip() else target
    return Entity("a", {"href": target}, text).render()


def footnote_transform(match: re.Match[str], state: FormatState, formatter: InlineFormatter) -> str:
    """Collect ``[+,text]`` as the chapter's next footnote and link to it."""
    ordinal = len(state.footnotes) + 1
    text = formatter.apply_wraps(match.group(1).strip(), state)
    body = Entity("p").add_class("small")
    body.append(Entity("a", {"name": f"fn-{ordinal}"}))
    body.append(f"{ordinal}. {state.release(text)}")
    state.footnotes.append(Footnote(ordinal=ordinal, body=body))
    return f'<sup><a href="#fn-{ordinal}">{ordinal}</a></sup>'


LINK_RULE = DelegateRule("link", re.compile(r"\[@,([^,\]]+)(?:,([^\]]*))?\]"), link_transform)
FOOTNOTE_RULE = DelegateRule("footnote", re.compile(r"\[\+,([^\]]+)\]"), footnote_transform)
EMPHASIS_RULE = WrapRule("emphasis", re.compile(r"_([^_]+)_"), "em")
STRONG_RULE = WrapRule("strong", re.compile(r"\*([^*]+)\*"), "strong")

# Links and footnotes run first so "*" and "_" inside them stay literal.
DEFAULT_RULES: tuple[Rule, ...] = (LINK_RULE, FOOTNOTE_RULE, EMPHASIS_RULE, STRONG_RULE)


class InlineFormatter:
    """Apply an ordered list of rules to a line of text.

    Each rule replaces its leftmost match until none is left, then the next
    rule runs on the result.
    """

    def __init__(self, rules: tuple[Rule, ...] = DEFAULT_RULES) -> None:
        self.rules = rules

    def format(self, line: str, footnotes: list[Footnote]) -> str:
        state = FormatState(footnotes=footnotes)
        # NUL is reserved for held fragments and is not valid XHTML anyway.
        line = line.replace("\x00", "")
        return state.release(self._apply(line, self.rules, state))

    def apply_wraps(self, text: str, state: FormatState) -> str:
        """Apply only the plain wrapping rules, keeping held fragments."""
        return self._apply(text, tuple(rule for rule in self.rules if isinstance(rule, WrapRule)), state)

    def _apply(self, text: str, rules: tuple[Rule, ...], state: FormatState) -> str:
        for rule in rules:
            match = rule.pattern.search(text)
            while match:
                text = text[: match.start()] + rule.apply(match, state, self) + text[match.end() :]
                match = rule.pattern.search(text)
        return text
