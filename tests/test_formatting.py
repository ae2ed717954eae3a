"""Tests for the inline formatter."""

from __future__ import annotations

import pytest

from mobicreator.formatting import DEFAULT_RULES, Footnote, InlineFormatter


@pytest.fixture
def formatter() -> InlineFormatter:
    return InlineFormatter()


class TestRuleOrder:
    """Tests for the rule table itself."""

    def test_links_and_footnotes_run_first(self) -> None:
        """Delegate rules precede the wrapping rules."""
        assert [rule.name for rule in DEFAULT_RULES] == ["link", "footnote", "emphasis", "strong"]


class TestWrapRules:
    """Tests for emphasis and strong."""

    def test_strong(self, formatter: InlineFormatter) -> None:
        assert formatter.format("Hello *world*.", []) == "Hello <strong>world</strong>."

    def test_every_match_is_replaced(self, formatter: InlineFormatter) -> None:
        """Matches are replaced until none remain."""
        assert formatter.format("_a_ and _b_", []) == "<em>a</em> and <em>b</em>"

    def test_emphasis_inside_strong(self, formatter: InlineFormatter) -> None:
        assert formatter.format("*very _much_ so*", []) == "<strong>very <em>much</em> so</strong>"

    def test_single_marker_is_literal(self, formatter: InlineFormatter) -> None:
        assert formatter.format("* item", []) == "* item"

    def test_nul_characters_removed(self, formatter: InlineFormatter) -> None:
        """NUL-wrapped digits in the source are plain text, not held markup."""
        assert formatter.format("a\x000\x00b", []) == "a0b"
        assert formatter.format("\x007\x00 _x_", []) == "7 <em>x</em>"

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "Plain text, with punctuation!",
            "<p>already markup</p>",
            "Numbers 1 + 2 = 3 (roughly).",
        ],
    )
    def test_idempotent_without_trigger_characters(self, formatter: InlineFormatter, text: str) -> None:
        """Text free of * _ [ ] is left alone, however often it is formatted."""
        once = formatter.format(text, [])
        assert once == text
        assert formatter.format(once, []) == text


class TestLinkRule:
    """Tests for [@,target,label] links."""

    def test_link_with_label(self, formatter: InlineFormatter) -> None:
        result = formatter.format("[@,http://x.com,Click]", [])
        assert result == '<a href="http://x.com">Click</a>'

    def test_label_is_trimmed(self, formatter: InlineFormatter) -> None:
        result = formatter.format("go [@,http://x.com,  Click me ] now", [])
        assert result == 'go <a href="http://x.com">Click me</a> now'

    def test_missing_label_defaults_to_trimmed_target(self, formatter: InlineFormatter) -> None:
        result = formatter.format("[@, http://x.com ]", [])
        assert result == '<a href="http://x.com">http://x.com</a>'

    def test_underscores_in_target_stay_literal(self, formatter: InlineFormatter) -> None:
        """Later rules do not rewrite markup produced by a link."""
        result = formatter.format("[@,http://x.com/a_b_c]", [])
        assert result == '<a href="http://x.com/a_b_c">http://x.com/a_b_c</a>'

    def test_link_inside_strong(self, formatter: InlineFormatter) -> None:
        result = formatter.format("*see [@,http://x.com,here]*", [])
        assert result == '<strong>see <a href="http://x.com">here</a></strong>'


class TestFootnoteRule:
    """Tests for [+,text] footnotes."""

    def test_replaces_with_superscript_link(self, formatter: InlineFormatter) -> None:
        footnotes: list[Footnote] = []
        result = formatter.format("Word[+,A note.]", footnotes)
        assert result == 'Word<sup><a href="#fn-1">1</a></sup>'
        assert len(footnotes) == 1

    def test_body_has_back_anchor(self, formatter: InlineFormatter) -> None:
        footnotes: list[Footnote] = []
        formatter.format("Word[+,A note.]", footnotes)
        note = footnotes[0]
        assert note.anchor == "fn-1"
        assert note.render() == '<p class="small"><a name="fn-1"/>\n1. A note.</p>\n'

    def test_ordinals_increase_per_occurrence(self, formatter: InlineFormatter) -> None:
        """Ordinals count every occurrence, across lines."""
        footnotes: list[Footnote] = []
        first = formatter.format("A[+,one] B[+,two]", footnotes)
        second = formatter.format("C[+,three]", footnotes)
        assert [note.ordinal for note in footnotes] == [1, 2, 3]
        assert 'href="#fn-2"' in first
        assert second == 'C<sup><a href="#fn-3">3</a></sup>'

    def test_body_gets_wrapping_rules(self, formatter: InlineFormatter) -> None:
        footnotes: list[Footnote] = []
        formatter.format("x[+,a _b_ *c*]", footnotes)
        assert footnotes[0].body.children[-1] == "1. a <em>b</em> <strong>c</strong>"

    def test_link_inside_footnote(self, formatter: InlineFormatter) -> None:
        footnotes: list[Footnote] = []
        formatter.format("x[+,see [@,http://x.com/a_b,site]]", footnotes)
        assert footnotes[0].body.children[-1] == '1. see <a href="http://x.com/a_b">site</a>'

    def test_markers_in_footnote_not_reprocessed(self, formatter: InlineFormatter) -> None:
        """An unpaired * inside a footnote does not pair with one outside."""
        footnotes: list[Footnote] = []
        result = formatter.format("x[+,a*b] *y*", footnotes)
        assert result == 'x<sup><a href="#fn-1">1</a></sup> <strong>y</strong>'
        assert footnotes[0].body.children[-1] == "1. a*b"
