"""Tests for the attribute parser."""

from __future__ import annotations

import pytest

from mobicreator.attributes import parse_attributes
from mobicreator.exceptions import MalformedAttributeListError


class TestParseAttributes:
    """Tests for parse_attributes."""

    def test_quoted_values(self) -> None:
        """Quoted values may contain spaces."""
        result = parse_attributes('src="a.gif" alt="An image"')
        assert result == {"src": "a.gif", "alt": "An image"}

    def test_preserves_order(self) -> None:
        """Keys come back in source order."""
        result = parse_attributes('c="3" a="1" b="2"')
        assert list(result) == ["c", "a", "b"]

    def test_unquoted_values(self) -> None:
        """Unquoted values end at whitespace."""
        assert parse_attributes("width=10 height=20") == {"width": "10", "height": "20"}

    def test_skips_whitespace_runs(self) -> None:
        """Runs of whitespace between pairs are skipped."""
        assert parse_attributes('a="1"    b="2"   c=3') == {"a": "1", "b": "2", "c": "3"}

    def test_empty_quoted_value(self) -> None:
        """An empty quoted value is kept."""
        assert parse_attributes('alt=""') == {"alt": ""}

    def test_no_escape_mechanism(self) -> None:
        """The second quote always closes the value."""
        assert parse_attributes('title="a\\" b="c"') == {"title": "a\\", "b": "c"}

    def test_empty_input(self) -> None:
        """No text yields no attributes."""
        assert parse_attributes("") == {}

    def test_whitespace_in_key_raises(self) -> None:
        """Whitespace while reading a key is an error."""
        with pytest.raises(MalformedAttributeListError, match="Whitespace"):
            parse_attributes('bad key="x"')

    def test_unterminated_quote_raises(self) -> None:
        """A value left open is an error."""
        with pytest.raises(MalformedAttributeListError, match="Unterminated"):
            parse_attributes('src="open')

    def test_key_without_value_raises(self) -> None:
        """A trailing key without '=' is an error."""
        with pytest.raises(MalformedAttributeListError, match="no value"):
            parse_attributes("disabled")
