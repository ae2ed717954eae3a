"""Scanner for the attribute list of raw tag lines."""

from __future__ import annotations

from mobicreator.exceptions import MalformedAttributeListError

_READING_KEY = "reading-key"
_AWAITING_VALUE = "awaiting-value"
_IN_QUOTED_VALUE = "inside-quoted-value"


def parse_attributes(text: str) -> dict[str, str]:
    """Parse a ``key="value" key2=value2`` sequence.

    There is no escape mechanism: the first ``"`` opens a value and the next
    one closes it. Unquoted values end at whitespace.

    Args:
        text: The attribute portion of a raw tag line.

    Returns:
        Attributes in source order.

    Raises:
        MalformedAttributeListError: If a key contains whitespace, a quote is
            left open, or a key has no value.
    """
    attributes: dict[str, str] = {}
    state = _READING_KEY
    key = ""
    value = ""
    i = 0
    length = len(text)

    while i < length:
        char = text[i]
        if state == _READING_KEY:
            if char.isspace():
                if key:
                    raise MalformedAttributeListError(f"Whitespace inside attribute key {key!r} in {text!r}")
            elif char == "=":
                if not key:
                    raise MalformedAttributeListError(f"Attribute value without a key in {text!r}")
                state = _AWAITING_VALUE
            else:
                key += char
        elif state == _AWAITING_VALUE:
            if char == '"' and not value:
                state = _IN_QUOTED_VALUE
            elif char.isspace():
                attributes[key] = value
                key, value = "", ""
                state = _READING_KEY
                i = _skip_whitespace(text, i)
            else:
                value += char
        else:
            if char == '"':
                attributes[key] = value
                key, value = "", ""
                state = _READING_KEY
                i = _skip_whitespace(text, i)
            else:
                value += char
        i += 1

    if state == _IN_QUOTED_VALUE:
        raise MalformedAttributeListError(f"Unterminated quoted value for {key!r} in {text!r}")
    if state == _AWAITING_VALUE:
        attributes[key] = value
    elif key:
        raise MalformedAttributeListError(f"Attribute {key!r} has no value in {text!r}")
    return attributes


def _skip_whitespace(text: str, index: int) -> int:
    """Return the index of the last whitespace character following ``index``."""
    while index + 1 < len(text) and text[index + 1].isspace():
        index += 1
    return index
