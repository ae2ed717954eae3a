"""Shared HTML utilities for navigation labels."""

from __future__ import annotations

import re
from html import escape

try:
    from bs4 import BeautifulSoup
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


def strip_markup(text: str) -> str:
    """Return the visible text of an inline markup fragment."""
    if "<" not in text and "&" not in text:
        return _normalize_text(text)
    soup = BeautifulSoup(text, "lxml")
    # Remove superscripts (footnote markers)
    for sup in soup.find_all("sup"):
        sup.decompose()
    return _normalize_text(soup.get_text(""))


def plain_label(text: str) -> str:
    """Strip markup and escape the result for use inside XML text."""
    return escape(strip_markup(text), quote=False)


def _normalize_text(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()
