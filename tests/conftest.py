"""Test setup for mobicreator."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

CONFIG_YAML = """\
output: out
name: mybook
meta:
  title: My Book
  language: en
  isbn: 978-0-00-000000-0
  creator: Jane Doe
  publisher: Small Press
  subject: Fiction
  date: 2010-01-01
  description: A short book.
content:
  chapters:
    - ch1
    - ch2
"""

CHAPTER_ONE = """\
# The Beginning
= Arrival
It was a dark night.[+,Not that dark.]

* first
* second

: 
"""

CHAPTER_TWO = """\
# The Middle
= Journey
Read [@,http://example.com/a_b,the map].
== Detour
-.aside
An aside.
-
<img.center src="cover.gif" alt="Cover">
!
"""


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests that run the full build on disk",
    )


@pytest.fixture
def book_dir(tmp_path: Path) -> Path:
    """A book directory with config, two chapter sources and media."""
    (tmp_path / "config.yaml").write_text(CONFIG_YAML, encoding="utf-8")
    source = tmp_path / "source"
    source.mkdir()
    (source / "ch1.txt").write_text(CHAPTER_ONE, encoding="utf-8")
    (source / "ch2.txt").write_text(CHAPTER_TWO, encoding="utf-8")
    media = tmp_path / "media"
    media.mkdir()
    (media / "cover.gif").write_bytes(b"GIF89a\x01\x00\x01\x00\x00\xff\x00,")
    (media / "main.css").write_text("p { text-indent: 1em; }\n", encoding="utf-8")
    (media / "notes.txt").write_text("not media", encoding="utf-8")
    return tmp_path
