"""Tests for media handling."""

from __future__ import annotations

from pathlib import Path

import pytest

from mobicreator.exceptions import MediaNotFoundError
from mobicreator.media import collect_media, copy_media, media_type_for


class TestMediaTypeFor:
    """Tests for media_type_for."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("a.gif", "image/gif"),
            ("a.jpg", "image/jpeg"),
            ("a.jpeg", "image/jpeg"),
            ("main.css", "text/css"),
            ("PHOTO.JPG", "image/jpeg"),
        ],
    )
    def test_known_types(self, name: str, expected: str) -> None:
        assert media_type_for(name) == expected

    def test_unknown_type(self) -> None:
        with pytest.raises(MediaNotFoundError, match="Unsupported"):
            media_type_for("image.png")


class TestCollectMedia:
    """Tests for collect_media."""

    def test_lists_supported_files_sorted(self, book_dir: Path) -> None:
        names = [path.name for path in collect_media(book_dir / "media")]
        assert names == ["cover.gif", "main.css"]

    def test_missing_directory(self, tmp_path: Path) -> None:
        assert collect_media(tmp_path / "nope") == []


class TestCopyMedia:
    """Tests for copy_media."""

    def test_copies_bytes(self, book_dir: Path, tmp_path: Path) -> None:
        output = tmp_path / "copied"
        output.mkdir()
        source = book_dir / "media" / "cover.gif"
        copied = copy_media([source], output)
        assert copied == [output / "cover.gif"]
        assert (output / "cover.gif").read_bytes() == source.read_bytes()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(MediaNotFoundError, match="ghost.gif"):
            copy_media([tmp_path / "ghost.gif"], tmp_path)
