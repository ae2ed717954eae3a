"""Media discovery and copying."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Final, Iterable

from mobicreator.exceptions import MediaNotFoundError
from mobicreator.utils.logging_config import get_logger

logger = get_logger(__name__)

MEDIA_TYPES: Final[dict[str, str]] = {
    ".gif": "image/gif",
    ".jpeg": "image/jpeg",
    ".jpg": "image/jpeg",
    ".css": "text/css",
}


def media_type_for(path: Path | str) -> str:
    """Return the MIME type for a media file name.

    Raises:
        MediaNotFoundError: If the extension is not a supported media type.
    """
    suffix = Path(path).suffix.lower()
    try:
        return MEDIA_TYPES[suffix]
    except KeyError:
        raise MediaNotFoundError(f"Unsupported media type for {path}") from None


def collect_media(media_dir: Path) -> list[Path]:
    """List supported media files, sorted by name.

    A missing media directory yields an empty list.
    """
    if not media_dir.is_dir():
        return []
    return sorted(
        (path for path in media_dir.iterdir() if path.is_file() and path.suffix.lower() in MEDIA_TYPES),
        key=lambda path: path.name,
    )


def copy_media(files: Iterable[Path], output_dir: Path) -> list[Path]:
    """Copy media files byte for byte into the output directory.

    Raises:
        MediaNotFoundError: If a listed file does not exist.
    """
    copied: list[Path] = []
    for path in files:
        if not path.is_file():
            raise MediaNotFoundError(f"Media file not found: {path}")
        target = output_dir / path.name
        shutil.copyfile(path, target)
        logger.debug("Copied media %s", path.name)
        copied.append(target)
    return copied
