"""Load book configuration from YAML."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from mobicreator.config import MOBICREATOR_CONFIG_FILE
from mobicreator.exceptions import ConfigError
from mobicreator.schemas import BookConfig


def load_config(base_dir: Path, config_file: str | Path | None = None) -> BookConfig:
    """Read and validate the book configuration.

    Args:
        base_dir: Book directory holding the configuration file.
        config_file: Configuration file name or path. Defaults to
            MOBICREATOR_CONFIG_FILE inside ``base_dir``.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If the file is missing, not valid YAML, or incomplete.
    """
    path = base_dir / (config_file or MOBICREATOR_CONFIG_FILE)
    if not path.is_file():
        raise ConfigError(f"Configuration file not found: {path}")
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    return config_from_mapping(raw, source=path)


def config_from_mapping(raw: Any, *, source: Path | str = "<config>") -> BookConfig:
    """Build a BookConfig from the nested YAML layout.

    Chapters live under ``content.chapters`` and metadata under ``meta``.
    """
    if not isinstance(raw, dict):
        raise ConfigError(f"Configuration in {source} must be a mapping")
    content = raw.get("content") or {}
    if not isinstance(content, dict):
        raise ConfigError(f"'content' in {source} must be a mapping")

    data = {key: value for key, value in raw.items() if key != "content"}
    data["chapters"] = content.get("chapters")
    try:
        return BookConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {source}: {exc}") from exc
