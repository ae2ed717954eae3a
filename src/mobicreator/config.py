"""Local configuration for mobicreator."""

from __future__ import annotations

import os


DEFAULT_CONFIG_FILE = "config.yaml"
DEFAULT_SOURCE_DIR = "source"
DEFAULT_MEDIA_DIR = "media"
DEFAULT_SOURCE_SUFFIX = ".txt"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_STYLESHEET = "main.css"
DEFAULT_COVER = "cover.gif"

# Chapter titles are cut to this many characters.
MAX_TITLE_LENGTH = 100
# Deepest heading level reachable with a run of "=".
MAX_HEADER_DEPTH = 3

MOBICREATOR_CONFIG_FILE = os.getenv("MOBICREATOR_CONFIG_FILE", DEFAULT_CONFIG_FILE)
MOBICREATOR_SOURCE_DIR = os.getenv("MOBICREATOR_SOURCE_DIR", DEFAULT_SOURCE_DIR)
MOBICREATOR_MEDIA_DIR = os.getenv("MOBICREATOR_MEDIA_DIR", DEFAULT_MEDIA_DIR)
MOBICREATOR_SOURCE_SUFFIX = os.getenv("MOBICREATOR_SOURCE_SUFFIX", DEFAULT_SOURCE_SUFFIX)
MOBICREATOR_LOG_LEVEL = os.getenv("MOBICREATOR_LOG_LEVEL", DEFAULT_LOG_LEVEL)
