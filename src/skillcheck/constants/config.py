"""Configuration defaults and filenames."""

from __future__ import annotations

from skillcheck.constants.limits import DEFAULT_SIMILARITY_THRESHOLD

CONFIG_FILENAME: str = "skillcheck.yaml"

DEFAULT_RESERVED_WORDS: tuple[str, ...] = ("anthropic", "claude")
DEFAULT_FAIL_ON_WARNINGS: bool = False
DEFAULT_THRESHOLD: float = DEFAULT_SIMILARITY_THRESHOLD
