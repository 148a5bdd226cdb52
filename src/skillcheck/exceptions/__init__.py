"""Shared exception hierarchy for skillcheck."""

from __future__ import annotations

from .base import SkillCheckError
from .config import ConfigError
from .parsing import FrontmatterError, SkillParseError

__all__ = [
    "ConfigError",
    "FrontmatterError",
    "SkillCheckError",
    "SkillParseError",
]
