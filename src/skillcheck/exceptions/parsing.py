"""Parsing-related exceptions."""

from __future__ import annotations

from skillcheck.exceptions.base import SkillCheckError


class SkillParseError(SkillCheckError, ValueError):
    """Raised when a skill or reference document cannot be read."""


class FrontmatterError(SkillParseError):
    """Raised when a document's YAML frontmatter is missing or malformed."""
