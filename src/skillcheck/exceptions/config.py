"""Configuration-related exceptions."""

from __future__ import annotations

from skillcheck.exceptions.base import SkillCheckError


class ConfigError(SkillCheckError, ValueError):
    """Raised when validator configuration is invalid."""
