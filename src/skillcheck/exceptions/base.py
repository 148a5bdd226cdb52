"""Base exception for skillcheck."""

from __future__ import annotations


class SkillCheckError(Exception):
    """Base class for all skillcheck errors."""
