"""Configuration loading and validation for skillcheck.

This package facade re-exports the public names so callers can use
``from skillcheck.config import ...``.
"""

from __future__ import annotations

from skillcheck.config.loader import load_config
from skillcheck.config.model import SkillCheckConfig
from skillcheck.config.validator import suggest_key, validate_config_file

__all__ = [
    "SkillCheckConfig",
    "load_config",
    "suggest_key",
    "validate_config_file",
]
