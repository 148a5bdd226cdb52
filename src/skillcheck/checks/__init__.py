"""Check package for skillcheck."""

from .base import Check
from .conflicts import check_description_conflicts, extract_trigger_words
from .context import SkillContext
from .registry import build_checks

__all__ = [
    "Check",
    "SkillContext",
    "build_checks",
    "check_description_conflicts",
    "extract_trigger_words",
]
