"""Config data model for skillcheck runs."""

from __future__ import annotations

from dataclasses import dataclass

from skillcheck.constants.checks import ALL_CHECK_IDS
from skillcheck.constants.config import (
    DEFAULT_FAIL_ON_WARNINGS,
    DEFAULT_RESERVED_WORDS,
    DEFAULT_THRESHOLD,
)
from skillcheck.constants.discovery import DEFAULT_SKILLS_DIR


@dataclass(frozen=True)
class SkillCheckConfig:
    """Resolved validator config."""

    skills_dir: str = DEFAULT_SKILLS_DIR
    disabled_checks: tuple[str, ...] = ()
    similarity_threshold: float = DEFAULT_THRESHOLD
    fail_on_warnings: bool = DEFAULT_FAIL_ON_WARNINGS
    reserved_words: tuple[str, ...] = DEFAULT_RESERVED_WORDS

    @property
    def enabled_checks(self) -> tuple[str, ...]:
        """Check ids that remain after removing disabled ones, in stable order."""
        disabled = set(self.disabled_checks)
        return tuple(check_id for check_id in ALL_CHECK_IDS if check_id not in disabled)

    def is_enabled(self, check_id: str) -> bool:
        """Return True when *check_id* should run."""
        return check_id not in self.disabled_checks
