"""Size and length limits for skill and reference documents."""

from __future__ import annotations

SKILL_MAX_LINES: int = 500
SKILL_WARN_LINES: int = 400
SKILL_TARGET_LINES: int = 150

REF_MAX_LINES: int = 750
REF_WARN_LINES: int = 500

MIN_NAME_LENGTH: int = 4
MAX_NAME_LENGTH: int = 64
MAX_DESCRIPTION_LENGTH: int = 1024

MIN_TRIGGER_WORDS: int = 5
RECOMMENDED_TRIGGER_WORDS: int = 8
MAX_COMMON_WORDS_SHOWN: int = 5

DEFAULT_SIMILARITY_THRESHOLD: float = 0.5
