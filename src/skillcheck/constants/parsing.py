"""Constants for frontmatter and markdown parsing."""

from __future__ import annotations

import re
from re import Pattern

FRONTMATTER_DELIMITER: str = "---"
# YAML allows "..." as an explicit document end marker.
FRONTMATTER_ALT_DELIMITER: str = "..."

CODE_FENCE_MARKER: str = "```"

HEADING_PATTERN: Pattern[str] = re.compile(r"^(#{1,6})\s+(.+?)\s*#*\s*$")
LINK_PATTERN: Pattern[str] = re.compile(r"!?\[[^\]]*\]\(\s*<?([^)\s>]+)>?(?:\s+\"[^\"]*\")?\s*\)")
REFERENCE_LINK_PATTERN: Pattern[str] = re.compile(r"\(references/([^)]+\.md)\)")
XML_TAG_PATTERN: Pattern[str] = re.compile(r"<[^>]+>")
NAME_CHARSET_PATTERN: Pattern[str] = re.compile(r"^[a-z0-9-]+$")
WORD_PATTERN: Pattern[str] = re.compile(r"[a-z]+")
URL_SCHEME_PATTERN: Pattern[str] = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")
