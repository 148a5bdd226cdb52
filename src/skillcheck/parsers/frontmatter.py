"""YAML frontmatter extraction for markdown documents."""

from __future__ import annotations

from typing import Any

import yaml

from skillcheck.constants.parsing import FRONTMATTER_ALT_DELIMITER, FRONTMATTER_DELIMITER
from skillcheck.exceptions import FrontmatterError

MISSING_OPENING_MESSAGE: str = "YAML frontmatter must start with --- on line 1"
MISSING_CLOSING_MESSAGE: str = "Invalid YAML frontmatter: missing closing ---"
NOT_A_MAPPING_MESSAGE: str = "YAML frontmatter must be a mapping"


def has_frontmatter_marker(text: str) -> bool:
    """Return True when the first line of *text* opens a frontmatter block."""
    lines = text.lstrip("\ufeff").split("\n", 1)
    return bool(lines) and lines[0].strip() == FRONTMATTER_DELIMITER


def parse_frontmatter(text: str) -> tuple[dict[str, Any], int]:
    """Parse the leading frontmatter block of *text*.

    Returns the mapping and the zero-based index of the closing delimiter
    line. An empty block yields an empty mapping.

    Raises:
        FrontmatterError: when the block is absent, unterminated, not valid
            YAML, or not a mapping.
    """
    if not has_frontmatter_marker(text):
        raise FrontmatterError(MISSING_OPENING_MESSAGE)

    lines = text.lstrip("\ufeff").split("\n")
    end = _find_frontmatter_end(lines)
    if end is None:
        raise FrontmatterError(MISSING_CLOSING_MESSAGE)

    block = "\n".join(lines[1:end])
    if not block.strip():
        return {}, end

    try:
        payload = yaml.safe_load(block)
    except yaml.YAMLError as exc:
        raise FrontmatterError(f"Invalid YAML frontmatter: {_describe_yaml_error(exc)}") from exc

    if payload is None:
        return {}, end
    if not isinstance(payload, dict):
        raise FrontmatterError(NOT_A_MAPPING_MESSAGE)
    return payload, end


def _find_frontmatter_end(lines: list[str]) -> int | None:
    for index in range(1, len(lines)):
        if lines[index].strip() in {FRONTMATTER_DELIMITER, FRONTMATTER_ALT_DELIMITER}:
            return index
    return None


def _describe_yaml_error(exc: yaml.YAMLError) -> str:
    """Collapse a PyYAML error to one line, shifting marks past the opening ---."""
    problem = getattr(exc, "problem", None)
    mark = getattr(exc, "problem_mark", None)
    if problem and mark is not None:
        return f"{problem} (line {mark.line + 2}, column {mark.column + 1})"
    return " ".join(str(exc).split())
