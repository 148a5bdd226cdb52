"""Recognized frontmatter keys for skill and reference documents."""

from __future__ import annotations

SKILL_FRONTMATTER_KEYS: frozenset[str] = frozenset(
    {
        "name",
        "description",
        "license",
        "metadata",
        "user-invocable",
        "tags",
        "allowed-tools",
        "compatibility",
    }
)

SKILL_METADATA_KEYS: frozenset[str] = frozenset({"author", "version", "source"})

REFERENCE_REQUIRED_KEYS: tuple[str, ...] = ("title", "description")
REFERENCE_TAGS_KEY: str = "tags"
