"""Skill document builders shared across test modules."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

VALID_DESCRIPTION: str = (
    "Configures TanStack Query caching in React apps. Use for query keys, cache invalidation, "
    "optimistic updates, infinite queries, prefetch strategies."
)

VALID_BODY: str = "\n".join(
    [
        "# Title",
        "",
        "## Overview",
        "",
        "Conventions for the domain.",
        "",
        "## Common Mistakes",
        "",
        "| Mistake | Fix |",
        "|---------|-----|",
        "| One | Two |",
        "",
        "## Delegation",
        "",
        "Route unrelated questions elsewhere.",
    ]
)


def skill_markdown(
    name: str,
    *,
    description: str | None = VALID_DESCRIPTION,
    extra_frontmatter: str = "",
    body: str = VALID_BODY,
) -> str:
    """Render a SKILL.md with the given frontmatter fields and body."""
    lines = ["---", f"name: {name}"]
    if description is not None:
        lines.append(f"description: {description}")
    if extra_frontmatter:
        lines.append(extra_frontmatter.rstrip("\n"))
    lines.append("---")
    return "\n".join(lines) + "\n" + body + "\n"


SkillFactory: TypeAlias = Callable[..., Path]
