"""Helpers for running a single check against a skill directory."""

from __future__ import annotations

from pathlib import Path

from skillcheck.checks import Check, SkillContext
from skillcheck.config import SkillCheckConfig
from skillcheck.model import Issue
from skillcheck.parsers import parse_markdown_document


def build_context(skill_dir: Path, config: SkillCheckConfig | None = None) -> SkillContext:
    """Build a SkillContext for *skill_dir*, parsing SKILL.md when present."""
    skill_file = skill_dir / "SKILL.md"
    document = parse_markdown_document(skill_file) if skill_file.exists() else None
    return SkillContext(skill_dir=skill_dir, document=document, config=config or SkillCheckConfig())


def run_check(check: Check, skill_dir: Path, config: SkillCheckConfig | None = None) -> list[Issue]:
    return check.run(build_context(skill_dir, config))


def check_messages(check: Check, skill_dir: Path, config: SkillCheckConfig | None = None) -> list[str]:
    """Run *check* and return its issue messages."""
    return [issue.message for issue in run_check(check, skill_dir, config)]
