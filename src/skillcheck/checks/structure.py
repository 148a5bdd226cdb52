"""Checks over the shape of a skill: directory name, size, fences, sections."""

from __future__ import annotations

from skillcheck.checks.base import Check
from skillcheck.checks.context import SkillContext
from skillcheck.constants.checks import CODE_FENCE, DIR_NAME, SECTIONS, SKILL_FILE, SKILL_SIZE
from skillcheck.constants.discovery import REFERENCES_DIRNAME, SKILL_MARKDOWN_FILENAME
from skillcheck.constants.limits import (
    MIN_NAME_LENGTH,
    SKILL_MAX_LINES,
    SKILL_TARGET_LINES,
    SKILL_WARN_LINES,
)
from skillcheck.constants.vocabulary import REQUIRED_SECTIONS
from skillcheck.model import Issue


class DirNameCheck(Check):
    """Reject abbreviated skill directory names."""

    check_id = DIR_NAME
    requires_document = False

    def run(self, context: SkillContext) -> list[Issue]:
        name = context.dir_name
        if len(name) >= MIN_NAME_LENGTH:
            return []
        return [
            self.error(
                f"Directory name '{name}' is too short ({len(name)} chars, min {MIN_NAME_LENGTH}). "
                "Use a descriptive name, not an abbreviation"
            )
        ]


class SkillSizeCheck(Check):
    """Keep SKILL.md under its line budget."""

    check_id = SKILL_SIZE

    def run(self, context: SkillContext) -> list[Issue]:
        line_count = context.skill_document.line_count
        if line_count > SKILL_MAX_LINES:
            return [
                self.error(
                    f"SKILL.md is {line_count} lines (max {SKILL_MAX_LINES}). Split to {REFERENCES_DIRNAME}/",
                    path=SKILL_MARKDOWN_FILENAME,
                )
            ]
        if line_count > SKILL_WARN_LINES:
            return [
                self.warning(
                    f"SKILL.md is {line_count} lines (target ~{SKILL_TARGET_LINES}, max {SKILL_MAX_LINES})",
                    path=SKILL_MARKDOWN_FILENAME,
                )
            ]
        return []


class CodeFenceCheck(Check):
    """Require a language on every fenced block (MD040) and a closing fence."""

    check_id = CODE_FENCE

    def run(self, context: SkillContext) -> list[Issue]:
        issues: list[Issue] = []
        for fence in context.skill_document.fences:
            if not fence.language:
                issues.append(
                    self.error(
                        f"Line {fence.start_line}: Code block missing language specifier (MD040)",
                        path=SKILL_MARKDOWN_FILENAME,
                        line=fence.start_line,
                    )
                )
            if fence.end_line is None:
                issues.append(
                    self.error(
                        f"Unclosed code block starting at line {fence.start_line}",
                        path=SKILL_MARKDOWN_FILENAME,
                        line=fence.start_line,
                    )
                )
        return issues


class SectionsCheck(Check):
    """Expect the Common Mistakes and Delegation sections somewhere in SKILL.md."""

    check_id = SECTIONS

    def run(self, context: SkillContext) -> list[Issue]:
        lowered = context.skill_document.raw_text.lower()
        return [
            self.warning(f"Missing '{title}' section", path=SKILL_MARKDOWN_FILENAME)
            for needle, title in REQUIRED_SECTIONS
            if needle not in lowered
        ]


class SkillFileCheck(Check):
    """Require a readable ``SKILL.md`` in every skill directory."""

    check_id = SKILL_FILE
    requires_document = False

    def run(self, context: SkillContext) -> list[Issue]:
        if context.document is not None:
            return []
        if context.load_error is not None:
            return [self.error(context.load_error, path=SKILL_MARKDOWN_FILENAME)]
        return [self.error(f"{SKILL_MARKDOWN_FILENAME} not found")]
