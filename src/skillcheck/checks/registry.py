"""Ordered registry of per-skill checks."""

from __future__ import annotations

from skillcheck.checks.base import Check
from skillcheck.checks.frontmatter import DescriptionCheck, FrontmatterCheck, NameCheck
from skillcheck.checks.packaging import PackagingCheck, ScriptModeCheck
from skillcheck.checks.references import InternalLinksCheck, ReferenceDocsCheck, ReferenceLinksCheck
from skillcheck.checks.structure import (
    CodeFenceCheck,
    DirNameCheck,
    SectionsCheck,
    SkillFileCheck,
    SkillSizeCheck,
)
from skillcheck.config import SkillCheckConfig

# Run order matches report order: SKILL.md first, then references, then packaging.
CHECK_CLASSES: tuple[type[Check], ...] = (
    DirNameCheck,
    SkillFileCheck,
    FrontmatterCheck,
    NameCheck,
    DescriptionCheck,
    SkillSizeCheck,
    CodeFenceCheck,
    SectionsCheck,
    ReferenceLinksCheck,
    ReferenceDocsCheck,
    InternalLinksCheck,
    PackagingCheck,
    ScriptModeCheck,
)


def build_checks(config: SkillCheckConfig | None = None) -> list[Check]:
    """Instantiate every check enabled by *config*, in run order."""
    config = config or SkillCheckConfig()
    return [check_class() for check_class in CHECK_CLASSES if config.is_enabled(check_class.check_id)]
