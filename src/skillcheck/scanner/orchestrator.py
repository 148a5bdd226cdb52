"""End-to-end validation orchestration for skillcheck.

``validate_workspace`` is the primary entry point used by the CLI;
``validate_skill`` validates a single directory with a resolved config.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Sequence
from dataclasses import replace
from pathlib import Path

from skillcheck.checks import Check, SkillContext, build_checks, check_description_conflicts
from skillcheck.checks.frontmatter import frontmatter_text
from skillcheck.config import SkillCheckConfig, load_config
from skillcheck.constants.checks import ALL_CHECK_IDS, DESCRIPTION_OVERLAP
from skillcheck.constants.discovery import SKILL_MARKDOWN_FILENAME
from skillcheck.exceptions import ConfigError, SkillParseError
from skillcheck.model import Issue, ParsedDocument, SkillReport, ValidationRun
from skillcheck.parsers import parse_markdown_document
from skillcheck.scanner.discovery import resolve_skill_dirs

logger = logging.getLogger(__name__)


def validate_workspace(
    *,
    root: Path,
    paths: Iterable[Path] = (),
    config_path: Path | None = None,
    disabled_checks: Sequence[str] = (),
    fail_on_warnings: bool | None = None,
) -> ValidationRun:
    """Validate every skill designated by *paths* (or all skills under *root*)."""
    started_at = time.perf_counter()
    root = root.resolve()
    if not root.is_dir():
        raise ConfigError(f"Root does not exist or is not a directory: {root}")

    config = load_config(root, config_path)
    unknown = sorted(set(disabled_checks) - set(ALL_CHECK_IDS))
    if unknown:
        raise ConfigError(f"Unknown check id(s): {', '.join(unknown)}")
    if disabled_checks:
        merged = tuple(dict.fromkeys((*config.disabled_checks, *disabled_checks)))
        config = replace(config, disabled_checks=merged)
    if fail_on_warnings is not None:
        config = replace(config, fail_on_warnings=fail_on_warnings)

    skill_dirs = resolve_skill_dirs(root, paths, skills_dir=config.skills_dir)
    logger.debug("Resolved %d skill dir(s) under %s", len(skill_dirs), root)

    checks = build_checks(config)
    reports = tuple(validate_skill(skill_dir, config, checks=checks) for skill_dir in skill_dirs)

    conflicts: list[Issue] = []
    descriptions = {report.name: report.description for report in reports if report.description}
    if len(reports) > 1 and len(descriptions) > 1 and config.is_enabled(DESCRIPTION_OVERLAP):
        conflicts = check_description_conflicts(descriptions, threshold=config.similarity_threshold)

    return ValidationRun(
        root=root,
        reports=reports,
        conflicts=tuple(conflicts),
        fail_on_warnings=config.fail_on_warnings,
        duration_seconds=time.perf_counter() - started_at,
        disabled_checks=config.disabled_checks,
    )


def validate_skill(
    skill_dir: Path,
    config: SkillCheckConfig | None = None,
    *,
    checks: Sequence[Check] | None = None,
) -> SkillReport:
    """Run every enabled check against one skill directory."""
    config = config or SkillCheckConfig()
    if checks is None:
        checks = build_checks(config)

    document, load_error = _load_skill_document(skill_dir)
    context = SkillContext(skill_dir=skill_dir, document=document, config=config, load_error=load_error)

    errors: list[Issue] = []
    warnings: list[Issue] = []
    for check in checks:
        if check.requires_document and document is None:
            continue
        for issue in check.run(context):
            (errors if issue.level == "error" else warnings).append(issue)

    logger.debug("%s: %d error(s), %d warning(s)", skill_dir.name, len(errors), len(warnings))
    description = frontmatter_text(document.frontmatter, "description") if document is not None else None
    return SkillReport(
        name=skill_dir.name,
        path=skill_dir,
        errors=tuple(errors),
        warnings=tuple(warnings),
        description=description,
    )


def _load_skill_document(skill_dir: Path) -> tuple[ParsedDocument | None, str | None]:
    skill_file = skill_dir / SKILL_MARKDOWN_FILENAME
    if not skill_file.is_file():
        return None, None
    try:
        return parse_markdown_document(skill_file), None
    except SkillParseError as exc:
        logger.warning("Cannot read %s: %s", skill_file, exc)
        return None, str(exc)
