"""Checks over files that ship alongside SKILL.md."""

from __future__ import annotations

import logging

from skillcheck.checks.base import Check
from skillcheck.checks.context import SkillContext, list_entries
from skillcheck.constants.checks import PACKAGING, SCRIPT_MODE
from skillcheck.constants.discovery import (
    EXECUTE_BITS,
    INSTALLER_EXCLUDED_FILES,
    PRIVATE_PREFIX,
    SCRIPT_SUFFIXES,
    SCRIPTS_DIRNAME,
)
from skillcheck.model import Issue

logger = logging.getLogger(__name__)


class PackagingCheck(Check):
    """Flag entries the skills installer silently drops."""

    check_id = PACKAGING

    def run(self, context: SkillContext) -> list[Issue]:
        return [
            self.warning(f"'{entry.name}' is excluded by the skills CLI during installation", path=entry.name)
            for entry in list_entries(context.skill_dir)
            if entry.name in INSTALLER_EXCLUDED_FILES or entry.name.startswith(PRIVATE_PREFIX)
        ]


class ScriptModeCheck(Check):
    """Require execute permission on bundled Python and shell scripts."""

    check_id = SCRIPT_MODE

    def run(self, context: SkillContext) -> list[Issue]:
        if not context.scripts_dir.is_dir():
            return []
        issues: list[Issue] = []
        for script in list_entries(context.scripts_dir):
            if not script.name.endswith(SCRIPT_SUFFIXES):
                continue
            path = f"{SCRIPTS_DIRNAME}/{script.name}"
            try:
                mode = script.stat().st_mode
            except OSError as exc:
                logger.warning("Cannot stat %s: %s", script, exc)
                issues.append(self.warning(f"Script unreadable: {path} ({exc.strerror or exc})", path=path))
                continue
            if mode & EXECUTE_BITS:
                continue
            issues.append(self.warning(f"Script not executable: {path} (run chmod +x)", path=path))
        return issues
