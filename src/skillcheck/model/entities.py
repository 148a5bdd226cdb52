"""Dataclasses shared by parsers, checks, and reporters."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from skillcheck.constants.reporting import REPORT_ROOT, STATUS_FAILED, STATUS_PASSED, STATUS_WARNED
from skillcheck.types import IssueLevel, JsonObject, SkillStatus


@dataclass(frozen=True)
class CodeFence:
    """A fenced code block; ``end_line`` is ``None`` when never closed."""

    start_line: int
    language: str
    end_line: int | None = None


@dataclass(frozen=True)
class Heading:
    """A markdown ATX heading."""

    level: int
    text: str
    line: int


@dataclass(frozen=True)
class MarkdownLink:
    """An inline markdown link found outside fenced code."""

    target: str
    line: int


@dataclass(frozen=True)
class ParsedDocument:
    """A markdown document split into frontmatter and body metadata."""

    path: Path
    raw_text: str
    line_count: int
    frontmatter: dict[str, Any] | None
    frontmatter_error: str | None
    body: str
    fences: tuple[CodeFence, ...] = ()
    headings: tuple[Heading, ...] = ()
    links: tuple[MarkdownLink, ...] = ()

    @property
    def has_frontmatter(self) -> bool:
        """Whether the frontmatter block parsed into a mapping."""
        return self.frontmatter is not None


@dataclass(frozen=True)
class Issue:
    """A single error or warning raised by a check."""

    check_id: str
    level: IssueLevel
    message: str
    path: str | None = None
    line: int | None = None

    def format(self, *, with_check_id: bool = False) -> str:
        """Render the message, optionally prefixed with the check id."""
        if with_check_id:
            return f"[{self.check_id}] {self.message}"
        return self.message

    def to_dict(self) -> JsonObject:
        """Serialize to a JSON-compatible mapping."""
        return {
            "check_id": self.check_id,
            "level": self.level,
            "message": self.message,
            "path": self.path,
            "line": self.line,
        }


@dataclass(frozen=True)
class SkillReport:
    """Validation outcome for one skill directory."""

    name: str
    path: Path
    errors: tuple[Issue, ...] = ()
    warnings: tuple[Issue, ...] = ()
    description: str | None = None

    @property
    def failed(self) -> bool:
        """A skill fails when it has at least one error."""
        return bool(self.errors)

    @property
    def status(self) -> SkillStatus:
        """Return ``failed``, ``warned`` or ``passed``."""
        if self.errors:
            return STATUS_FAILED
        if self.warnings:
            return STATUS_WARNED
        return STATUS_PASSED

    def to_dict(self, root: Path | None = None) -> JsonObject:
        """Serialize to a JSON-compatible mapping, with *path* relative to *root* when given."""
        path = self.path
        if root is not None and path.is_relative_to(root):
            path = path.relative_to(root)
        return {
            "name": self.name,
            "path": path.as_posix(),
            "status": self.status,
            "errors": [issue.to_dict() for issue in self.errors],
            "warnings": [issue.to_dict() for issue in self.warnings],
        }


@dataclass(frozen=True)
class ValidationRun:
    """Aggregated outcome of validating one or more skills."""

    root: Path
    reports: tuple[SkillReport, ...]
    conflicts: tuple[Issue, ...] = ()
    fail_on_warnings: bool = False
    duration_seconds: float = 0.0
    disabled_checks: tuple[str, ...] = field(default_factory=tuple)

    @property
    def single(self) -> bool:
        """Whether exactly one skill was validated."""
        return len(self.reports) == 1

    @property
    def failed_skills(self) -> tuple[str, ...]:
        """Names of skills with at least one error, in validation order."""
        return tuple(report.name for report in self.reports if report.failed)

    @property
    def total_errors(self) -> int:
        """Error count across all skills."""
        return sum(len(report.errors) for report in self.reports)

    @property
    def total_warnings(self) -> int:
        """Warning count across all skills plus description conflicts."""
        return sum(len(report.warnings) for report in self.reports) + len(self.conflicts)

    @property
    def passed(self) -> bool:
        """Whether the run should exit successfully."""
        if self.failed_skills:
            return False
        if self.fail_on_warnings and self.total_warnings:
            return False
        return True

    def to_dict(self) -> JsonObject:
        """Serialize to a JSON-compatible mapping."""
        return {
            "root": REPORT_ROOT,
            "skills": [report.to_dict(self.root) for report in self.reports],
            "conflicts": [issue.to_dict() for issue in self.conflicts],
            "disabled_checks": list(self.disabled_checks),
            "totals": {
                "skills": len(self.reports),
                "failed": len(self.failed_skills),
                "errors": self.total_errors,
                "warnings": self.total_warnings,
            },
            "passed": self.passed,
        }
