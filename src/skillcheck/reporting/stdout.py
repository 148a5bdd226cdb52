"""Human-readable stdout reporter for validation runs."""

from __future__ import annotations

from skillcheck.constants.reporting import (
    ANSI_DIM,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    ERROR_MARK,
    WARNING_MARK,
)
from skillcheck.model import Issue, SkillReport, ValidationRun


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class StdoutReporter:
    """Formats a validation run the way ``validate:skills`` printed it.

    A single skill gets a detailed block with separate error and warning
    lists; several skills get one line each followed by description
    conflicts and a summary.
    """

    def __init__(self, run: ValidationRun, *, color: bool = True, verbose: bool = False) -> None:
        self._run = run
        self._color = color
        self._verbose = verbose

    def render(self) -> str:
        """Render the full report as a single string."""
        if not self._run.reports:
            return "No skills found to validate"
        if self._run.single:
            lines = self._render_single(self._run.reports[0])
        else:
            lines = self._render_many()
        if self._verbose:
            lines.extend(["", self._dim(f"Completed in {self._run.duration_seconds:.3f}s")])
        return "\n".join(lines)

    def _render_single(self, report: SkillReport) -> list[str]:
        lines: list[str] = []
        if report.errors:
            lines.append(f"{self._red(ERROR_MARK)} {report.name}: {self._red('FAILED')}")
            lines.append("")
            lines.append("Errors:")
            lines.extend(f"  {self._red(ERROR_MARK)} {self._issue(issue)}" for issue in report.errors)
            lines.append("")
        if report.warnings:
            lines.append("Warnings:")
            lines.extend(f"  {self._yellow(WARNING_MARK)} {self._issue(issue)}" for issue in report.warnings)
            lines.append("")
        if not report.errors and not report.warnings:
            lines.append(f"  {report.name}: {self._green('passed')}")
        elif not report.errors:
            lines.append(f"  {report.name}: {self._yellow('valid (with warnings)')}")
        lines.extend(self._render_strict_verdict())
        return lines

    def _render_many(self) -> list[str]:
        run = self._run
        lines = [f"Validating {len(run.reports)} skill(s)...", ""]

        for report in run.reports:
            if report.errors:
                lines.append(f"{self._red(ERROR_MARK)} {report.name}: {self._red('FAILED')}")
                lines.extend(f"   {self._red(ERROR_MARK)} {self._issue(issue)}" for issue in report.errors)
                if self._verbose:
                    lines.extend(
                        f"   {self._yellow(WARNING_MARK)} {self._issue(issue)}" for issue in report.warnings
                    )
            elif report.warnings:
                lines.append(f"  {report.name}: {self._yellow(f'valid ({len(report.warnings)} warning(s))')}")
                if self._verbose:
                    lines.extend(
                        f"   {self._yellow(WARNING_MARK)} {self._issue(issue)}" for issue in report.warnings
                    )
            else:
                lines.append(f"  {report.name}: {self._green('passed')}")

        if run.conflicts:
            lines.append("")
            lines.append(f"{self._yellow(WARNING_MARK)} Description conflicts:")
            lines.extend(f"   {self._issue(issue)}" for issue in run.conflicts)

        lines.append("")
        failed = run.failed_skills
        if failed:
            lines.append(f"{self._red(ERROR_MARK)} {len(failed)} skill(s) failed: {', '.join(failed)}")
        else:
            lines.append(f"  All {len(run.reports)} skill(s) passed")
        if run.total_warnings:
            lines.append(f"  {run.total_warnings} total warning(s)")
        lines.extend(self._render_strict_verdict())
        return lines

    def _render_strict_verdict(self) -> list[str]:
        run = self._run
        if run.fail_on_warnings and not run.failed_skills and run.total_warnings:
            return [f"{self._red(ERROR_MARK)} Warnings are treated as errors (fail_on_warnings)"]
        return []

    def _issue(self, issue: Issue) -> str:
        return issue.format(with_check_id=self._verbose)

    def _red(self, text: str) -> str:
        return _colorize(text, ANSI_RED) if self._color else text

    def _yellow(self, text: str) -> str:
        return _colorize(text, ANSI_YELLOW) if self._color else text

    def _green(self, text: str) -> str:
        return _colorize(text, ANSI_GREEN) if self._color else text

    def _dim(self, text: str) -> str:
        return _colorize(text, ANSI_DIM) if self._color else text
