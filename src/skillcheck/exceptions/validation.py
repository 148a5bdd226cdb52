"""Collect-all config problems reported by ``skillcheck validate-config``."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """One config problem, identified by a stable ``CFG`` code."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""
    line: int | None = None

    @property
    def location(self) -> str:
        """``path`` or ``path:line``."""
        return self.path if self.line is None else f"{self.path}:{self.line}"

    def format(self) -> str:
        """Render as ``[CODE] location message (hint)``."""
        text = f"[{self.code}] {self.location} {self.message}"
        return f"{text} ({self.hint})" if self.hint else text


def sort_errors(errors: Iterable[ValidationError]) -> list[ValidationError]:
    """Order errors by code, then file, field and line."""
    return sorted(errors, key=lambda error: (error.code, error.path, error.field, error.line or 0))


def format_errors(errors: Iterable[ValidationError]) -> str:
    """Render errors one per line in sorted order."""
    return "\n".join(error.format() for error in sort_errors(errors))
