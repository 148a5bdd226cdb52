"""Check interfaces for skill validation."""

from __future__ import annotations

import inspect
import re
from abc import ABC, abstractmethod
from typing import ClassVar

from skillcheck.checks.context import SkillContext
from skillcheck.model import Issue

_CHECK_ID_PATTERN: re.Pattern[str] = re.compile(r"^[A-Z][A-Z0-9_]+$")


class Check(ABC):
    """Abstract base class for check implementations."""

    check_id: ClassVar[str]
    requires_document: ClassVar[bool] = True

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Validate check subclasses define a valid UPPER_SNAKE_CASE `check_id`."""
        super().__init_subclass__(**kwargs)
        if inspect.isabstract(cls):
            return

        check_id = getattr(cls, "check_id", None)
        if not isinstance(check_id, str) or not check_id.strip():
            raise TypeError(f"{cls.__name__} must define a non-empty class attribute `check_id`")
        if not _CHECK_ID_PATTERN.match(check_id):
            raise TypeError(f"{cls.__name__}.check_id must be UPPER_SNAKE_CASE (got {check_id!r})")

    @abstractmethod
    def run(self, context: SkillContext) -> list[Issue]:
        """Run the check against one skill directory.

        Checks with ``requires_document`` set only run when ``SKILL.md`` was read.
        """

    def error(self, message: str, *, path: str | None = None, line: int | None = None) -> Issue:
        """Build an error issue attributed to this check."""
        return Issue(check_id=self.check_id, level="error", message=message, path=path, line=line)

    def warning(self, message: str, *, path: str | None = None, line: int | None = None) -> Issue:
        """Build a warning issue attributed to this check."""
        return Issue(check_id=self.check_id, level="warning", message=message, path=path, line=line)
