"""Per-skill state shared by every check."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path

from skillcheck.config import SkillCheckConfig
from skillcheck.constants.discovery import (
    MARKDOWN_SUFFIX,
    PRIVATE_PREFIX,
    REFERENCES_DIRNAME,
    SCRIPTS_DIRNAME,
    SKILL_MARKDOWN_FILENAME,
)
from skillcheck.constants.parsing import REFERENCE_LINK_PATTERN
from skillcheck.exceptions import SkillParseError
from skillcheck.model import ParsedDocument
from skillcheck.parsers import parse_markdown_document

logger = logging.getLogger(__name__)


@dataclass
class SkillContext:
    """A skill directory together with its parsed ``SKILL.md``."""

    skill_dir: Path
    document: ParsedDocument | None
    config: SkillCheckConfig
    load_error: str | None = None

    @property
    def dir_name(self) -> str:
        return self.skill_dir.name

    @property
    def skill_file(self) -> Path:
        return self.skill_dir / SKILL_MARKDOWN_FILENAME

    @property
    def references_dir(self) -> Path:
        return self.skill_dir / REFERENCES_DIRNAME

    @property
    def scripts_dir(self) -> Path:
        return self.skill_dir / SCRIPTS_DIRNAME

    @cached_property
    def reference_files(self) -> tuple[str, ...]:
        """Public ``.md`` file names under ``references/``, sorted."""
        if not self.references_dir.is_dir():
            return ()
        return tuple(
            entry.name
            for entry in list_entries(self.references_dir)
            if entry.is_file() and entry.name.endswith(MARKDOWN_SUFFIX) and not entry.name.startswith(PRIVATE_PREFIX)
        )

    @cached_property
    def linked_references(self) -> tuple[str, ...]:
        """Reference file names linked as ``(references/<name>.md)``, in first-seen order."""
        seen: dict[str, None] = {}
        if self.document is None:
            return ()
        for match in REFERENCE_LINK_PATTERN.finditer(self.document.raw_text):
            seen.setdefault(match.group(1), None)
        return tuple(seen)

    def relative(self, path: Path) -> str:
        """Render *path* relative to the skill directory when possible."""
        try:
            return path.relative_to(self.skill_dir).as_posix()
        except ValueError:
            return path.as_posix()

    @property
    def skill_document(self) -> ParsedDocument:
        """The parsed ``SKILL.md``; only valid for checks that require it."""
        if self.document is None:
            raise SkillParseError(f"{self.skill_file} was not parsed")
        return self.document

    @property
    def reference_documents(self) -> dict[str, ParsedDocument]:
        """Parsed reference documents keyed by file name; unreadable files are omitted."""
        return self._references[0]

    @property
    def unreadable_references(self) -> dict[str, str]:
        """Reference file names that could not be read, mapped to the reason."""
        return self._references[1]

    @cached_property
    def _references(self) -> tuple[dict[str, ParsedDocument], dict[str, str]]:
        documents: dict[str, ParsedDocument] = {}
        failures: dict[str, str] = {}
        for name in self.reference_files:
            try:
                documents[name] = parse_markdown_document(self.references_dir / name)
            except SkillParseError as exc:
                logger.warning("Cannot parse reference document %s: %s", self.references_dir / name, exc)
                failures[name] = str(exc)
        return documents, failures


def list_entries(directory: Path) -> list[Path]:
    """Return the entries of *directory* sorted by name, or nothing when it cannot be listed."""
    try:
        return sorted(directory.iterdir(), key=lambda entry: entry.name)
    except OSError as exc:
        logger.warning("Cannot list %s: %s", directory, exc)
        return []
