"""Resolution of command-line paths to skill directories."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from skillcheck.constants.discovery import (
    DEFAULT_SKILLS_DIR,
    MARKDOWN_SUFFIX,
    REFERENCES_DIRNAME,
    SKILL_MARKDOWN_FILENAME,
)

logger = logging.getLogger(__name__)


def resolve_skill_dirs(
    root: Path,
    paths: Iterable[Path] = (),
    *,
    skills_dir: str = DEFAULT_SKILLS_DIR,
) -> list[Path]:
    """Map CLI arguments to the skill directories they designate.

    With no *paths*, every immediate child of ``<root>/<skills_dir>`` that
    holds a ``SKILL.md`` is returned. Otherwise each path may be a markdown
    file inside a skill (or its ``references/`` folder), a skill directory,
    or a directory of skills. Relative paths resolve against *root*.
    """
    root = root.resolve()
    requested = list(paths)
    if not requested:
        return _child_skill_dirs(root / skills_dir)

    skill_dirs: set[Path] = set()
    for raw in requested:
        resolved = (root / raw).resolve()
        if not resolved.exists():
            logger.warning("Skipping missing path: %s", raw)
            continue

        if resolved.is_file():
            if resolved.suffix != MARKDOWN_SUFFIX:
                logger.debug("Skipping non-markdown file: %s", resolved)
                continue
            directory = resolved.parent
            if directory.name == REFERENCES_DIRNAME:
                directory = directory.parent
            if is_skill_dir(directory):
                skill_dirs.add(directory)
            else:
                logger.debug("No SKILL.md beside %s", resolved)
        elif is_skill_dir(resolved):
            skill_dirs.add(resolved)
        else:
            skill_dirs.update(_child_skill_dirs(resolved))

    return sorted(skill_dirs)


def is_skill_dir(path: Path) -> bool:
    """Return True when *path* is a directory containing ``SKILL.md``."""
    return path.is_dir() and (path / SKILL_MARKDOWN_FILENAME).is_file()


def _child_skill_dirs(directory: Path) -> list[Path]:
    if not directory.is_dir():
        logger.debug("Skills directory not found: %s", directory)
        return []
    return sorted(child for child in directory.iterdir() if is_skill_dir(child))
