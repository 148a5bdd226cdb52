"""Constants for locating skill directories and their companion files."""

from __future__ import annotations

SKILL_MARKDOWN_FILENAME: str = "SKILL.md"
REFERENCES_DIRNAME: str = "references"
SCRIPTS_DIRNAME: str = "scripts"
MARKDOWN_SUFFIX: str = ".md"
PRIVATE_PREFIX: str = "_"

DEFAULT_SKILLS_DIR: str = "skills"

# The skills installer drops these entries when copying a skill.
INSTALLER_EXCLUDED_FILES: frozenset[str] = frozenset({"README.md", "metadata.json"})

SCRIPT_SUFFIXES: tuple[str, ...] = (".py", ".sh")
EXECUTE_BITS: int = 0o111
