"""Stable check identifiers and their one-line summaries."""

from __future__ import annotations

DIR_NAME: str = "DIR_NAME"
FRONTMATTER: str = "FRONTMATTER"
NAME: str = "NAME"
DESCRIPTION: str = "DESCRIPTION"
SKILL_SIZE: str = "SKILL_SIZE"
CODE_FENCE: str = "CODE_FENCE"
SECTIONS: str = "SECTIONS"
REFERENCE_LINKS: str = "REFERENCE_LINKS"
REFERENCE_DOCS: str = "REFERENCE_DOCS"
INTERNAL_LINKS: str = "INTERNAL_LINKS"
PACKAGING: str = "PACKAGING"
SCRIPT_MODE: str = "SCRIPT_MODE"
DESCRIPTION_OVERLAP: str = "DESCRIPTION_OVERLAP"
SKILL_FILE: str = "SKILL_FILE"

CHECK_SUMMARIES: dict[str, str] = {
    DIR_NAME: "Skill directory name is long enough to be descriptive",
    SKILL_FILE: "SKILL.md exists and is readable UTF-8 text",
    FRONTMATTER: "SKILL.md starts with a parsable YAML frontmatter mapping of known keys",
    NAME: "Frontmatter name is well-formed and matches the directory",
    DESCRIPTION: "Frontmatter description is bounded, third-person and trigger-rich",
    SKILL_SIZE: "SKILL.md stays within the line budget",
    CODE_FENCE: "Fenced code blocks declare a language and are closed",
    SECTIONS: "SKILL.md carries Common Mistakes and Delegation sections",
    REFERENCE_LINKS: "Every references/ link resolves and every reference file is linked",
    REFERENCE_DOCS: "Reference documents are bounded and carry title, description and tags",
    INTERNAL_LINKS: "Relative markdown links point at existing files",
    PACKAGING: "No files the skills installer would drop",
    SCRIPT_MODE: "Bundled scripts are executable",
    DESCRIPTION_OVERLAP: "Skill descriptions do not compete for the same triggers",
}

ALL_CHECK_IDS: tuple[str, ...] = tuple(CHECK_SUMMARIES)
