"""Checks over the SKILL.md frontmatter: parse status, name, and description."""

from __future__ import annotations

from typing import Any

from skillcheck.checks.base import Check
from skillcheck.checks.conflicts import extract_trigger_words
from skillcheck.checks.context import SkillContext
from skillcheck.config.validator import suggest_key
from skillcheck.constants.checks import DESCRIPTION, FRONTMATTER, NAME
from skillcheck.constants.discovery import SKILL_MARKDOWN_FILENAME
from skillcheck.constants.frontmatter import SKILL_FRONTMATTER_KEYS, SKILL_METADATA_KEYS
from skillcheck.constants.limits import (
    MAX_DESCRIPTION_LENGTH,
    MAX_NAME_LENGTH,
    MIN_NAME_LENGTH,
    MIN_TRIGGER_WORDS,
    RECOMMENDED_TRIGGER_WORDS,
)
from skillcheck.constants.parsing import NAME_CHARSET_PATTERN, XML_TAG_PATTERN
from skillcheck.constants.vocabulary import (
    FIRST_PERSON_OPENERS,
    TRIGGER_LIST_PHRASE,
    TRIGGER_PHRASES,
    VAGUE_PATTERNS,
)
from skillcheck.model import Issue


def frontmatter_text(frontmatter: dict[str, Any] | None, key: str) -> str | None:
    """Return a frontmatter value as stripped text, or None when absent or blank."""
    if frontmatter is None:
        return None
    value = frontmatter.get(key)
    if value is None or (isinstance(value, (dict, list)) and not value):
        return None
    text = str(value).strip()
    return text or None


class FrontmatterCheck(Check):
    """Require a parsable frontmatter mapping and flag keys no host recognizes."""

    check_id = FRONTMATTER

    def run(self, context: SkillContext) -> list[Issue]:
        document = context.skill_document
        if document.frontmatter_error is not None:
            return [self.error(document.frontmatter_error, path=SKILL_MARKDOWN_FILENAME, line=1)]

        issues: list[Issue] = []
        frontmatter = document.frontmatter or {}
        for key in sorted(frontmatter, key=str):
            if key in SKILL_FRONTMATTER_KEYS:
                continue
            hint = suggest_key(str(key), SKILL_FRONTMATTER_KEYS)
            suffix = f" ({hint})" if hint else ""
            issues.append(
                self.warning(f"Unknown frontmatter field '{key}'{suffix}", path=SKILL_MARKDOWN_FILENAME)
            )

        metadata = frontmatter.get("metadata")
        if metadata is None:
            return issues
        if not isinstance(metadata, dict):
            issues.append(
                self.warning(
                    "Field 'metadata' should be a mapping (author, version, source)",
                    path=SKILL_MARKDOWN_FILENAME,
                )
            )
            return issues
        for key in sorted(metadata, key=str):
            if key not in SKILL_METADATA_KEYS:
                issues.append(
                    self.warning(f"Unknown metadata field '{key}'", path=SKILL_MARKDOWN_FILENAME)
                )
        return issues


class NameCheck(Check):
    """Validate the ``name`` field against the skill naming rules."""

    check_id = NAME

    def run(self, context: SkillContext) -> list[Issue]:
        if not context.skill_document.has_frontmatter:
            return []

        name = frontmatter_text(context.skill_document.frontmatter, "name")
        if name is None:
            return [self.error("Missing required field: 'name' in frontmatter", path=SKILL_MARKDOWN_FILENAME)]

        messages: list[str] = []
        if len(name) > MAX_NAME_LENGTH:
            messages.append(f"Field 'name' exceeds {MAX_NAME_LENGTH} characters ({len(name)} chars)")
        elif len(name) < MIN_NAME_LENGTH:
            messages.append(
                f"Field 'name' is too short ({len(name)} chars, min {MIN_NAME_LENGTH}). "
                "Use a descriptive name, not an abbreviation"
            )
        elif not NAME_CHARSET_PATTERN.match(name):
            messages.append("Field 'name' must use only lowercase letters, numbers, and hyphens")

        if name.startswith("-") or name.endswith("-"):
            messages.append("Field 'name' must not start or end with a hyphen")
        if "--" in name:
            messages.append("Field 'name' must not contain consecutive hyphens (--)")

        for word in context.config.reserved_words:
            if word in name:
                messages.append(f"Field 'name' contains reserved word '{word}'")

        if XML_TAG_PATTERN.search(name):
            messages.append("Field 'name' must not contain XML tags")

        if name != context.dir_name:
            messages.append(f"Field 'name' ({name}) must match directory name ({context.dir_name})")

        return [self.error(message, path=SKILL_MARKDOWN_FILENAME) for message in messages]


class DescriptionCheck(Check):
    """Validate the ``description`` field that hosts match requests against."""

    check_id = DESCRIPTION

    def run(self, context: SkillContext) -> list[Issue]:
        if not context.skill_document.has_frontmatter:
            return []

        description = frontmatter_text(context.skill_document.frontmatter, "description")
        if description is None:
            return [
                self.error("Missing required field: 'description' in frontmatter", path=SKILL_MARKDOWN_FILENAME)
            ]

        if len(description) > MAX_DESCRIPTION_LENGTH:
            return [
                self.error(
                    f"Field 'description' exceeds {MAX_DESCRIPTION_LENGTH} characters "
                    f"({len(description)} chars)",
                    path=SKILL_MARKDOWN_FILENAME,
                )
            ]

        issues: list[Issue] = []
        if XML_TAG_PATTERN.search(description):
            issues.append(self.error("Field 'description' must not contain XML tags", path=SKILL_MARKDOWN_FILENAME))

        words = description.split()
        first_word = words[0].lower() if words else ""
        if first_word in FIRST_PERSON_OPENERS:
            issues.append(
                self.warning(
                    "Description should use third-person voice "
                    "('Extracts text from PDFs', not 'I help you' or 'You can use')",
                    path=SKILL_MARKDOWN_FILENAME,
                )
            )

        lowered = description.lower()
        if not any(phrase in lowered for phrase in TRIGGER_PHRASES):
            issues.append(
                self.warning(
                    "Description should include trigger phrases like 'Use when...' or 'Use for...'",
                    path=SKILL_MARKDOWN_FILENAME,
                )
            )

        for pattern, term in VAGUE_PATTERNS:
            if pattern.search(lowered):
                issues.append(
                    self.warning(
                        f"Vague term '{term}' in description - use specific triggers instead",
                        path=SKILL_MARKDOWN_FILENAME,
                    )
                )
                break

        if TRIGGER_LIST_PHRASE in lowered:
            # Only the text up to a second "use for" counts as the trigger list.
            trigger_list = lowered.split(TRIGGER_LIST_PHRASE)[1]
            triggers = extract_trigger_words(trigger_list)
            if len(triggers) < MIN_TRIGGER_WORDS:
                issues.append(
                    self.warning(
                        f"Low trigger density: only {len(triggers)} keywords after 'Use for' "
                        f"(recommend {RECOMMENDED_TRIGGER_WORDS}+)",
                        path=SKILL_MARKDOWN_FILENAME,
                    )
                )

        return issues
