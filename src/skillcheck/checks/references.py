"""Checks over reference documents and the links that reach them."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import unquote

from skillcheck.checks.base import Check
from skillcheck.checks.context import SkillContext
from skillcheck.checks.frontmatter import frontmatter_text
from skillcheck.constants.checks import INTERNAL_LINKS, REFERENCE_DOCS, REFERENCE_LINKS
from skillcheck.constants.discovery import REFERENCES_DIRNAME, SKILL_MARKDOWN_FILENAME
from skillcheck.constants.frontmatter import REFERENCE_REQUIRED_KEYS, REFERENCE_TAGS_KEY
from skillcheck.constants.limits import REF_MAX_LINES, REF_WARN_LINES
from skillcheck.constants.parsing import URL_SCHEME_PATTERN
from skillcheck.model import Issue, ParsedDocument
from skillcheck.parsers import has_frontmatter_marker


class ReferenceLinksCheck(Check):
    """Cross-check ``references/`` links in SKILL.md against files on disk."""

    check_id = REFERENCE_LINKS

    def run(self, context: SkillContext) -> list[Issue]:
        linked = context.linked_references
        actual = set(context.reference_files)
        issues: list[Issue] = []

        for name in linked:
            if name not in actual:
                issues.append(
                    self.error(
                        f"Broken reference link: {REFERENCES_DIRNAME}/{name} (file not found)",
                        path=SKILL_MARKDOWN_FILENAME,
                    )
                )

        linked_set = set(linked)
        for name in context.reference_files:
            if name not in linked_set:
                issues.append(
                    self.error(
                        f"Orphan reference file: {REFERENCES_DIRNAME}/{name} (not linked in SKILL.md)",
                        path=f"{REFERENCES_DIRNAME}/{name}",
                    )
                )
        return issues


class ReferenceDocsCheck(Check):
    """Bound reference document size and require title, description and tags."""

    check_id = REFERENCE_DOCS

    def run(self, context: SkillContext) -> list[Issue]:
        issues: list[Issue] = []
        for name in context.reference_files:
            path = f"{REFERENCES_DIRNAME}/{name}"
            failure = context.unreadable_references.get(name)
            if failure is not None:
                issues.append(self.error(f"{name}: {failure}", path=path))
                continue
            issues.extend(self._check_document(name, path, context.reference_documents[name]))
        return issues

    def _check_document(self, name: str, path: str, document: ParsedDocument) -> list[Issue]:
        issues: list[Issue] = []
        if document.line_count > REF_MAX_LINES:
            issues.append(self.error(f"{name}: {document.line_count} lines (max {REF_MAX_LINES})", path=path))
        elif document.line_count > REF_WARN_LINES:
            issues.append(
                self.warning(
                    f"{name}: {document.line_count} lines (consider splitting at ~{REF_WARN_LINES})",
                    path=path,
                )
            )

        if not has_frontmatter_marker(document.raw_text):
            issues.append(
                self.warning(f"{name}: Missing YAML frontmatter (title, description, tags required)", path=path)
            )
            return issues

        if document.frontmatter_error is not None:
            issues.append(self.warning(f"{name}: {document.frontmatter_error}", path=path))
            return issues

        for key in REFERENCE_REQUIRED_KEYS:
            if frontmatter_text(document.frontmatter, key) is None:
                issues.append(self.warning(f"{name}: Missing '{key}' in frontmatter", path=path))

        if frontmatter_text(document.frontmatter, REFERENCE_TAGS_KEY) is None:
            issues.append(self.warning(f"{name}: Missing '{REFERENCE_TAGS_KEY}' in frontmatter", path=path))

        return issues


class InternalLinksCheck(Check):
    """Resolve relative markdown links in SKILL.md and its reference documents."""

    check_id = INTERNAL_LINKS

    def run(self, context: SkillContext) -> list[Issue]:
        issues = self._check_links(context, context.skill_document, skip_references=True)
        for name in context.reference_files:
            document = context.reference_documents.get(name)
            if document is not None:
                issues.extend(self._check_links(context, document, skip_references=False))
        return issues

    def _check_links(self, context: SkillContext, document: ParsedDocument, *, skip_references: bool) -> list[Issue]:
        issues: list[Issue] = []
        source = context.relative(document.path)
        for link in document.links:
            target = local_link_target(link.target)
            if target is None:
                continue
            if skip_references and _is_reference_link(link.target, target, context.linked_references):
                continue
            if not (document.path.parent / target).exists():
                issues.append(
                    self.error(
                        f"Broken link in {source}:{link.line}: {link.target} (file not found)",
                        path=source,
                        line=link.line,
                    )
                )
        return issues


def local_link_target(raw_target: str) -> str | None:
    """Return the filesystem part of a relative link, or None for URLs and anchors."""
    if URL_SCHEME_PATTERN.match(raw_target) or raw_target.startswith(("#", "/")):
        return None
    target = raw_target.split("#", 1)[0].split("?", 1)[0]
    if not target:
        return None
    return unquote(target)


def _is_reference_link(raw_target: str, target: str, linked: tuple[str, ...]) -> bool:
    """Whether ReferenceLinksCheck already matched this exact ``references/<file>.md`` link.

    Links carrying an anchor, a query or a title are not matched there and stay here.
    """
    path = Path(target)
    return (
        raw_target == target
        and len(path.parts) == 2
        and path.parts[0] == REFERENCES_DIRNAME
        and path.name in linked
    )
