"""Markdown scanning for fenced code, headings, and relative links."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from skillcheck.constants.parsing import CODE_FENCE_MARKER, HEADING_PATTERN, LINK_PATTERN
from skillcheck.exceptions import FrontmatterError, SkillParseError
from skillcheck.model import CodeFence, Heading, MarkdownLink, ParsedDocument
from skillcheck.parsers.frontmatter import parse_frontmatter

logger = logging.getLogger(__name__)

_INLINE_CODE_PATTERN: re.Pattern[str] = re.compile(r"`[^`]*`")


def parse_markdown_document(path: Path) -> ParsedDocument:
    """Read *path* as UTF-8 and parse it into a :class:`ParsedDocument`."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SkillParseError(f"{path} is not valid UTF-8 text: {exc}") from exc
    except OSError as exc:
        raise SkillParseError(f"Cannot read {path}: {exc}") from exc
    return parse_markdown_text(path, text)


def parse_markdown_text(path: Path, text: str) -> ParsedDocument:
    """Parse already-loaded markdown *text* attributed to *path*."""
    lines = text.split("\n")

    frontmatter = None
    frontmatter_error = None
    body_start = 0
    try:
        frontmatter, frontmatter_end = parse_frontmatter(text)
        body_start = frontmatter_end + 1
    except FrontmatterError as exc:
        frontmatter_error = str(exc)
        logger.debug("Frontmatter not parsed for %s: %s", path, exc)

    fences: list[CodeFence] = []
    headings: list[Heading] = []
    links: list[MarkdownLink] = []

    open_fence: tuple[int, str] | None = None
    for index, line in enumerate(lines):
        line_number = index + 1
        stripped = line.strip()
        if stripped.startswith(CODE_FENCE_MARKER):
            if open_fence is None:
                open_fence = (line_number, stripped[len(CODE_FENCE_MARKER) :].strip())
            else:
                fences.append(CodeFence(start_line=open_fence[0], language=open_fence[1], end_line=line_number))
                open_fence = None
            continue
        if open_fence is not None or index < body_start:
            continue

        heading = HEADING_PATTERN.match(stripped)
        if heading:
            headings.append(Heading(level=len(heading.group(1)), text=heading.group(2), line=line_number))

        for match in LINK_PATTERN.finditer(_INLINE_CODE_PATTERN.sub("", line)):
            links.append(MarkdownLink(target=match.group(1), line=line_number))

    if open_fence is not None:
        fences.append(CodeFence(start_line=open_fence[0], language=open_fence[1], end_line=None))

    return ParsedDocument(
        path=path,
        raw_text=text,
        line_count=len(lines),
        frontmatter=frontmatter,
        frontmatter_error=frontmatter_error,
        body="\n".join(lines[body_start:]).strip(),
        fences=tuple(fences),
        headings=tuple(headings),
        links=tuple(links),
    )
