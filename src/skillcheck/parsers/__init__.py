"""Parsers for skill and reference markdown documents."""

from __future__ import annotations

from .frontmatter import has_frontmatter_marker, parse_frontmatter
from .markdown import parse_markdown_document, parse_markdown_text

__all__ = [
    "has_frontmatter_marker",
    "parse_frontmatter",
    "parse_markdown_document",
    "parse_markdown_text",
]
