"""Core data models for skillcheck."""

from .entities import (
    CodeFence,
    Heading,
    Issue,
    MarkdownLink,
    ParsedDocument,
    SkillReport,
    ValidationRun,
)

__all__ = [
    "CodeFence",
    "Heading",
    "Issue",
    "MarkdownLink",
    "ParsedDocument",
    "SkillReport",
    "ValidationRun",
]
