"""Word lists and phrase patterns used when judging skill descriptions."""

from __future__ import annotations

import re
from re import Pattern

# Words that carry no triggering signal when an assistant matches a request
# against a skill description.
COMMON_WORDS: frozenset[str] = frozenset(
    {
        "use",
        "when",
        "for",
        "the",
        "and",
        "or",
        "to",
        "in",
        "on",
        "with",
        "this",
        "that",
        "is",
        "are",
        "be",
        "been",
        "being",
        "have",
        "has",
        "had",
        "do",
        "does",
        "did",
        "will",
        "would",
        "could",
        "should",
        "may",
        "might",
        "must",
        "shall",
        "can",
        "need",
        "about",
        "into",
        "through",
        "during",
        "before",
        "after",
        "above",
        "below",
        "from",
        "up",
        "down",
        "out",
        "off",
        "over",
        "under",
        "again",
        "further",
        "then",
        "once",
        "here",
        "there",
        "all",
        "each",
        "few",
        "more",
        "most",
        "other",
        "some",
        "such",
        "no",
        "nor",
        "not",
        "only",
        "own",
        "same",
        "so",
        "than",
        "too",
        "very",
        "just",
        "also",
        "now",
        "of",
        "a",
        "an",
        "as",
        "at",
        "by",
        "if",
        "it",
        "its",
        "any",
        "how",
        "what",
        "which",
        "who",
        "whom",
        "these",
        "those",
        "am",
        "was",
        "were",
        "you",
        "your",
        "they",
        "them",
        "their",
        "we",
        "our",
        "i",
        "me",
        "my",
        "he",
        "she",
        "him",
        "her",
        "his",
        "hers",
        "skill",
        "skills",
        "best",
        "practices",
        "patterns",
        "creating",
        "building",
        "implementing",
        "working",
        "handling",
        "managing",
        "using",
    }
)

VAGUE_PATTERNS: tuple[tuple[Pattern[str], str], ...] = (
    (re.compile(r"\bhelps?\s+with\b"), "helps with"),
    (re.compile(r"\bworks?\s+with\b"), "works with"),
    (re.compile(r"\bassists?\s+with\b"), "assists with"),
    (re.compile(r"\bfor\s+working\s+with\b"), "for working with"),
    (re.compile(r"\bhandles?\b"), "handles"),
    (re.compile(r"\bmanages?\b"), "manages"),
)

FIRST_PERSON_OPENERS: frozenset[str] = frozenset({"i", "you", "we"})
TRIGGER_PHRASES: tuple[str, ...] = ("use when", "use for")
TRIGGER_LIST_PHRASE: str = "use for"

REQUIRED_SECTIONS: tuple[tuple[str, str], ...] = (
    ("## common mistakes", "## Common Mistakes"),
    ("## delegation", "## Delegation"),
)
