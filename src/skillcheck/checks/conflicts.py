"""Cross-skill description overlap detection."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from skillcheck.constants.checks import DESCRIPTION_OVERLAP
from skillcheck.constants.limits import DEFAULT_SIMILARITY_THRESHOLD, MAX_COMMON_WORDS_SHOWN
from skillcheck.constants.parsing import WORD_PATTERN
from skillcheck.constants.vocabulary import COMMON_WORDS
from skillcheck.model import Issue

logger = logging.getLogger(__name__)


def extract_trigger_words(text: str) -> set[str]:
    """Return the lowercase words of *text* that are not on the common-word list."""
    return {word for word in WORD_PATTERN.findall(text.lower()) if word not in COMMON_WORDS}


def check_description_conflicts(
    descriptions: Mapping[str, str],
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> list[Issue]:
    """Warn about skill pairs whose descriptions share too many trigger words.

    Similarity is the Jaccard index of the two trigger-word sets. Pairs are
    compared in the mapping's iteration order; skills whose description has
    no trigger words are skipped.
    """
    entries = [(name, extract_trigger_words(text)) for name, text in descriptions.items()]
    issues: list[Issue] = []

    for index, (first_name, first_words) in enumerate(entries):
        if not first_words:
            continue
        for second_name, second_words in entries[index + 1 :]:
            if not second_words:
                continue
            shared = first_words & second_words
            similarity = len(shared) / len(first_words | second_words)
            if similarity < threshold:
                continue
            common = sorted(shared)[:MAX_COMMON_WORDS_SHOWN]
            logger.debug("Description overlap %.2f between %s and %s", similarity, first_name, second_name)
            issues.append(
                Issue(
                    check_id=DESCRIPTION_OVERLAP,
                    level="warning",
                    message=(
                        f"Similar descriptions: '{first_name}' and '{second_name}' "
                        f"({int(similarity * 100 + 0.5)}% overlap, common: {', '.join(common)})"
                    ),
                )
            )

    return issues
