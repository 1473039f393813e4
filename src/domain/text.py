"""
Text helpers - string transforms and checks.

Key behaviors:
- reverse() works on user-perceived characters, not code points
- count_words() counts maximal non-whitespace runs
- is_plausible_address() is a weak syntactic check, not validation
- process_data() rejects an empty batch with InvalidInput
"""

from __future__ import annotations

from collections.abc import Sequence

import regex

from src.domain.errors import UtilityError, invalid_input

GRAPHEME = regex.compile(r"\X")
PROCESSED_PREFIX = "Processed: "


# --- Grapheme Clustering ---


def split_graphemes(text: str) -> list[str]:
    """Split text into extended grapheme clusters (user-perceived characters)."""
    clusters: list[str] = GRAPHEME.findall(text)
    return clusters


# --- Transforms ---


def reverse(text: str) -> str:
    """Reverse text by user-perceived characters."""
    return "".join(reversed(split_graphemes(text)))


def count_words(text: str) -> int:
    """Count maximal runs of non-whitespace."""
    return len(text.split())


def is_plausible_address(text: str) -> bool:
    """True iff text contains both '@' and '.'."""
    return "@" in text and "." in text


def process_data(items: Sequence[str]) -> tuple[list[str] | None, list[UtilityError]]:
    """
    Tag every item of a batch as processed.

    Returns:
        Tuple of (processed items, errors). Items is None for an empty batch.
    """
    if not items:
        return None, [invalid_input("Empty data slice", field="items")]

    return [f"{PROCESSED_PREFIX}{item}" for item in items], []
