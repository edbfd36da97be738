"""Approximate string matching of instructions against catalog entries.

Score convention: similarity is in [0, 1] and higher is better. 1.0 means the shorter string occurs
verbatim in the longer one, 0.0 means the strings share no characters. Distance-style libraries that
report 0 for a perfect match must be inverted (`1 - distance`) before their scores reach this module's
callers.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from difflib import SequenceMatcher

from src.resolver.schema import SettingEntry

SIMILARITY_CUTOFF = 0.7


@dataclass(frozen=True)
class SimilarityHit:
    """A catalog entry that passed the similarity cutoff."""

    entry: SettingEntry
    score: float
    index: int


def partial_ratio(left: str, right: str) -> float:
    """Best `SequenceMatcher` ratio of the shorter string against same-length windows of the longer.

    Windows are anchored on the matching blocks of the two strings. Case-sensitive; callers fold
    case first.
    """

    if not left or not right:
        return 0.0

    shorter, longer = (left, right) if len(left) <= len(right) else (right, left)
    if shorter in longer:
        return 1.0

    matcher = SequenceMatcher(None, shorter, longer, autojunk=False)
    best = 0.0
    for block in matcher.get_matching_blocks():
        start = max(block.b - block.a, 0)
        window = longer[start:start + len(shorter)]
        score = SequenceMatcher(None, shorter, window, autojunk=False).ratio()
        if score > best:
            best = score
    return best


def entry_similarity(text: str, entry: SettingEntry) -> float:
    """Similarity of raw instruction text to an entry: the best score over its searchable fields."""

    folded = text.lower()
    return max((partial_ratio(folded, field.lower()) for field in entry.searchable_fields), default=0.0)


def search(
        text: str,
        catalog: Sequence[SettingEntry],
        *,
        cutoff: float = SIMILARITY_CUTOFF,
) -> list[SimilarityHit]:
    """Score every entry and return the hits, best first.

    Entries below `cutoff` are dropped. Equal scores keep catalog order.
    """

    hits = [
        SimilarityHit(entry=entry, score=score, index=idx)
        for idx, entry in enumerate(catalog)
        if (score := entry_similarity(text, entry)) >= cutoff
    ]
    hits.sort(key=lambda h: (-h.score, h.index))
    return hits
