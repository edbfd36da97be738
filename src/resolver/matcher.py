"""Hybrid key matching: approximate similarity plus keyword overlap.

For every similarity hit the matcher computes

    hybrid = (similarity + overlap [+ 0.2 boost]) / 2

where `overlap` is the share of the entry's words that appear in the instruction and the boost
applies when an instruction word is a substring of a word of the entry's key. Hybrid scores are not
clamped, so a boosted candidate can exceed 1.0.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from src.resolver import similarity
from src.resolver.normalize import normalize_text, word_set
from src.resolver.schema import SettingEntry

PARTIAL_MATCH_BOOST = 0.2
POSSIBLE_MATCHES_LIMIT = 3


@dataclass(frozen=True)
class MatchCandidate:
    """Scores of one catalog entry for one instruction."""

    entry: SettingEntry
    similarity_score: float
    overlap_score: float
    hybrid_score: float


@dataclass(frozen=True)
class MatchOutcome:
    """Best candidate (if any), all scored hits in similarity order, and suggestion keys."""

    best: MatchCandidate | None
    candidates: tuple[MatchCandidate, ...]
    possible_matches: tuple[str, ...]


def entry_words(entry: SettingEntry) -> list[str]:
    """Normalized words of key, description and keywords, repetitions kept."""

    combined = " ".join(normalize_text(field) for field in entry.searchable_fields)
    return combined.split()


def overlap_score(entry: SettingEntry, input_words: set[str]) -> float:
    """Fraction of the entry's words that occur in the instruction."""

    words = entry_words(entry)
    if not words:
        return 0.0
    return sum(1 for word in words if word in input_words) / len(words)


def has_partial_key_match(entry: SettingEntry, input_words: set[str]) -> bool:
    """Whether any instruction word is contained in a word of the entry's key."""

    key_words = normalize_text(entry.key).split()
    return any(word in key_word for word in input_words for key_word in key_words)


def hybrid_score(similarity_score: float, overlap: float, *, boosted: bool) -> float:
    if boosted:
        return (similarity_score + overlap + PARTIAL_MATCH_BOOST) / 2
    return (similarity_score + overlap) / 2


class KeyMatcher:
    """Ranks catalog entries against an instruction."""

    def __init__(
            self,
            catalog: Sequence[SettingEntry],
            *,
            similarity_cutoff: float = similarity.SIMILARITY_CUTOFF,
    ) -> None:
        self.catalog = tuple(catalog)
        self.similarity_cutoff = similarity_cutoff

    def match(self, raw_text: str, normalized_text: str) -> MatchOutcome:
        """Score the catalog for one instruction.

        The similarity pass sees the raw text; overlap and boost use the normalized text. The best
        candidate has the strictly greatest hybrid score, so ties go to the earlier similarity hit.
        """

        hits = similarity.search(raw_text, self.catalog, cutoff=self.similarity_cutoff)
        input_words = word_set(normalized_text)

        candidates: list[MatchCandidate] = []
        best: MatchCandidate | None = None
        for hit in hits:
            overlap = overlap_score(hit.entry, input_words)
            boosted = has_partial_key_match(hit.entry, input_words)
            candidate = MatchCandidate(
                entry=hit.entry,
                similarity_score=hit.score,
                overlap_score=overlap,
                hybrid_score=hybrid_score(hit.score, overlap, boosted=boosted),
            )
            candidates.append(candidate)
            if best is None or candidate.hybrid_score > best.hybrid_score:
                best = candidate

        possible = tuple(hit.entry.key for hit in hits[:POSSIBLE_MATCHES_LIMIT])
        return MatchOutcome(best=best, candidates=tuple(candidates), possible_matches=possible)
