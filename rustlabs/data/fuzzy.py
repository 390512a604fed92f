"""Typo-tolerant name search over a fixed set of records.

Each record is a mapping of key -> text. A query is scored against every
weighted key and the weighted scores are combined into a single confidence
in the 0-1 range. Records at or above the minimum score are returned, best
first.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import SequenceMatcher
from typing import Any, Iterable, Mapping

DEFAULT_KEYS: dict[str, float] = {"name": 0.7}
DEFAULT_MIN_SCORE = 0.6


@dataclass(frozen=True)
class FuzzyMatch:
    """A single ranked search hit."""
    record: Mapping[str, Any]
    score: float
    reason: str = ""

    @property
    def name(self) -> str:
        return str(self.record.get("name", ""))


def fuzzy_score(query: str, target: str) -> tuple[float, str]:
    """Calculate fuzzy match score between query and target.

    Returns (score, reason) where reason explains the match type.
    """
    query = query.lower().strip()
    target = target.lower().strip()
    if not query or not target:
        return 0.0, "empty"

    if query == target:
        return 1.0, "exact"

    # Exact word match (full word boundary)
    query_words = set(query.split())
    target_words = set(target.split())
    if query_words and query_words <= target_words:
        return 0.95, "word_subset"

    # Contains match, penalised when the target is much longer
    if query in target:
        length_ratio = len(query) / len(target)
        return min(0.9, 0.85 * length_ratio + 0.1), "contains"

    overlap = query_words & target_words
    if overlap:
        overlap_ratio = len(overlap) / max(len(query_words), len(target_words))
        return 0.6 + (0.2 * overlap_ratio), "word_overlap"

    return SequenceMatcher(None, query, target).ratio(), "sequence"


class FuzzyNameIndex:
    """Static search index over a list of records.

    Built once; the record list is copied at construction and never changed.
    """

    def __init__(
        self,
        records: Iterable[Mapping[str, Any]],
        keys: Mapping[str, float] | None = None,
        min_score: float = DEFAULT_MIN_SCORE,
    ) -> None:
        self._records: tuple[Mapping[str, Any], ...] = tuple(records)
        self._keys: dict[str, float] = dict(keys or DEFAULT_KEYS)
        self._min_score = min_score

    @classmethod
    def from_names(cls, names: Iterable[str], **kwargs: Any) -> "FuzzyNameIndex":
        return cls(({"name": name} for name in names), **kwargs)

    def __len__(self) -> int:
        return len(self._records)

    def _score_record(self, query: str, record: Mapping[str, Any]) -> tuple[float, str]:
        total_weight = 0.0
        weighted = 0.0
        best_reason = ""
        best_key_score = -1.0
        for key, weight in self._keys.items():
            value = record.get(key)
            if not isinstance(value, str) or not value:
                continue
            score, reason = fuzzy_score(query, value)
            total_weight += weight
            weighted += score * weight
            if score > best_key_score:
                best_key_score = score
                best_reason = f"{key}_{reason}"

        if total_weight == 0:
            return 0.0, ""
        return weighted / total_weight, best_reason

    def search(self, query: str) -> list[FuzzyMatch]:
        """Return all records scoring at least the minimum, best first.

        Ties keep the order records were given in.
        """
        if not isinstance(query, str) or not query.strip():
            return []

        matches = []
        for record in self._records:
            score, reason = self._score_record(query, record)
            if score >= self._min_score:
                matches.append(FuzzyMatch(record=record, score=score, reason=reason))

        matches.sort(key=lambda m: -m.score)
        return matches

    def best(self, query: str) -> str | None:
        """Name of the top-ranked record, or None when nothing matched."""
        matches = self.search(query)
        if matches:
            return matches[0].name
        return None
