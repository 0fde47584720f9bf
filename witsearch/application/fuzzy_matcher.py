# witsearch/application/fuzzy_matcher.py

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from witsearch.config import FUZZY_LIMIT, MIN_SIMILARITY, SUBSTRING_SCORE
from witsearch.domain.models import SEARCH_FIELDS, ItemRecord, MatchResult
from witsearch.application.edit_distance import levenshtein_distance, similarity
from witsearch.application.tolerance import max_distance as adaptive_max_distance


@dataclass(frozen=True)
class ScoringInput:
    """One (query, field value) pair, pre-normalized once for all strategies."""
    query: str
    query_words: Tuple[str, ...]
    value: str
    value_words: Tuple[str, ...]
    max_distance: Optional[int] = None
    substring_score: float = SUBSTRING_SCORE

    @classmethod
    def of(
        cls,
        query: str,
        value: str,
        max_distance: Optional[int] = None,
        substring_score: float = SUBSTRING_SCORE,
    ) -> "ScoringInput":
        q = query.strip().lower()
        v = value.lower()
        return cls(
            query=q,
            query_words=tuple(q.split()),
            value=v,
            value_words=tuple(v.split()),
            max_distance=max_distance,
            substring_score=substring_score,
        )


ScoringStrategy = Callable[[ScoringInput], Optional[float]]


# ─── Scoring Strategies ───────────────────────────────────────────────────────

def full_string_score(inp: ScoringInput) -> Optional[float]:
    return similarity(inp.query, inp.value)


def word_similarity_score(inp: ScoringInput) -> Optional[float]:
    scores = [
        similarity(query_word, value_word)
        for query_word in inp.query_words
        for value_word in inp.value_words
    ]
    return max(scores) if scores else None


def within_tolerance_score(inp: ScoringInput) -> Optional[float]:
    """
    Score word pairs whose edit distance is non-zero but within the
    tolerance allowed for the query word's length.
    """
    best: Optional[float] = None
    for query_word in inp.query_words:
        allowed = inp.max_distance if inp.max_distance is not None else adaptive_max_distance(query_word)
        for value_word in inp.value_words:
            distance = levenshtein_distance(query_word, value_word)
            if 0 < distance <= allowed:
                score = 1.0 - distance / max(len(query_word), len(value_word))
                if best is None or score > best:
                    best = score
    return best


def substring_score(inp: ScoringInput) -> Optional[float]:
    if inp.query and inp.query in inp.value:
        return inp.substring_score
    return None


# Evaluated in this order; the first strategy to reach the best score keeps it.
DEFAULT_STRATEGIES: Tuple[ScoringStrategy, ...] = (
    full_string_score,
    word_similarity_score,
    within_tolerance_score,
    substring_score,
)


class FuzzyMatcher:
    """
    Scores candidate records against a query across several text fields.

    For every value of every field each strategy proposes a score (or
    None); the candidate keeps the maximum and the field that produced it.
    Ties between fields go to the earlier field in priority order.
    """

    def __init__(
        self,
        strategies: Sequence[ScoringStrategy] = DEFAULT_STRATEGIES,
        min_similarity: float = MIN_SIMILARITY,
        limit: int = FUZZY_LIMIT,
        substring_score: float = SUBSTRING_SCORE,
    ):
        self._strategies = tuple(strategies)
        self._min_similarity = min_similarity
        self._limit = limit
        self._substring_score = substring_score

    def score_value(self, query: str, value: str, max_distance: Optional[int] = None) -> float:
        """Best strategy score for a single field value (0.0 when nothing applies)."""
        inp = ScoringInput.of(query, value, max_distance, self._substring_score)
        best = 0.0
        for strategy in self._strategies:
            score = strategy(inp)
            if score is not None and score > best:
                best = score
        return best

    def score_record(
        self,
        query: str,
        record: ItemRecord,
        fields: Sequence[str] = SEARCH_FIELDS,
        max_distance: Optional[int] = None,
    ) -> Tuple[float, Optional[str]]:
        best_score = 0.0
        matched_field: Optional[str] = None
        for field_name in fields:
            for value in record.field_values(field_name):
                score = self.score_value(query, value, max_distance)
                if score > best_score:
                    best_score = score
                    matched_field = field_name
        return best_score, matched_field

    def search(
        self,
        query: str,
        candidates: Sequence[ItemRecord],
        fields: Sequence[str] = SEARCH_FIELDS,
        max_distance: Optional[int] = None,
        limit: Optional[int] = None,
        min_similarity: Optional[float] = None,
    ) -> List[MatchResult]:
        """
        Args:
            query:          Raw query text (case and outer whitespace ignored).
            candidates:     Records to score; never mutated.
            fields:         Fields to inspect, in priority order.
            max_distance:   Fixed per-word tolerance; None → adaptive by word length.
            limit:          Max results (None → matcher default, 0 → unlimited).
            min_similarity: Minimum score kept (None → matcher default).

        Returns:
            Matches sorted by score descending; equal scores keep input order.
        """
        if not isinstance(query, str) or not query.strip():
            return []

        threshold = self._min_similarity if min_similarity is None else min_similarity
        max_results = self._limit if limit is None else limit

        results: List[MatchResult] = []
        for record in candidates:
            score, matched_field = self.score_record(query, record, fields, max_distance)
            if matched_field is not None and score >= threshold:
                results.append(MatchResult(
                    record=record,
                    score=score,
                    matched_field=matched_field,
                    source="fuzzy",
                ))

        # list.sort is stable → input order preserved among equal scores
        results.sort(key=lambda r: r.score, reverse=True)
        return results[:max_results] if max_results else results
