# witsearch/application/suggestions.py

from typing import Iterable, List

from witsearch.config import MAX_SUGGESTIONS, SUGGESTION_MAX_DISTANCE, SUGGESTION_MIN_SIMILARITY
from witsearch.domain.models import Suggestion
from witsearch.application.edit_distance import levenshtein_distance, similarity


class SuggestionGenerator:
    """
    "Did you mean" candidates: known terms close to the query but not equal
    to it. An exact match is never suggested since the user already typed it.
    """

    def __init__(
        self,
        min_similarity: float = SUGGESTION_MIN_SIMILARITY,
        max_distance: int = SUGGESTION_MAX_DISTANCE,
    ):
        self._min_similarity = min_similarity
        self._max_distance = max_distance

    def suggest(
        self,
        query: str,
        known_terms: Iterable[str],
        max_suggestions: int = MAX_SUGGESTIONS,
    ) -> List[Suggestion]:
        if not isinstance(query, str) or not query.strip():
            return []

        q = query.strip().lower()
        suggestions: List[Suggestion] = []
        for term in known_terms:
            t = term.lower()
            sim = similarity(q, t)
            distance = levenshtein_distance(q, t)
            if self._min_similarity <= sim < 1.0 and distance <= self._max_distance:
                suggestions.append(Suggestion(term=term, similarity=sim, distance=distance))

        suggestions.sort(key=lambda s: s.similarity, reverse=True)
        return suggestions[:max_suggestions]
