# witsearch/application/search_service.py

from typing import Dict, List, Optional

from witsearch.config import AUTOCOMPLETE_LIMIT, AUTOCOMPLETE_MIN_CHARS, SearchSettings
from witsearch.domain.interfaces import ItemRepositoryPort, PrimaryIndexPort
from witsearch.domain.models import (
    SEARCH_FIELDS,
    ExpandedQuery,
    ItemRecord,
    MatchResult,
    SearchFilters,
    SearchOutcome,
)
from witsearch.application.fuzzy_matcher import FuzzyMatcher
from witsearch.application.suggestions import SuggestionGenerator
from witsearch.application.synonym_expander import SynonymExpander


def collect_known_terms(records: List[ItemRecord]) -> List[str]:
    """
    Corpus for did-you-mean: every searchable value and each of its words,
    lowercased, first-seen order.
    """
    terms: Dict[str, None] = {}
    for record in records:
        for field_name in SEARCH_FIELDS:
            for value in record.field_values(field_name):
                lowered = value.strip().lower()
                if not lowered:
                    continue
                terms[lowered] = None
                terms.update(dict.fromkeys(lowered.split()))
    return list(terms)


def resolve_search_method(primary_found: bool, synonyms_found: bool, fuzzy_found: bool) -> str:
    if primary_found and fuzzy_found:
        return "text+synonyms+fuzzy" if synonyms_found else "text+fuzzy"
    if fuzzy_found:
        return "synonyms+fuzzy" if synonyms_found else "fuzzy"
    return "text+synonyms" if synonyms_found else "text"


class HybridSearchService:
    """
    Core use case: resolve a free-text query against the item catalog.

    Pipeline:
        1. Expand the query with synonyms
        2. Primary ranked search with the expanded terms (best effort)
        3. Fuzzy fallback over the filtered catalog when the primary stage
           returned fewer than `fuzzy_threshold` hits
        4. Merge (primary first), dedupe, truncate
        5. Did-you-mean suggestions when fewer than 3 hits remain

    The service holds no per-call state; collaborators are read-only.
    """

    def __init__(
        self,
        expander: SynonymExpander,
        primary_index: PrimaryIndexPort,
        repository: ItemRepositoryPort,
        matcher: Optional[FuzzyMatcher] = None,
        suggester: Optional[SuggestionGenerator] = None,
        settings: Optional[SearchSettings] = None,
    ):
        self._settings = settings or SearchSettings()
        self._expander = expander
        self._primary_index = primary_index
        self._repository = repository
        self._matcher = matcher or FuzzyMatcher(
            min_similarity=self._settings.min_similarity,
            limit=self._settings.fuzzy_limit,
            substring_score=self._settings.substring_score,
        )
        self._suggester = suggester or SuggestionGenerator()

    def expand_query(self, query: str) -> ExpandedQuery:
        return self._expander.expand(query)

    def search(self, query: str, filters: Optional[SearchFilters] = None) -> SearchOutcome:
        if not isinstance(query, str) or not query.strip():
            return SearchOutcome.empty()

        if filters is None:
            filters = SearchFilters(
                limit=self._settings.default_limit,
                fuzzy_threshold=self._settings.fuzzy_threshold,
            )

        expanded = self._expander.expand(query)
        query_words = set(query.strip().lower().split())
        synonyms_used = [t for t in expanded.expanded_terms if t not in query_words]

        primary = self._run_primary(" ".join(expanded.expanded_terms), filters)

        if len(primary) >= filters.fuzzy_threshold:
            items = primary[: filters.limit]
            outcome = SearchOutcome(
                items=items,
                fuzzy_matches=0,
                synonyms_used=synonyms_used,
                search_method="text+synonyms" if expanded.synonyms_found else "text",
            )
            if len(items) < self._settings.suggestion_trigger:
                candidates = self._repository.find_all_matching_filters(filters)
                outcome.suggestions = self._suggest(query, candidates)
            return outcome

        # ── Fuzzy fallback ────────────────────────────────────────────────
        candidates = self._repository.find_all_matching_filters(filters)
        fuzzy = self._run_fuzzy(expanded.expanded_terms, candidates)

        primary_ids = {r.record.item_id for r in primary}
        fuzzy = [r for r in fuzzy if r.record.item_id not in primary_ids]

        items = (primary + fuzzy)[: filters.limit]
        fuzzy_count = sum(1 for r in items if r.source == "fuzzy")

        outcome = SearchOutcome(
            items=items,
            fuzzy_matches=fuzzy_count,
            synonyms_used=synonyms_used,
            search_method=resolve_search_method(
                primary_found=bool(primary),
                synonyms_found=expanded.synonyms_found,
                fuzzy_found=bool(fuzzy),
            ),
        )

        if len(items) < self._settings.suggestion_trigger:
            outcome.suggestions = self._suggest(query, candidates)

        return outcome

    def autocomplete(
        self,
        query: str,
        filters: Optional[SearchFilters] = None,
        limit: int = AUTOCOMPLETE_LIMIT,
    ) -> List[str]:
        """
        Item names and alternate names containing the typed text.
        Prefix matches come first, then other substring matches.
        """
        if not isinstance(query, str) or len(query.strip()) < AUTOCOMPLETE_MIN_CHARS:
            return []

        q = query.strip().lower()
        prefix: Dict[str, str] = {}
        inner: Dict[str, str] = {}
        for record in self._repository.find_all_matching_filters(filters or SearchFilters()):
            for value in record.field_values("name") + record.field_values("alternate_names"):
                key = value.lower()
                if key.startswith(q):
                    prefix.setdefault(key, value)
                elif q in key:
                    inner.setdefault(key, value)

        ordered = [prefix[k] for k in sorted(prefix)]
        ordered += [inner[k] for k in sorted(inner) if k not in prefix]
        return ordered[:limit]

    # ─── Stages ──────────────────────────────────────────────────────────────

    def _run_primary(self, expanded_query: str, filters: SearchFilters) -> List[MatchResult]:
        """
        Primary search is an optimisation, not a dependency: any failure
        is reported and treated as zero hits so the fuzzy stage still runs.
        """
        try:
            records = self._primary_index.ranked_search(expanded_query, filters)
        except Exception as error:
            print(f"[HybridSearch] ⚠ Primary search failed, falling back to fuzzy: {error}")
            return []

        return [
            MatchResult(record=record, score=1.0, matched_field=None, source="primary")
            for record in records
        ]

    def _run_fuzzy(self, terms: List[str], candidates: List[ItemRecord]) -> List[MatchResult]:
        """One matcher pass per expanded term, keeping each item's best score."""
        best: Dict[str, MatchResult] = {}
        for term in terms:
            for match in self._matcher.search(term, candidates):
                current = best.get(match.record.item_id)
                if current is None or match.score > current.score:
                    best[match.record.item_id] = match

        merged = list(best.values())
        merged.sort(key=lambda r: r.score, reverse=True)
        return merged

    def _suggest(self, query: str, candidates: List[ItemRecord]) -> List[str]:
        suggestions = self._suggester.suggest(
            query,
            collect_known_terms(candidates),
            max_suggestions=self._settings.max_suggestions,
        )
        return [s.term for s in suggestions]
