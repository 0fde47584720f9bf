# witsearch/application/synonym_expander.py

import re
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Pattern, Tuple

from witsearch.domain.interfaces import SynonymStorePort
from witsearch.domain.models import ExpandedQuery, SynonymGroup, normalize_term


class SynonymIndex:
    """
    Immutable term → groups lookup built from the active synonym groups.

    A term may sit in several groups (e.g. "tape" is a canonical name under
    plumbing, paint and office); lookups return all of them.
    Never mutated after construction, so one instance can be shared by
    concurrent searches. Refreshing means building a new index.
    """

    def __init__(self, entries: Mapping[str, Tuple[SynonymGroup, ...]], group_count: int = 0):
        self._entries = MappingProxyType(dict(entries))
        self._group_count = group_count

    @classmethod
    def build(cls, groups: Iterable[SynonymGroup]) -> "SynonymIndex":
        entries: Dict[str, List[SynonymGroup]] = {}
        count = 0
        for group in groups:
            if not group.is_active:
                continue
            count += 1
            for term in group.terms:
                bucket = entries.setdefault(term, [])
                if group not in bucket:
                    bucket.append(group)
        return cls({term: tuple(bucket) for term, bucket in entries.items()}, group_count=count)

    def lookup(self, term: str) -> Tuple[SynonymGroup, ...]:
        return self._entries.get(normalize_term(term), ())

    def __contains__(self, term: str) -> bool:
        return normalize_term(term) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def group_count(self) -> int:
        return self._group_count


class SynonymExpander:
    """
    Expands a raw query into every lexically related term.

    Lookups hit an in-memory SynonymIndex rather than the store, so
    expansion costs O(query words) dictionary reads. Call refresh() after
    the store changes; the new index replaces the old one in one assignment.
    """

    def __init__(self, store: SynonymStorePort, index: Optional[SynonymIndex] = None):
        self._store = store
        self._index = index if index is not None else SynonymIndex.build(store.all_groups())

    @property
    def index(self) -> SynonymIndex:
        return self._index

    def refresh(self) -> SynonymIndex:
        """Rebuild the index from the store and swap it in."""
        fresh = SynonymIndex.build(self._store.all_groups())
        self._index = fresh
        print(f"[SynonymExpander] Index refreshed — {fresh.group_count} groups, {len(fresh)} terms.")
        return fresh

    def expand(self, query: str) -> ExpandedQuery:
        if not isinstance(query, str) or not query.strip():
            return ExpandedQuery(original_query=query if isinstance(query, str) else "")

        index = self._index
        normalized = normalize_term(query)
        words = normalized.split()

        # dict as an insertion-ordered set
        terms: Dict[str, None] = dict.fromkeys(words)

        for word in words:
            for group in index.lookup(word):
                terms.update(dict.fromkeys(group.terms))

        # Whole query as one phrase, for multi-word canonical names.
        phrase_groups = index.lookup(normalized)
        if phrase_groups:
            terms[normalized] = None
            for group in phrase_groups:
                terms.update(dict.fromkeys(group.terms))

        expanded = [term for term in terms if term]
        return ExpandedQuery(
            original_query=query,
            expanded_terms=expanded,
            synonyms_found=len(expanded) > len(set(words)),
        )

    def find_related_terms(self, term: str) -> List[str]:
        """The normalized term followed by every term sharing a group with it."""
        if not isinstance(term, str) or not term.strip():
            return []
        normalized = normalize_term(term)
        related: Dict[str, None] = {normalized: None}
        for group in self._index.lookup(normalized):
            related.update(dict.fromkeys(group.terms))
        return list(related)

    def build_expanded_text_query(self, query: str) -> str:
        return " ".join(self.expand(query).expanded_terms)

    def build_synonym_pattern(self, query: str) -> Optional[Pattern[str]]:
        """
        Case-insensitive pattern matching any expanded term as a whole word,
        used to highlight matches. None when the query is empty.
        """
        terms = self.expand(query).expanded_terms
        if not terms:
            return None
        # Longest first so "crescent wrench" wins over "wrench".
        alternatives = "|".join(re.escape(t) for t in sorted(terms, key=len, reverse=True))
        return re.compile(rf"\b({alternatives})\b", re.IGNORECASE)
