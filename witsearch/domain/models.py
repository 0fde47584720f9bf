# witsearch/domain/models.py

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Tuple

from witsearch.config import DEFAULT_FUZZY_THRESHOLD, DEFAULT_LIMIT


# Searchable text fields, in priority order.
SEARCH_FIELDS: Tuple[str, ...] = ("name", "alternate_names", "brand", "model", "description")

EXPIRATION_STATUSES = {"expired", "expiring", "fresh", "perishable"}
STORAGE_TYPES = {"pantry", "refrigerated", "frozen"}


def normalize_term(term: str) -> str:
    return term.strip().lower()


@dataclass(frozen=True)
class SynonymGroup:
    """
    A set of interchangeable search terms anchored by one canonical name.
    """
    canonical_name: str
    synonyms: Tuple[str, ...] = ()
    category: Optional[str] = None
    is_system: bool = True
    is_active: bool = True

    @classmethod
    def create(
        cls,
        canonical_name: str,
        synonyms: List[str],
        category: Optional[str] = None,
        is_system: bool = True,
        is_active: bool = True,
    ) -> "SynonymGroup":
        """Build a group with normalized, deduplicated terms."""
        canonical = normalize_term(canonical_name)
        if not canonical:
            raise ValueError("Canonical name is required.")

        cleaned: List[str] = []
        for synonym in synonyms:
            term = normalize_term(synonym)
            if term and term != canonical and term not in cleaned:
                cleaned.append(term)

        return cls(
            canonical_name=canonical,
            synonyms=tuple(cleaned),
            category=normalize_term(category) if category else None,
            is_system=is_system,
            is_active=is_active,
        )

    @property
    def terms(self) -> Tuple[str, ...]:
        return (self.canonical_name,) + self.synonyms

    def contains(self, term: str) -> bool:
        return term == self.canonical_name or term in self.synonyms


@dataclass
class ItemRecord:
    """
    A catalog item as seen by the search engine: identity, searchable
    text fields and the attributes the filters act on.
    """
    item_id: str
    name: str
    alternate_names: List[str] = field(default_factory=list)
    brand: Optional[str] = None
    model: Optional[str] = None
    description: Optional[str] = None
    location_id: Optional[str] = None
    category_id: Optional[str] = None
    storage_type: Optional[str] = None
    is_perishable: bool = False
    expiration_date: Optional[date] = None
    is_active: bool = True

    def field_values(self, field_name: str) -> List[str]:
        """Return the string values of a searchable field (list-valued fields flattened)."""
        value = getattr(self, field_name, None)
        if not value:
            return []
        values = value if isinstance(value, (list, tuple)) else [value]
        return [v for v in values if isinstance(v, str) and v]


@dataclass
class MatchResult:
    """
    A scored hit for one search call. The record is referenced, never copied.
    """
    record: ItemRecord
    score: float
    matched_field: Optional[str]
    source: str = "fuzzy"

    def __repr__(self) -> str:
        return (
            f"MatchResult(score={self.score:.4f}, "
            f"item='{self.record.name}', "
            f"field={self.matched_field}, source={self.source})"
        )


@dataclass
class ExpandedQuery:
    original_query: str
    expanded_terms: List[str] = field(default_factory=list)
    synonyms_found: bool = False


@dataclass
class Suggestion:
    term: str
    similarity: float
    distance: int


@dataclass
class SearchFilters:
    """
    Constraints applied by both search stages. `location_scope` is the set of
    locations the caller may see, resolved upstream by the permission layer;
    None leaves locations unrestricted, an empty list grants none.
    """
    location_scope: Optional[List[str]] = None
    category_id: Optional[str] = None
    storage_type: Optional[str] = None
    expiration_status: Optional[str] = None
    limit: int = DEFAULT_LIMIT
    fuzzy_threshold: int = DEFAULT_FUZZY_THRESHOLD

    def __post_init__(self) -> None:
        if self.expiration_status is not None and self.expiration_status not in EXPIRATION_STATUSES:
            raise ValueError(
                f"Unknown expiration status '{self.expiration_status}'. "
                f"Expected one of: {', '.join(sorted(EXPIRATION_STATUSES))}"
            )
        if self.limit < 1:
            raise ValueError(f"Limit must be at least 1; got {self.limit}.")
        if self.fuzzy_threshold < 0:
            raise ValueError(f"Fuzzy threshold cannot be negative; got {self.fuzzy_threshold}.")


@dataclass
class SearchOutcome:
    items: List[MatchResult] = field(default_factory=list)
    fuzzy_matches: int = 0
    suggestions: List[str] = field(default_factory=list)
    synonyms_used: List[str] = field(default_factory=list)
    search_method: str = "none"

    @classmethod
    def empty(cls) -> "SearchOutcome":
        return cls()
