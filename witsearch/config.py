# witsearch/config.py

import os
from dataclasses import dataclass
from typing import Dict


# ── Matching thresholds ──────────────────────────────────────────────────────
MIN_SIMILARITY = 0.5            # fuzzy hits below this score are discarded
FUZZY_LIMIT = 20                # max hits per fuzzy pass
SUBSTRING_SCORE = 0.9           # value contains the literal query

# ── Hybrid search ────────────────────────────────────────────────────────────
DEFAULT_LIMIT = 50
DEFAULT_FUZZY_THRESHOLD = 5     # primary hits needed to skip the fuzzy stage
SUGGESTION_TRIGGER = 3          # fewer combined hits than this → suggestions

# ── Did-you-mean ─────────────────────────────────────────────────────────────
MAX_SUGGESTIONS = 3
SUGGESTION_MIN_SIMILARITY = 0.5
SUGGESTION_MAX_DISTANCE = 3

# ── Autocomplete ─────────────────────────────────────────────────────────────
AUTOCOMPLETE_MIN_CHARS = 2
AUTOCOMPLETE_LIMIT = 10

# ── Catalog filters ──────────────────────────────────────────────────────────
EXPIRING_WINDOW_DAYS = 7

# Relative weight of each field in the primary (BM25) index.
FIELD_WEIGHTS: Dict[str, float] = {
    "name": 10.0,
    "alternate_names": 8.0,
    "brand": 5.0,
    "model": 5.0,
    "description": 1.0,
}

# ── Data locations ───────────────────────────────────────────────────────────
DATA_DIRECTORY = "data"
CATALOG_PATH = "data/catalog"
SYNONYM_STORE_PATH = "data/synonyms.json"


def _getenv_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default)).strip()
    try:
        return int(raw)
    except ValueError as err:
        raise ValueError(f"Environment variable {name} must be an integer; got {raw!r}") from err


def _getenv_float(name: str, default: float) -> float:
    raw = os.getenv(name, str(default)).strip()
    try:
        return float(raw)
    except ValueError as err:
        raise ValueError(f"Environment variable {name} must be a number; got {raw!r}") from err


def _getenv_str(name: str, default: str) -> str:
    return os.getenv(name, default).strip()


@dataclass(frozen=True)
class SearchSettings:
    """
    Tunable values for one engine instance.
    Defaults mirror the module constants; `from_env()` lets deployments
    override them through WITSEARCH_* variables without touching code.
    """
    min_similarity: float = MIN_SIMILARITY
    fuzzy_limit: int = FUZZY_LIMIT
    substring_score: float = SUBSTRING_SCORE
    default_limit: int = DEFAULT_LIMIT
    fuzzy_threshold: int = DEFAULT_FUZZY_THRESHOLD
    suggestion_trigger: int = SUGGESTION_TRIGGER
    max_suggestions: int = MAX_SUGGESTIONS
    expiring_window_days: int = EXPIRING_WINDOW_DAYS
    catalog_path: str = CATALOG_PATH
    synonym_store_path: str = SYNONYM_STORE_PATH

    @classmethod
    def from_env(cls) -> "SearchSettings":
        return cls(
            min_similarity=_getenv_float("WITSEARCH_MIN_SIMILARITY", MIN_SIMILARITY),
            fuzzy_limit=_getenv_int("WITSEARCH_FUZZY_LIMIT", FUZZY_LIMIT),
            substring_score=_getenv_float("WITSEARCH_SUBSTRING_SCORE", SUBSTRING_SCORE),
            default_limit=_getenv_int("WITSEARCH_DEFAULT_LIMIT", DEFAULT_LIMIT),
            fuzzy_threshold=_getenv_int("WITSEARCH_FUZZY_THRESHOLD", DEFAULT_FUZZY_THRESHOLD),
            suggestion_trigger=_getenv_int("WITSEARCH_SUGGESTION_TRIGGER", SUGGESTION_TRIGGER),
            max_suggestions=_getenv_int("WITSEARCH_MAX_SUGGESTIONS", MAX_SUGGESTIONS),
            expiring_window_days=_getenv_int("WITSEARCH_EXPIRING_WINDOW_DAYS", EXPIRING_WINDOW_DAYS),
            catalog_path=_getenv_str("WITSEARCH_CATALOG_PATH", CATALOG_PATH),
            synonym_store_path=_getenv_str("WITSEARCH_SYNONYM_STORE_PATH", SYNONYM_STORE_PATH),
        )
