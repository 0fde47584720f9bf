# witsearch/infrastructure/bm25_index.py

import re
from datetime import date
from typing import Callable, Dict, List, Optional

import numpy as np
from rank_bm25 import BM25Okapi

from witsearch.config import EXPIRING_WINDOW_DAYS, FIELD_WEIGHTS
from witsearch.domain.interfaces import PrimaryIndexPort
from witsearch.domain.models import ItemRecord, SearchFilters
from witsearch.infrastructure.item_repository import matches_filters


_TOKEN_PATTERN = re.compile(r"[a-z0-9]+")


def tokenize(text: str) -> List[str]:
    return _TOKEN_PATTERN.findall(text.lower())


class BM25TextIndex(PrimaryIndexPort):
    """
    Primary ranked text index: one BM25 model per searchable field,
    combined with per-field weights.

    Final score = Σ weight(field) * bm25(field)

    A record is a hit when at least one query token occurs in one of its
    fields (any-term semantics); hits are ranked by the weighted score.
    Exact vocabulary only: typos and synonyms are handled upstream.
    """

    def __init__(
        self,
        field_weights: Optional[Dict[str, float]] = None,
        expiring_window_days: int = EXPIRING_WINDOW_DAYS,
        today: Callable[[], date] = date.today,
    ):
        self._field_weights = dict(field_weights or FIELD_WEIGHTS)
        self._window_days = expiring_window_days
        self._today = today
        self._records: List[ItemRecord] = []
        self._models: Dict[str, BM25Okapi] = {}
        self._vocabulary: List[set] = []

    def index_records(self, records: List[ItemRecord]) -> None:
        if not records:
            raise ValueError("Cannot index an empty record list.")

        models: Dict[str, BM25Okapi] = {}
        vocabulary: List[set] = [set() for _ in records]

        for field_name in self._field_weights:
            tokenized_corpus = [
                tokenize(" ".join(record.field_values(field_name)))
                for record in records
            ]
            for tokens, seen in zip(tokenized_corpus, vocabulary):
                seen.update(tokens)
            # BM25 needs a non-empty average document length
            if any(tokenized_corpus):
                models[field_name] = BM25Okapi(tokenized_corpus)

        self._records = list(records)
        self._models = models
        self._vocabulary = vocabulary

        print(f"[BM25Index] Indexed {len(records)} records across "
              f"{len(models)} fields — weights: {self._field_weights}")

    def clear(self) -> None:
        self._records = []
        self._models = {}
        self._vocabulary = []
        print("[BM25Index] Index cleared.")

    def is_ready(self) -> bool:
        return bool(self._models)

    def ranked_search(self, expanded_query: str, filters: SearchFilters) -> List[ItemRecord]:
        if not self._models:
            raise RuntimeError("Text index is empty. Call index_records() first.")

        query_tokens = list(dict.fromkeys(tokenize(expanded_query)))
        if not query_tokens:
            return []

        combined = np.zeros(len(self._records), dtype=np.float64)
        for field_name, model in self._models.items():
            scores = np.asarray(model.get_scores(query_tokens), dtype=np.float64)
            combined += self._field_weights[field_name] * scores

        query_set = set(query_tokens)
        today = self._today()
        hits = [
            idx for idx, record in enumerate(self._records)
            if query_set & self._vocabulary[idx]
            and matches_filters(record, filters, today, self._window_days)
        ]
        if not hits:
            return []

        hit_indices = np.array(hits)
        order = hit_indices[np.argsort(-combined[hit_indices], kind="stable")]
        return [self._records[idx] for idx in order[: filters.limit]]
