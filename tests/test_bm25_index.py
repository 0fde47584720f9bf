# tests/test_bm25_index.py

from datetime import date

import pytest

from witsearch.domain.models import ItemRecord, SearchFilters
from witsearch.infrastructure.bm25_index import BM25TextIndex, tokenize


def _today() -> date:
    return date(2026, 10, 19)


def _make_records():
    # the description-only match comes first so ranking has to move it
    return [
        ItemRecord(item_id="bin", name="Storage Bin", description="holds a drill", location_id="garage"),
        ItemRecord(item_id="drill", name="Drill", location_id="garage"),
        ItemRecord(item_id="hammer", name="Hammer", location_id="shed"),
        ItemRecord(item_id="saw", name="Saw", location_id="shed"),
        ItemRecord(item_id="level", name="Level", location_id="shed"),
        ItemRecord(item_id="pliers", name="Pliers", brand="Knipex", location_id="shed"),
    ]


def _make_index(records=None) -> BM25TextIndex:
    index = BM25TextIndex(today=_today)
    index.index_records(records or _make_records())
    return index


def test_tokenize_splits_on_non_alphanumerics():
    assert tokenize("Crescent-Wrench 10in!") == ["crescent", "wrench", "10in"]


def test_search_before_indexing_raises():
    index = BM25TextIndex()

    assert index.is_ready() is False
    with pytest.raises(RuntimeError, match="index_records"):
        index.ranked_search("drill", SearchFilters())


def test_indexing_empty_list_raises():
    with pytest.raises(ValueError, match="empty"):
        BM25TextIndex().index_records([])


def test_name_outranks_description():
    results = _make_index().ranked_search("drill", SearchFilters())

    assert [r.item_id for r in results] == ["drill", "bin"]


def test_any_query_term_is_a_hit():
    results = _make_index().ranked_search("drill hammer", SearchFilters())

    assert {r.item_id for r in results} == {"drill", "bin", "hammer"}


def test_brand_is_searchable():
    results = _make_index().ranked_search("knipex", SearchFilters())

    assert [r.item_id for r in results] == ["pliers"]


def test_unknown_terms_return_nothing():
    index = _make_index()

    assert index.ranked_search("hamer", SearchFilters()) == []
    assert index.ranked_search("!!!", SearchFilters()) == []


def test_filters_apply_to_hits():
    index = _make_index()

    assert [r.item_id for r in index.ranked_search("drill", SearchFilters(location_scope=["garage"]))] == ["drill", "bin"]
    assert index.ranked_search("hammer", SearchFilters(location_scope=["garage"])) == []
    assert index.ranked_search("hammer", SearchFilters(location_scope=[])) == []


def test_limit_applies_after_ranking():
    results = _make_index().ranked_search("drill", SearchFilters(limit=1))

    assert [r.item_id for r in results] == ["drill"]


def test_reindexing_replaces_previous_records():
    index = _make_index()
    index.index_records([ItemRecord(item_id="tape", name="Duct Tape")])

    assert index.ranked_search("drill", SearchFilters()) == []
    assert [r.item_id for r in index.ranked_search("tape", SearchFilters())] == ["tape"]
