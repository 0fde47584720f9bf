# tests/test_bootstrap.py

from pathlib import Path

from witsearch.bootstrap import build_engine
from witsearch.config import SearchSettings
from witsearch.domain.models import ItemRecord, SearchFilters


CATALOG_DIR = Path(__file__).resolve().parent.parent / "data" / "catalog"


def _make_engine(tmp_path):
    return build_engine(SearchSettings(
        catalog_path=str(CATALOG_DIR),
        synonym_store_path=str(tmp_path / "synonyms.json"),
    ))


def test_build_engine_seeds_store_and_indexes_catalog(tmp_path):
    engine = _make_engine(tmp_path)

    assert len(engine.repository) == 12
    assert engine.text_index.is_ready()
    assert engine.expander.index.group_count > 0
    assert (tmp_path / "synonyms.json").exists()


def test_build_engine_without_catalog_starts_empty(tmp_path):
    engine = build_engine(SearchSettings(
        catalog_path=str(tmp_path / "missing"),
        synonym_store_path=str(tmp_path / "synonyms.json"),
    ))

    assert len(engine.repository) == 0
    assert engine.text_index.is_ready() is False
    assert engine.service.search("hammer").items == []


def test_reload_catalog_replaces_records(tmp_path):
    engine = _make_engine(tmp_path)

    engine.reload_catalog([ItemRecord(item_id="lvl", name="Torpedo Level")])

    assert len(engine.repository) == 1
    assert engine.text_index.ranked_search("hammer", SearchFilters()) == []
    assert [r.record.item_id for r in engine.service.search("level").items] == ["lvl"]


def test_reload_with_empty_catalog_clears_index(tmp_path):
    engine = _make_engine(tmp_path)

    engine.reload_catalog([])

    assert len(engine.repository) == 0
    assert engine.text_index.is_ready() is False
    outcome = engine.service.search("hammer")
    assert outcome.items == []
