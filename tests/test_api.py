# tests/test_api.py

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from api import app, get_engine
from witsearch.bootstrap import build_engine
from witsearch.config import SearchSettings
from witsearch.domain.models import ItemRecord
from witsearch.application.search_service import HybridSearchService


CATALOG_DIR = Path(__file__).resolve().parent.parent / "data" / "catalog"


@pytest.fixture
def client(tmp_path):
    settings = SearchSettings(
        catalog_path=str(CATALOG_DIR),
        synonym_store_path=str(tmp_path / "synonyms.json"),
    )
    engine = build_engine(settings)
    app.dependency_overrides[get_engine] = lambda: engine
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_root_reports_status(client):
    body = client.get("/").json()

    assert body["status"] == "ready"
    assert body["items_indexed"] == 12
    assert body["synonym_groups"] > 0


def test_search_with_synonym(client):
    response = client.post("/search", json={"query": "spanner"})

    assert response.status_code == 200
    body = response.json()
    assert body["items"][0]["id"] == "it-001"
    assert body["items"][0]["source"] == "primary"
    assert "synonyms" in body["searchMethod"]
    assert "wrench" in body["synonymsUsed"]
    assert body["count"] == len(body["items"])


def test_search_with_typo_suggests(client):
    body = client.post("/search", json={"query": "hamer"}).json()

    assert body["items"][0]["id"] == "it-002"
    assert body["fuzzyMatches"] >= 1
    assert "hammer" in body["suggestions"]


def test_search_empty_query(client):
    body = client.post("/search", json={"query": "  "}).json()

    assert body["count"] == 0
    assert body["searchMethod"] == "none"


def test_search_rejects_unknown_expiration_status(client):
    response = client.post("/search", json={"query": "milk", "expiration_status": "stale"})

    assert response.status_code == 400
    assert "stale" in response.json()["detail"]


def test_search_respects_location_scope(client):
    body = client.post("/search", json={"query": "drill", "location_scope": ["kitchen-fridge"]}).json()

    assert all(item["locationId"] == "kitchen-fridge" for item in body["items"])


def test_expand(client):
    body = client.get("/expand", params={"q": "spanner"}).json()

    assert body["originalQuery"] == "spanner"
    assert "wrench" in body["expandedTerms"]
    assert body["synonymsFound"] is True


def test_autocomplete(client):
    body = client.get("/autocomplete", params={"q": "dri"}).json()

    assert body["suggestions"][0] == "drill driver"
    assert "Cordless Drill" in body["suggestions"]
    assert client.get("/autocomplete", params={"q": "d"}).json()["suggestions"] == []


def test_list_synonyms_and_stats(client):
    tools = client.get("/synonyms", params={"category": "tools"}).json()
    stats = client.get("/synonyms/stats").json()

    assert tools["count"] == len(tools["groups"])
    assert all(g["category"] == "tools" for g in tools["groups"])
    assert stats["total_groups"] >= tools["count"]


def test_upsert_group_refreshes_expansion(client):
    response = client.post("/synonyms", json={
        "canonical_name": "sofa",
        "synonyms": ["couch", "settee"],
        "category": "furniture",
    })

    assert response.status_code == 201
    assert response.json()["group"]["isSystem"] is False
    assert "sofa" in client.get("/expand", params={"q": "couch"}).json()["expandedTerms"]


def test_upsert_group_requires_canonical_name(client):
    response = client.post("/synonyms", json={"canonical_name": "  ", "synonyms": ["x"]})

    assert response.status_code == 400


def test_add_synonyms(client):
    response = client.post("/synonyms/spanner/add", json={"synonyms": ["monkey wrench"]})

    assert response.status_code == 200
    assert response.json()["group"]["canonicalName"] == "wrench"
    assert "wrench" in client.get("/expand", params={"q": "monkey wrench"}).json()["expandedTerms"]


def test_add_synonyms_unknown_term(client):
    response = client.post("/synonyms/xyzzy/add", json={"synonyms": ["foo"]})

    assert response.status_code == 404


def test_deactivate_group(client):
    response = client.delete("/synonyms/wrench", params={"category": "tools"})

    assert response.status_code == 200
    assert client.get("/expand", params={"q": "spanner"}).json()["synonymsFound"] is False
    assert client.delete("/synonyms/wrench").status_code == 404


# ─── Engine settings reach the HTTP path ──────────────────────────────────────

def _spy_client(tmp_path, settings, primary_records):
    engine = build_engine(settings)
    matcher = MagicMock()
    matcher.search.return_value = []
    primary_index = MagicMock()
    primary_index.ranked_search.return_value = primary_records
    engine.service = HybridSearchService(
        expander=engine.expander,
        primary_index=primary_index,
        repository=engine.repository,
        matcher=matcher,
        settings=settings,
    )
    app.dependency_overrides[get_engine] = lambda: engine
    return TestClient(app), matcher


def _settings(tmp_path, **overrides) -> SearchSettings:
    return SearchSettings(
        catalog_path=str(CATALOG_DIR),
        synonym_store_path=str(tmp_path / "synonyms.json"),
        **overrides,
    )


def test_search_uses_configured_fuzzy_threshold(tmp_path):
    hammer = ItemRecord(item_id="it-002", name="Claw Hammer")
    client, matcher = _spy_client(tmp_path, _settings(tmp_path, fuzzy_threshold=1), [hammer])
    try:
        body = client.post("/search", json={"query": "hammer"}).json()
    finally:
        app.dependency_overrides.clear()

    assert matcher.search.call_count == 0
    assert [item["id"] for item in body["items"]] == ["it-002"]


def test_search_uses_configured_limit(tmp_path):
    records = [ItemRecord(item_id=f"h{i}", name=f"Hammer {i}") for i in range(4)]
    client, _ = _spy_client(tmp_path, _settings(tmp_path, default_limit=2, fuzzy_threshold=1), records)
    try:
        body = client.post("/search", json={"query": "hammer"}).json()
    finally:
        app.dependency_overrides.clear()

    assert [item["id"] for item in body["items"]] == ["h0", "h1"]


def test_explicit_zero_fuzzy_threshold_is_kept(tmp_path):
    client, matcher = _spy_client(tmp_path, _settings(tmp_path), [])
    try:
        body = client.post("/search", json={"query": "hammer", "fuzzy_threshold": 0}).json()
    finally:
        app.dependency_overrides.clear()

    assert matcher.search.call_count == 0
    assert body["count"] == 0


@pytest.mark.parametrize("payload", [
    {"query": "hammer", "limit": 0},
    {"query": "hammer", "limit": -1},
    {"query": "hammer", "fuzzy_threshold": -1},
])
def test_search_rejects_out_of_range_limits(client, payload):
    assert client.post("/search", json=payload).status_code == 400


# ─── Catalog reload and synonym removal ───────────────────────────────────────

def test_reload_catalog(client):
    response = client.post("/catalog/reload")

    assert response.status_code == 200
    assert response.json()["items_indexed"] == 12
    assert client.post("/search", json={"query": "spanner"}).json()["items"][0]["id"] == "it-001"


def test_reload_catalog_missing_directory(tmp_path):
    engine = build_engine(SearchSettings(
        catalog_path=str(tmp_path / "missing"),
        synonym_store_path=str(tmp_path / "synonyms.json"),
    ))
    app.dependency_overrides[get_engine] = lambda: engine
    try:
        response = TestClient(app).post("/catalog/reload")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 404


def test_remove_synonym(client):
    response = client.delete("/synonyms/wrench/synonyms/spanner", params={"category": "tools"})

    assert response.status_code == 200
    assert client.get("/expand", params={"q": "spanner"}).json()["synonymsFound"] is False
    assert client.delete("/synonyms/wrench/synonyms/spanner").status_code == 404
