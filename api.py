from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import List, Optional
import uvicorn

from witsearch.bootstrap import SearchEngine, build_engine
from witsearch.config import AUTOCOMPLETE_LIMIT
from witsearch.domain.models import MatchResult, SearchFilters, SearchOutcome, SynonymGroup
from witsearch.infrastructure.catalog_loader import CatalogLoader

# ── API Models ───────────────────────────────────────────────────────────────
class SearchRequest(BaseModel):
    query: str
    location_scope: Optional[List[str]] = None
    category_id: Optional[str] = None
    storage_type: Optional[str] = None
    expiration_status: Optional[str] = None
    limit: Optional[int] = None
    fuzzy_threshold: Optional[int] = None

class SynonymGroupRequest(BaseModel):
    canonical_name: str
    synonyms: List[str] = []
    category: Optional[str] = None
    is_system: bool = False

class AddSynonymsRequest(BaseModel):
    synonyms: List[str]

# ── App Initialization ───────────────────────────────────────────────────────
app = FastAPI(
    title="Inventory Search API",
    description="Typo-tolerant, synonym-aware search over inventory items.",
    version="1.0.0"
)

# ── CORS Middleware ──────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://localhost:8080", "http://127.0.0.1:8080"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_engine: Optional[SearchEngine] = None


def get_engine() -> SearchEngine:
    """Build the engine on first use (singleton for the process)."""
    global _engine
    if _engine is None:
        _engine = build_engine()
        print(f"[API] Engine ready — {len(_engine.repository)} items indexed.")
    return _engine

# ── Serializers ──────────────────────────────────────────────────────────────
def _serialize_match(result: MatchResult) -> dict:
    record = result.record
    return {
        "id": record.item_id,
        "name": record.name,
        "alternateNames": record.alternate_names,
        "brand": record.brand,
        "model": record.model,
        "locationId": record.location_id,
        "categoryId": record.category_id,
        "score": round(float(result.score), 4),
        "matchedField": result.matched_field,
        "source": result.source,
    }

def _serialize_outcome(outcome: SearchOutcome) -> dict:
    return {
        "items": [_serialize_match(r) for r in outcome.items],
        "fuzzyMatches": outcome.fuzzy_matches,
        "suggestions": outcome.suggestions,
        "synonymsUsed": outcome.synonyms_used,
        "searchMethod": outcome.search_method,
        "count": len(outcome.items),
    }

def _serialize_group(group: SynonymGroup) -> dict:
    return {
        "canonicalName": group.canonical_name,
        "synonyms": list(group.synonyms),
        "category": group.category,
        "isSystem": group.is_system,
        "isActive": group.is_active,
    }

# ── Endpoints ────────────────────────────────────────────────────────────────
@app.get("/")
def read_root(engine: SearchEngine = Depends(get_engine)):
    return {
        "message": "Inventory search API is running.",
        "status": "ready" if engine.text_index.is_ready() else "catalog_empty",
        "items_indexed": len(engine.repository),
        "synonym_groups": engine.expander.index.group_count,
    }

@app.post("/search")
def search(request: SearchRequest, engine: SearchEngine = Depends(get_engine)):
    settings = engine.settings
    try:
        filters = SearchFilters(
            location_scope=request.location_scope,
            category_id=request.category_id,
            storage_type=request.storage_type,
            expiration_status=request.expiration_status,
            limit=settings.default_limit if request.limit is None else request.limit,
            fuzzy_threshold=settings.fuzzy_threshold if request.fuzzy_threshold is None else request.fuzzy_threshold,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        outcome = engine.service.search(request.query, filters)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    return _serialize_outcome(outcome)

@app.get("/expand")
def expand(q: str = "", engine: SearchEngine = Depends(get_engine)):
    expanded = engine.expander.expand(q)
    return {
        "originalQuery": expanded.original_query,
        "expandedTerms": expanded.expanded_terms,
        "synonymsFound": expanded.synonyms_found,
    }

@app.get("/autocomplete")
def autocomplete(q: str = "", limit: int = AUTOCOMPLETE_LIMIT, engine: SearchEngine = Depends(get_engine)):
    return {"suggestions": engine.service.autocomplete(q, limit=limit)}

@app.get("/synonyms")
def list_synonyms(category: Optional[str] = None, engine: SearchEngine = Depends(get_engine)):
    groups = engine.synonym_store.all_groups(category=category)
    return {"groups": [_serialize_group(g) for g in groups], "count": len(groups)}

@app.get("/synonyms/stats")
def synonym_stats(engine: SearchEngine = Depends(get_engine)):
    return engine.synonym_store.stats()

@app.post("/synonyms", status_code=201)
def upsert_synonym_group(request: SynonymGroupRequest, engine: SearchEngine = Depends(get_engine)):
    try:
        group = engine.synonym_store.upsert_group(
            request.canonical_name,
            request.synonyms,
            category=request.category,
            is_system=request.is_system,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    engine.expander.refresh()
    return {"group": _serialize_group(group)}

@app.post("/synonyms/{term}/add")
def add_synonyms(term: str, request: AddSynonymsRequest, engine: SearchEngine = Depends(get_engine)):
    group = engine.synonym_store.add_to_group(term, request.synonyms)
    if group is None:
        raise HTTPException(status_code=404, detail=f"No synonym group contains '{term}'")

    engine.expander.refresh()
    return {"group": _serialize_group(group)}

@app.delete("/synonyms/{canonical_name}")
def deactivate_synonym_group(canonical_name: str, category: Optional[str] = None, engine: SearchEngine = Depends(get_engine)):
    count = engine.synonym_store.deactivate_group(canonical_name, category=category)
    if count == 0:
        raise HTTPException(status_code=404, detail=f"Synonym group '{canonical_name}' not found")

    engine.expander.refresh()
    return {"message": f"Deactivated {count} synonym group(s) for '{canonical_name}'"}

@app.delete("/synonyms/{canonical_name}/synonyms/{synonym}")
def remove_synonym(canonical_name: str, synonym: str, category: Optional[str] = None, engine: SearchEngine = Depends(get_engine)):
    count = engine.synonym_store.remove_synonym(canonical_name, synonym, category=category)
    if count == 0:
        raise HTTPException(status_code=404, detail=f"'{synonym}' is not a synonym of '{canonical_name}'")

    engine.expander.refresh()
    return {"message": f"Removed '{synonym}' from {count} synonym group(s)"}

@app.post("/catalog/reload")
def reload_catalog(engine: SearchEngine = Depends(get_engine)):
    try:
        records = CatalogLoader().load(engine.settings.catalog_path)
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    engine.reload_catalog(records)
    return {"items_indexed": len(engine.repository)}

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
