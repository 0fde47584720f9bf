# witsearch/bootstrap.py

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from witsearch.config import SearchSettings
from witsearch.domain.models import ItemRecord
from witsearch.application.search_service import HybridSearchService
from witsearch.application.synonym_expander import SynonymExpander
from witsearch.infrastructure.bm25_index import BM25TextIndex
from witsearch.infrastructure.catalog_loader import CatalogLoader
from witsearch.infrastructure.item_repository import InMemoryItemRepository
from witsearch.infrastructure.synonym_seeds import seed_groups
from witsearch.infrastructure.synonym_store import JsonSynonymStore


@dataclass
class SearchEngine:
    """Wired collaborators shared by main.py and api.py."""
    settings: SearchSettings
    synonym_store: JsonSynonymStore
    expander: SynonymExpander
    repository: InMemoryItemRepository
    text_index: BM25TextIndex
    service: HybridSearchService

    def reload_catalog(self, records: List[ItemRecord]) -> None:
        """Swap in a new catalog snapshot and rebuild the text index."""
        self.repository.replace_all(records)
        if records:
            self.text_index.index_records(records)
        else:
            self.text_index.clear()


def build_engine(settings: Optional[SearchSettings] = None) -> SearchEngine:
    settings = settings or SearchSettings.from_env()

    synonym_store = JsonSynonymStore(settings.synonym_store_path)
    if synonym_store.is_empty():
        print("[Bootstrap] Synonym store is empty — seeding system groups...")
        synonym_store.seed(seed_groups())

    records: List[ItemRecord] = []
    if Path(settings.catalog_path).exists():
        records = CatalogLoader().load(settings.catalog_path)
    else:
        print(f"[Bootstrap] ⚠ No catalog at '{settings.catalog_path}' — starting empty.")

    repository = InMemoryItemRepository(records, expiring_window_days=settings.expiring_window_days)
    text_index = BM25TextIndex(expiring_window_days=settings.expiring_window_days)
    if records:
        text_index.index_records(records)

    expander = SynonymExpander(synonym_store)
    service = HybridSearchService(
        expander=expander,
        primary_index=text_index,
        repository=repository,
        settings=settings,
    )

    return SearchEngine(
        settings=settings,
        synonym_store=synonym_store,
        expander=expander,
        repository=repository,
        text_index=text_index,
        service=service,
    )
