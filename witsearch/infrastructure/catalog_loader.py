# witsearch/infrastructure/catalog_loader.py

import csv
import json
import uuid
from datetime import date
from pathlib import Path
from typing import List, Optional

from witsearch.domain.models import STORAGE_TYPES, ItemRecord


SUPPORTED_EXTENSIONS = {".csv", ".json"}

# Separator for list-valued cells in CSV files
LIST_SEPARATOR = ";"

_TRUE_VALUES = {"1", "true", "yes", "y", "on"}


def _parse_bool(raw, default: bool) -> bool:
    if raw is None or raw == "":
        return default
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() in _TRUE_VALUES


def _parse_date(raw) -> Optional[date]:
    if not raw:
        return None
    if isinstance(raw, date):
        return raw
    return date.fromisoformat(str(raw).strip()[:10])


def _parse_list(raw) -> List[str]:
    if not raw:
        return []
    if isinstance(raw, (list, tuple)):
        return [str(v).strip() for v in raw if str(v).strip()]
    return [part.strip() for part in str(raw).split(LIST_SEPARATOR) if part.strip()]


def _optional_text(raw) -> Optional[str]:
    if raw is None:
        return None
    text = str(raw).strip()
    return text or None


class CatalogLoader:
    """
    Loads item records from CSV or JSON files.

    CSV: one row per item with a header line; `alternate_names` cells hold
    several names separated by ';'.
    JSON: a list of item objects, or {"items": [...]}.
    Rows without a name are skipped; rows without an id get a generated one.
    """

    def load_directory(self, directory_path: str) -> List[ItemRecord]:
        data_dir = Path(directory_path)
        if not data_dir.exists():
            raise FileNotFoundError(f"Catalog directory not found: {directory_path}")

        records: List[ItemRecord] = []
        for file_path in sorted(data_dir.rglob("*")):
            if file_path.suffix.lower() not in SUPPORTED_EXTENSIONS:
                continue
            loaded = self.load_file(file_path)
            records.extend(loaded)
            print(f"[CatalogLoader] Loaded {len(loaded)} items from {file_path.name}")

        print(f"[CatalogLoader] Total items loaded: {len(records)}")
        return records

    def load(self, path: str) -> List[ItemRecord]:
        """Load a single catalog file or every catalog file under a directory."""
        target = Path(path)
        if target.is_dir():
            return self.load_directory(path)
        if not target.exists():
            raise FileNotFoundError(f"Catalog not found: {path}")
        return self.load_file(target)

    def load_file(self, file_path: Path) -> List[ItemRecord]:
        suffix = file_path.suffix.lower()
        if suffix == ".csv":
            return self._load_csv_file(file_path)
        if suffix == ".json":
            return self._load_json_file(file_path)
        raise ValueError(f"Unsupported catalog file type: '{file_path.name}'")

    # ─── Private: File Loaders ────────────────────────────────────────────────

    def _load_csv_file(self, file_path: Path) -> List[ItemRecord]:
        with open(file_path, encoding="utf-8", errors="ignore", newline="") as f:
            rows = list(csv.DictReader(f))
        return [r for r in (self._to_record(row) for row in rows) if r is not None]

    def _load_json_file(self, file_path: Path) -> List[ItemRecord]:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
        entries = raw.get("items", []) if isinstance(raw, dict) else raw
        if not isinstance(entries, list):
            raise ValueError(f"Expected a list of items in '{file_path.name}'")
        return [r for r in (self._to_record(entry) for entry in entries) if r is not None]

    @staticmethod
    def _to_record(row: dict) -> Optional[ItemRecord]:
        name = _optional_text(row.get("name"))
        if name is None:
            return None

        storage_type = _optional_text(row.get("storage_type"))
        if storage_type is not None:
            storage_type = storage_type.lower()
            if storage_type not in STORAGE_TYPES:
                raise ValueError(f"Unknown storage type '{storage_type}' for item '{name}'")

        return ItemRecord(
            item_id=_optional_text(row.get("id")) or str(uuid.uuid4()),
            name=name,
            alternate_names=_parse_list(row.get("alternate_names")),
            brand=_optional_text(row.get("brand")),
            model=_optional_text(row.get("model")),
            description=_optional_text(row.get("description")),
            location_id=_optional_text(row.get("location_id")),
            category_id=_optional_text(row.get("category_id")),
            storage_type=storage_type,
            is_perishable=_parse_bool(row.get("is_perishable"), default=False),
            expiration_date=_parse_date(row.get("expiration_date")),
            is_active=_parse_bool(row.get("is_active"), default=True),
        )
