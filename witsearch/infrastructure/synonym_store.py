# witsearch/infrastructure/synonym_store.py

import json
from dataclasses import asdict, replace
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from witsearch.domain.interfaces import SynonymStorePort
from witsearch.domain.models import SynonymGroup, normalize_term


class InMemorySynonymStore(SynonymStorePort):
    """
    Synonym groups held in a list, with the administrative operations
    used by seeding and the API.

    Groups are keyed on (canonical name, category): the seed data has the
    same canonical name in several categories ("washer", "tape") and those
    groups coexist. Removal is a soft deactivate unless delete_group() is
    called explicitly.
    """

    def __init__(self, groups: Optional[Iterable[SynonymGroup]] = None):
        self._groups: List[SynonymGroup] = list(groups or [])

    # ─── SynonymStorePort ────────────────────────────────────────────────────

    def find_groups_containing(self, term: str) -> List[SynonymGroup]:
        normalized = normalize_term(term)
        if not normalized:
            return []
        return [g for g in self._groups if g.is_active and g.contains(normalized)]

    def all_groups(
        self,
        category: Optional[str] = None,
        is_system: Optional[bool] = None,
    ) -> List[SynonymGroup]:
        wanted_category = normalize_term(category) if category else None
        groups = [
            g for g in self._groups
            if g.is_active
            and (wanted_category is None or g.category == wanted_category)
            and (is_system is None or g.is_system == is_system)
        ]
        return sorted(groups, key=lambda g: (g.category or "", g.canonical_name))

    # ─── Administration ──────────────────────────────────────────────────────

    def upsert_group(
        self,
        canonical_name: str,
        synonyms: List[str],
        category: Optional[str] = None,
        is_system: bool = True,
        is_active: bool = True,
    ) -> SynonymGroup:
        group = SynonymGroup.create(canonical_name, synonyms, category, is_system, is_active)
        for i, existing in enumerate(self._groups):
            if (existing.canonical_name, existing.category) == (group.canonical_name, group.category):
                self._groups[i] = group
                break
        else:
            self._groups.append(group)
        self._persist()
        return group

    def add_to_group(self, term: str, new_synonyms: List[str]) -> Optional[SynonymGroup]:
        """Extend the first active group containing `term`. None when no group has it."""
        normalized = normalize_term(term)
        for i, group in enumerate(self._groups):
            if not (group.is_active and group.contains(normalized)):
                continue
            additions = []
            for synonym in new_synonyms:
                candidate = normalize_term(synonym)
                if candidate and candidate not in group.terms and candidate not in additions:
                    additions.append(candidate)
            if not additions:
                return group
            updated = replace(group, synonyms=group.synonyms + tuple(additions))
            self._groups[i] = updated
            self._persist()
            return updated
        return None

    def remove_synonym(self, canonical_name: str, synonym: str, category: Optional[str] = None) -> int:
        """Returns the number of groups the synonym was removed from."""
        canonical = normalize_term(canonical_name)
        to_remove = normalize_term(synonym)
        wanted_category = normalize_term(category) if category else None
        count = 0
        for i, group in enumerate(self._groups):
            if group.canonical_name != canonical or to_remove not in group.synonyms:
                continue
            if wanted_category is not None and group.category != wanted_category:
                continue
            self._groups[i] = replace(group, synonyms=tuple(s for s in group.synonyms if s != to_remove))
            count += 1
        if count:
            self._persist()
        return count

    def deactivate_group(self, canonical_name: str, category: Optional[str] = None) -> int:
        """Soft delete. Returns the number of groups deactivated."""
        canonical = normalize_term(canonical_name)
        wanted_category = normalize_term(category) if category else None
        count = 0
        for i, group in enumerate(self._groups):
            if group.canonical_name != canonical or not group.is_active:
                continue
            if wanted_category is not None and group.category != wanted_category:
                continue
            self._groups[i] = replace(group, is_active=False)
            count += 1
        if count:
            self._persist()
        return count

    def delete_group(self, canonical_name: str) -> bool:
        canonical = normalize_term(canonical_name)
        remaining = [g for g in self._groups if g.canonical_name != canonical]
        deleted = len(remaining) != len(self._groups)
        if deleted:
            self._groups = remaining
            self._persist()
        return deleted

    def seed(self, groups: Iterable[SynonymGroup]) -> int:
        """Replace all system groups with `groups`; user-created groups are kept."""
        seeded = [replace(g, is_system=True) for g in groups]
        self._groups = [g for g in self._groups if not g.is_system] + seeded
        self._persist()
        print(f"[SynonymStore] Seeded {len(seeded)} system synonym groups.")
        return len(seeded)

    def stats(self) -> dict:
        active = [g for g in self._groups if g.is_active]
        by_category: Dict[str, Dict[str, int]] = {}
        for group in active:
            entry = by_category.setdefault(group.category or "uncategorized", {"groups": 0, "synonyms": 0})
            entry["groups"] += 1
            entry["synonyms"] += len(group.synonyms)

        return {
            "total_groups": len(active),
            "by_category": [
                {"category": name, **counts}
                for name, counts in sorted(by_category.items(), key=lambda kv: (-kv[1]["groups"], kv[0]))
            ],
        }

    def __len__(self) -> int:
        return len(self._groups)

    def _persist(self) -> None:
        """Hook for persistent subclasses."""


class JsonSynonymStore(InMemorySynonymStore):
    """
    Synonym store persisted as a JSON document on disk.
    Every mutation rewrites the whole file; the engine only reads.
    """

    def __init__(self, path: str):
        self._path = Path(path)
        if self._path.exists() and not self._path.is_file():
            raise RuntimeError(f"Synonym store path '{path}' is not a file.")
        super().__init__(self._load())
        print(f"[SynonymStore] Loaded {len(self)} synonym groups from '{self._path}'.")

    def is_empty(self) -> bool:
        return len(self) == 0

    def _load(self) -> List[SynonymGroup]:
        if not self._path.exists():
            return []
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            return [
                SynonymGroup.create(
                    entry["canonical_name"],
                    entry.get("synonyms", []),
                    category=entry.get("category"),
                    is_system=entry.get("is_system", True),
                    is_active=entry.get("is_active", True),
                )
                for entry in raw.get("groups", [])
            ]
        except (json.JSONDecodeError, AttributeError, KeyError, TypeError, ValueError) as error:
            raise RuntimeError(
                f"Synonym store '{self._path}' is corrupted.\n"
                f"Fix: restore a backup or delete the file to reseed.\n"
                f"Original error: {error}"
            ) from error

    def _persist(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"groups": [dict(asdict(g), synonyms=list(g.synonyms)) for g in self._groups]}
        self._path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
