# tests/conftest.py

import pytest

from witsearch.domain.models import ItemRecord
from witsearch.application.synonym_expander import SynonymExpander
from witsearch.infrastructure.synonym_seeds import seed_groups
from witsearch.infrastructure.synonym_store import InMemorySynonymStore


def make_item(item_id: str, name: str, **fields) -> ItemRecord:
    return ItemRecord(item_id=item_id, name=name, **fields)


@pytest.fixture
def seeded_store() -> InMemorySynonymStore:
    return InMemorySynonymStore(seed_groups())


@pytest.fixture
def expander(seeded_store) -> SynonymExpander:
    return SynonymExpander(seeded_store)


@pytest.fixture
def toolbox() -> list:
    """The three-item catalog used by the end-to-end scenarios."""
    return [
        make_item("w1", "Crescent Wrench 10in", location_id="garage"),
        make_item("h1", "Claw Hammer", location_id="garage"),
        make_item("s1", "Phillips Head Screwdriver", location_id="shed"),
    ]
