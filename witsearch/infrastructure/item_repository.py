# witsearch/infrastructure/item_repository.py

from datetime import date, timedelta
from typing import Callable, Iterable, List

from witsearch.config import EXPIRING_WINDOW_DAYS
from witsearch.domain.interfaces import ItemRepositoryPort
from witsearch.domain.models import ItemRecord, SearchFilters


def matches_expiration(record: ItemRecord, status: str, today: date, window_days: int) -> bool:
    """
    expired    → perishable, expiration date before today
    expiring   → perishable, expires between today and today + window (inclusive)
    fresh      → perishable, no date or expires after the window
    perishable → any perishable item
    """
    if not record.is_perishable:
        return False
    if status == "perishable":
        return True

    expires = record.expiration_date
    horizon = today + timedelta(days=window_days)
    if status == "expired":
        return expires is not None and expires < today
    if status == "expiring":
        return expires is not None and today <= expires <= horizon
    if status == "fresh":
        return expires is None or expires > horizon
    raise ValueError(f"Unknown expiration status '{status}'.")


def matches_filters(
    record: ItemRecord,
    filters: SearchFilters,
    today: date,
    window_days: int = EXPIRING_WINDOW_DAYS,
) -> bool:
    if not record.is_active:
        return False
    if filters.location_scope is not None and record.location_id not in filters.location_scope:
        return False
    if filters.category_id is not None and record.category_id != filters.category_id:
        return False
    if filters.storage_type is not None and record.storage_type != filters.storage_type:
        return False
    if filters.expiration_status is not None:
        return matches_expiration(record, filters.expiration_status, today, window_days)
    return True


class InMemoryItemRepository(ItemRepositoryPort):
    """
    Catalog snapshot held in memory.

    replace_all() swaps in a new list instead of editing the current one,
    so a search that already fetched its candidates keeps a stable view.
    """

    def __init__(
        self,
        records: Iterable[ItemRecord] = (),
        expiring_window_days: int = EXPIRING_WINDOW_DAYS,
        today: Callable[[], date] = date.today,
    ):
        self._records: List[ItemRecord] = list(records)
        self._window_days = expiring_window_days
        self._today = today

    @property
    def records(self) -> List[ItemRecord]:
        return list(self._records)

    def replace_all(self, records: Iterable[ItemRecord]) -> None:
        self._records = list(records)

    def find_all_matching_filters(self, filters: SearchFilters) -> List[ItemRecord]:
        today = self._today()
        return [
            record for record in self._records
            if matches_filters(record, filters, today, self._window_days)
        ]

    def __len__(self) -> int:
        return len(self._records)
