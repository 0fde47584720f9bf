# witsearch/domain/interfaces.py

from abc import ABC, abstractmethod
from typing import List, Optional

from .models import ItemRecord, SearchFilters, SynonymGroup


class SynonymStorePort(ABC):
    """
    Read side of the persisted synonym groups.
    Only active groups are ever returned.
    """

    @abstractmethod
    def find_groups_containing(self, term: str) -> List[SynonymGroup]:
        """
        Return every active group whose canonical name equals `term`
        or whose synonyms contain it. A term may match several groups.
        """
        ...

    @abstractmethod
    def all_groups(
        self,
        category: Optional[str] = None,
        is_system: Optional[bool] = None,
    ) -> List[SynonymGroup]:
        """
        Return active groups sorted by category, then canonical name.
        """
        ...


class PrimaryIndexPort(ABC):

    @abstractmethod
    def ranked_search(self, expanded_query: str, filters: SearchFilters) -> List[ItemRecord]:
        """
        Ranked multi-term lookup, most relevant first.
        May raise when the index is unavailable.
        """
        ...


class ItemRepositoryPort(ABC):

    @abstractmethod
    def find_all_matching_filters(self, filters: SearchFilters) -> List[ItemRecord]: ...
