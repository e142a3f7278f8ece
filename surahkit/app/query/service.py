"""
Query service over cached language partitions.
"""

from typing import Any, Iterable, List, Optional

from shared.errors import InvalidInputError, NotFoundError
from ..caching.partition_cache import PartitionCache
from ..models import Partition, Record


def _normalize_id(record_id: Any) -> str:
    return str(record_id).strip()


class SurahKit:
    """Read-only lookups and searches over one partition cache."""

    def __init__(self, cache: PartitionCache):
        self.cache = cache

    async def load_all(self, language: str) -> Partition:
        """Load the full dataset for a language."""
        return await self.cache.get_partition(language)

    async def search_by_id(self, language: str, record_id: Any) -> Record:
        """Find one record by exact id. Raises NotFoundError on no match."""
        if record_id is None:
            raise InvalidInputError("Surah ID is required.")
        target = _normalize_id(record_id)
        if not target:
            raise InvalidInputError("Surah ID is required.", {"id": record_id})

        records = await self.load_all(language)
        for record in records:
            if record.id == target:
                return record

        raise NotFoundError(language, record_id)

    async def search_by_ids(self, language: str, record_ids: Optional[Iterable[Any]]) -> List[Record]:
        """Find all records whose id is in record_ids, in dataset order."""
        if not record_ids:
            return []

        targets = {_normalize_id(record_id) for record_id in record_ids}
        records = await self.load_all(language)
        return [record for record in records if record.id in targets]

    async def search_by_name(self, language: str, keyword: Optional[str]) -> List[Record]:
        """Case-insensitive substring search on the surah name."""
        if not keyword:
            return []

        term = keyword.lower()
        records = await self.load_all(language)
        return [record for record in records if term in record.title.lower()]

    async def search_by_phrase(self, language: str, phrase: Optional[str]) -> List[Record]:
        """Case-insensitive substring search on the surah text."""
        if not phrase:
            return []

        term = phrase.lower()
        records = await self.load_all(language)
        return [record for record in records if term in record.body.lower()]

    def clear_cache(self) -> None:
        """Clear all loaded datasets."""
        self.cache.clear_cache()


DatasetQueryService = SurahKit
