"""
Old method names, kept as thin synonyms over SurahKit.
"""

from typing import Any, List

from .models import Partition, Record
from .query.service import SurahKit


class LegacySurahKit:
    """Adapter exposing load / get_by_id / search."""

    def __init__(self, kit: SurahKit):
        self.kit = kit

    async def load(self, language: str) -> Partition:
        return await self.kit.load_all(language)

    async def get_by_id(self, language: str, record_id: Any) -> Record:
        return await self.kit.search_by_id(language, record_id)

    async def search(self, language: str, phrase: str) -> List[Record]:
        return await self.kit.search_by_phrase(language, phrase)

    def clear_cache(self) -> None:
        self.kit.clear_cache()
