"""
Test doubles for SurahKit tests.
"""

import asyncio
from typing import Dict, List, Optional, Sequence

from shared.errors import RetrievalError
from surahkit.app.models import Record


SAMPLE_ROWS = [
    {"id": "1", "surah": "The Opener", "verses": "7", "text": "In the name of God, the Gracious, the Merciful."},
    {"id": "36", "surah": "Ya-Sin", "verses": "83", "text": "Ya, Seen. By the Wise Quran."},
    {"id": "3b", "surah": "Family of Imran", "verses": 200, "text": "God, there is no god except He."},
    {"id": "114", "surah": "Mankind", "verses": "6", "text": "Say, I seek refuge in the Lord of mankind."},
]


class FakeSource:
    """In-memory partition source that records every fetch.

    With gated=True each fetch blocks until ``gate`` is set, which keeps
    retrievals in flight while a test issues more calls.
    """

    def __init__(
        self,
        partitions: Optional[Dict[str, Sequence[Record]]] = None,
        *,
        failures: Optional[List[Exception]] = None,
        gated: bool = False,
    ):
        self.partitions = partitions or {}
        self.failures = list(failures or [])
        self.gate = asyncio.Event() if gated else None
        self.calls: List[str] = []

    async def fetch_partition(self, key: str) -> List[Record]:
        self.calls.append(key)
        if self.gate is not None:
            await self.gate.wait()
        if self.failures:
            raise self.failures.pop(0)
        if key not in self.partitions:
            raise RetrievalError(key, message=f"Language file '{key}.json' not found (Status: 404).", status_code=404)
        return list(self.partitions[key])


class ExplodingSource:
    """Source that must never be contacted."""

    def __init__(self):
        self.calls: List[str] = []

    async def fetch_partition(self, key: str) -> List[Record]:
        self.calls.append(key)
        raise AssertionError(f"unexpected retrieval of '{key}'")


async def settle(rounds: int = 5) -> None:
    """Let scheduled tasks run up to their next suspension point."""
    for _ in range(rounds):
        await asyncio.sleep(0)


