"""
Partition cache with single-flight retrieval.

A key maps to either a PendingEntry (one shared retrieval task that every
concurrent caller awaits) or a ResolvedEntry (the parsed partition). The
pending entry is registered before the first await, so callers issued
back-to-back always find it. A failed retrieval removes its entry so the
next call starts over.

clear_cache() advances a generation counter. A retrieval from an older
generation still answers the callers already waiting on it, but never
writes to (or deletes from) the cache.
"""

import asyncio
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Sequence, TYPE_CHECKING, Union

from shared.errors import InvalidInputError, RetrievalError
from shared.logging import get_logger
from ..models import Partition, Record

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector


class PartitionSource(Protocol):
    """Anything that can fetch one partition by normalized key."""

    async def fetch_partition(self, key: str) -> Sequence[Record]:
        ...


@dataclass
class PendingEntry:
    """An in-flight retrieval shared by all callers of one key."""
    task: "asyncio.Task[Partition]"
    generation: int


@dataclass(frozen=True)
class ResolvedEntry:
    """A successfully retrieved partition."""
    partition: Partition


CacheEntry = Union[PendingEntry, ResolvedEntry]


def normalize_key(key: Any) -> str:
    """Trim and lowercase a partition key. Raises InvalidInputError if empty."""
    if key is None or key == "":
        raise InvalidInputError("Language is required.")

    normalized = str(key).strip().lower()
    if not normalized:
        raise InvalidInputError("Language is required.", {"language": key})
    return normalized


class PartitionCache:
    """In-memory, per-instance cache of language partitions."""

    def __init__(self, source: PartitionSource, *, metrics: Optional["MetricsCollector"] = None):
        self.source = source
        self.metrics = metrics
        self.logger = get_logger("surahkit.partition_cache")
        self._entries: Dict[str, CacheEntry] = {}
        self._generation = 0

    async def get_partition(self, key: Any) -> Partition:
        """Return the partition for key, retrieving it at most once at a time."""
        normalized = normalize_key(key)

        entry = self._entries.get(normalized)
        if isinstance(entry, ResolvedEntry):
            self._count_request("hit")
            return entry.partition

        if isinstance(entry, PendingEntry):
            self._count_request("joined")
            task = entry.task
        else:
            self._count_request("miss")
            task = self._start_retrieval(normalized)

        # Shielded so a cancelled caller does not cancel the shared retrieval.
        return await asyncio.shield(task)

    def _start_retrieval(self, key: str) -> "asyncio.Task[Partition]":
        """Register a pending entry for key and start its retrieval task."""
        generation = self._generation
        task = asyncio.ensure_future(self._retrieve(key, generation))
        task.add_done_callback(_consume_outcome)
        self._entries[key] = PendingEntry(task=task, generation=generation)
        self.logger.debug("Partition retrieval started", key=key, generation=generation)
        return task

    async def _retrieve(self, key: str, generation: int) -> Partition:
        start = time.perf_counter()
        try:
            records = await self.source.fetch_partition(key)
            partition: Partition = tuple(records)
        except asyncio.CancelledError:
            self._evict(key, generation)
            self._record_retrieval("failure", start)
            raise
        except RetrievalError:
            self._evict(key, generation)
            self._record_retrieval("failure", start)
            self.logger.debug("Partition retrieval failed", key=key, generation=generation)
            raise
        except Exception as exc:
            self._evict(key, generation)
            self._record_retrieval("failure", start)
            self.logger.debug("Partition retrieval failed", key=key, generation=generation, error=str(exc))
            raise RetrievalError(key, detail=str(exc)) from exc

        if self._owns(key, generation):
            self._entries[key] = ResolvedEntry(partition=partition)
            self._record_retrieval("success", start)
            self.logger.debug(
                "Partition retrieval completed",
                key=key,
                generation=generation,
                records=len(partition),
            )
        else:
            self._record_retrieval("discarded", start)
            self.logger.debug("Partition retrieval discarded after cache clear", key=key, generation=generation)
        return partition

    def _owns(self, key: str, generation: int) -> bool:
        """True if the pending entry for key still belongs to generation."""
        entry = self._entries.get(key)
        return isinstance(entry, PendingEntry) and entry.generation == generation

    def _evict(self, key: str, generation: int) -> None:
        if self._owns(key, generation):
            del self._entries[key]

    def clear_cache(self) -> None:
        """Drop every entry, pending or resolved."""
        cleared = len(self._entries)
        self._entries.clear()
        self._generation += 1
        self.logger.debug("Partition cache cleared", entries=cleared, generation=self._generation)

    def has_entry(self, key: Any) -> bool:
        return normalize_key(key) in self._entries

    def is_pending(self, key: Any) -> bool:
        return isinstance(self._entries.get(normalize_key(key)), PendingEntry)

    def is_resolved(self, key: Any) -> bool:
        return isinstance(self._entries.get(normalize_key(key)), ResolvedEntry)

    def keys(self) -> List[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def _count_request(self, outcome: str) -> None:
        if not self.metrics:
            return
        try:
            self.metrics.increment_counter("partition_requests_total", outcome=outcome)
        except Exception as exc:  # pragma: no cover - metrics failures should never break lookups
            self.logger.debug("Failed to record request metrics", error=str(exc))

    def _record_retrieval(self, result: str, start: float) -> None:
        if not self.metrics:
            return
        try:
            self.metrics.increment_counter("partition_retrievals_total", result=result)
            self.metrics.observe_histogram(
                "partition_retrieval_duration_seconds",
                time.perf_counter() - start,
                result=result,
            )
        except Exception as exc:  # pragma: no cover - metrics failures should never break retrievals
            self.logger.debug("Failed to record retrieval metrics", error=str(exc))


def _consume_outcome(task: "asyncio.Task[Partition]") -> None:
    # Marks the exception as retrieved when every waiting caller was cancelled.
    if not task.cancelled():
        task.exception()
