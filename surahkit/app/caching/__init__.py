"""
SurahKit caching package.

Holds the in-memory partition cache. Entries live as long as the cache
object; there is no TTL and no persistence. Invalidate with clear_cache().
"""

from .partition_cache import (
    PartitionCache,
    PartitionSource,
    PendingEntry,
    ResolvedEntry,
    normalize_key,
)

__all__ = [
    "PartitionCache",
    "PartitionSource",
    "PendingEntry",
    "ResolvedEntry",
    "normalize_key",
]
