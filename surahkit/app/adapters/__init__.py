"""
Adapters package for SurahKit.

Contains the HTTP client for the dataset CDN. The adapter encapsulates:

- Base URL and file naming of language partitions
- Mapping of transport, status and parse failures to RetrievalError

No retries here: a failed partition is evicted by the cache and the next
caller retries.
"""

from .dataset_client import DatasetClient

__all__ = [
    "DatasetClient",
]
