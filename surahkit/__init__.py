"""
SurahKit: cached retrieval and search of surah datasets by language.
"""

from shared.errors import InvalidInputError, NotFoundError, RetrievalError
from .app.adapters.dataset_client import DatasetClient
from .app.caching.partition_cache import PartitionCache
from .app.compat import LegacySurahKit
from .app.main import create_surahkit, get_default_surahkit, reset_default_surahkit
from .app.models import Partition, Record
from .app.query.service import DatasetQueryService, SurahKit

__all__ = [
    "DatasetClient",
    "DatasetQueryService",
    "InvalidInputError",
    "LegacySurahKit",
    "NotFoundError",
    "Partition",
    "PartitionCache",
    "Record",
    "RetrievalError",
    "SurahKit",
    "create_surahkit",
    "get_default_surahkit",
    "reset_default_surahkit",
]
