"""Query layer for SurahKit."""

from .service import DatasetQueryService, SurahKit

__all__ = [
    "DatasetQueryService",
    "SurahKit",
]
