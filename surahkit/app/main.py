"""
Wiring for SurahKit: config -> client -> cache -> query service.
"""

from typing import Optional

from shared.config import SurahKitConfig, get_config
from shared.logging import get_logger
from shared.metrics import MetricsCollector
from .adapters.dataset_client import DatasetClient
from .caching.partition_cache import PartitionCache
from .query.service import SurahKit


logger = get_logger("surahkit.main")

_default_kit: Optional[SurahKit] = None


def create_surahkit(
    config: Optional[SurahKitConfig] = None,
    *,
    metrics: Optional[MetricsCollector] = None,
) -> SurahKit:
    """Build an isolated SurahKit with its own partition cache."""
    config = config or get_config()

    client = DatasetClient(
        config.base_url,
        extension=config.file_extension,
        timeout=config.request_timeout,
    )
    cache = PartitionCache(client, metrics=metrics)

    logger.debug("SurahKit created", base_url=client.base_url, env=config.env)
    return SurahKit(cache)


def get_default_surahkit() -> SurahKit:
    """Process-wide instance, created on first use."""
    global _default_kit
    if _default_kit is None:
        _default_kit = create_surahkit()
    return _default_kit


def reset_default_surahkit() -> None:
    """Drop the process-wide instance and its cache."""
    global _default_kit
    if _default_kit is not None:
        _default_kit.clear_cache()
    _default_kit = None
