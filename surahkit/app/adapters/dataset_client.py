"""
Dataset client for SurahKit.
"""

import json
from typing import Any, List

import httpx
from opentelemetry import trace
from pydantic import ValidationError

from shared.config import DEFAULT_BASE_URL
from shared.errors import RetrievalError
from shared.logging import get_logger
from ..models import Record


tracer = trace.get_tracer(__name__)


class DatasetClient:
    """Client for retrieving language partitions from the dataset CDN."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, *, extension: str = ".json", timeout: float = 10.0):
        self.base_url = base_url.rstrip('/')
        self.extension = extension
        self.timeout = timeout
        self.logger = get_logger("surahkit.dataset_client")

    def build_url(self, key: str) -> str:
        """Address of the data file for a normalized partition key."""
        return f"{self.base_url}/{key}{self.extension}"

    async def fetch_partition(self, key: str) -> List[Record]:
        """Fetch and parse one partition. Raises RetrievalError on any failure."""
        url = self.build_url(key)

        with tracer.start_as_current_span("surahkit.fetch_partition") as span:
            span.set_attribute("surahkit.partition_key", key)
            span.set_attribute("http.url", url)

            try:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(url)
            except httpx.HTTPError as exc:
                self.logger.debug("Dataset request failed", url=url, error=str(exc))
                raise RetrievalError(
                    key,
                    message=f"Language file '{key}{self.extension}' could not be fetched.",
                    detail=str(exc),
                ) from exc

            span.set_attribute("http.status_code", response.status_code)

            if response.status_code != 200:
                self.logger.debug(
                    "Dataset request returned non-success status",
                    url=url,
                    status_code=response.status_code,
                )
                raise RetrievalError(
                    key,
                    message=f"Language file '{key}{self.extension}' not found (Status: {response.status_code}).",
                    status_code=response.status_code,
                )

            records = self._parse(key, response)
            self.logger.debug("Dataset retrieved", url=url, records=len(records))
            return records

    def _parse(self, key: str, response: httpx.Response) -> List[Record]:
        """Parse a JSON array body into records."""
        try:
            payload: Any = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise RetrievalError(
                key,
                message=f"Language file '{key}{self.extension}' is not valid JSON.",
                status_code=response.status_code,
                detail=str(exc),
            ) from exc

        if not isinstance(payload, list):
            raise RetrievalError(
                key,
                message=f"Language file '{key}{self.extension}' is not a list of records.",
                status_code=response.status_code,
                detail=f"expected a JSON array, got {type(payload).__name__}",
            )

        try:
            return [Record.model_validate(item) for item in payload]
        except ValidationError as exc:
            raise RetrievalError(
                key,
                message=f"Language file '{key}{self.extension}' contains malformed records.",
                status_code=response.status_code,
                detail=str(exc),
            ) from exc
