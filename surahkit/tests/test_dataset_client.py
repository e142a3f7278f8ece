"""
Unit tests for the dataset client.
"""

import json
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from shared.errors import RetrievalError
from surahkit.app.adapters.dataset_client import DatasetClient

from .helpers import SAMPLE_ROWS


BASE_URL = "https://cdn.example.test/surahkit/data"


def _response(status_code: int, content, url: str = f"{BASE_URL}/english.json") -> httpx.Response:
    if not isinstance(content, (bytes, str)):
        content = json.dumps(content)
    return httpx.Response(
        status_code=status_code,
        content=content,
        request=httpx.Request("GET", url)
    )


class TestDatasetClient:
    """Test cases for DatasetClient."""

    @pytest.fixture
    def client(self):
        """Create DatasetClient instance."""
        return DatasetClient(BASE_URL + "/")

    def test_build_url(self, client):
        assert client.build_url("english") == f"{BASE_URL}/english.json"

    def test_build_url_custom_extension(self):
        client = DatasetClient(BASE_URL, extension=".min.json")

        assert client.build_url("arabic") == f"{BASE_URL}/arabic.min.json"

    @pytest.mark.asyncio
    async def test_fetch_partition_success(self, client):
        with patch('httpx.AsyncClient') as mock_client:
            mock_get = AsyncMock(return_value=_response(200, SAMPLE_ROWS))
            mock_client.return_value.__aenter__.return_value.get = mock_get

            records = await client.fetch_partition("english")

            mock_get.assert_called_once_with(f"{BASE_URL}/english.json")
            assert [record.id for record in records] == ["1", "36", "3b", "114"]
            assert records[1].title == "Ya-Sin"
            assert records[2].verse_count == 200
            assert records[3].body.startswith("Say, I seek refuge")

    @pytest.mark.asyncio
    async def test_fetch_partition_coerces_numeric_ids(self, client):
        rows = [{"id": 1, "surah": "The Opener", "verses": 7, "text": "..."}]

        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=_response(200, rows)
            )

            records = await client.fetch_partition("english")

            assert records[0].id == "1"

    @pytest.mark.asyncio
    async def test_fetch_partition_not_found(self, client):
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=_response(404, "Not Found", f"{BASE_URL}/klingon.json")
            )

            with pytest.raises(RetrievalError) as exc_info:
                await client.fetch_partition("klingon")

            assert exc_info.value.key == "klingon"
            assert exc_info.value.status_code == 404
            assert exc_info.value.message == "Language file 'klingon.json' not found (Status: 404)."

    @pytest.mark.asyncio
    async def test_fetch_partition_transport_error(self, client):
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                side_effect=httpx.ConnectError("connection refused")
            )

            with pytest.raises(RetrievalError) as exc_info:
                await client.fetch_partition("english")

            assert exc_info.value.status_code is None
            assert "connection refused" in exc_info.value.detail
            assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_fetch_partition_invalid_json(self, client):
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=_response(200, b"<html>oops</html>")
            )

            with pytest.raises(RetrievalError) as exc_info:
                await client.fetch_partition("english")

            assert exc_info.value.status_code == 200
            assert "not valid JSON" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_fetch_partition_rejects_non_list_body(self, client):
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=_response(200, {"surahs": SAMPLE_ROWS})
            )

            with pytest.raises(RetrievalError) as exc_info:
                await client.fetch_partition("english")

            assert exc_info.value.detail == "expected a JSON array, got dict"

    @pytest.mark.asyncio
    async def test_fetch_partition_rejects_malformed_records(self, client):
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=_response(200, [{"id": "1"}])
            )

            with pytest.raises(RetrievalError) as exc_info:
                await client.fetch_partition("english")

            assert "malformed records" in exc_info.value.message
            assert exc_info.value.details["key"] == "english"
