"""
Shared fixtures for SurahKit tests.
"""

from typing import List

import pytest

from surahkit.app.models import Record

from .helpers import SAMPLE_ROWS, FakeSource


@pytest.fixture
def sample_records() -> List[Record]:
    """Parsed sample partition."""
    return [Record.model_validate(row) for row in SAMPLE_ROWS]


@pytest.fixture
def fake_source(sample_records):
    """Ungated source serving an 'english' partition."""
    return FakeSource({"english": sample_records})
