# tests/resources/conftest.py
from unittest.mock import AsyncMock

import pytest

from spigetloom.client import SpigetClient


@pytest.fixture
def mock_api_client() -> AsyncMock:
    """Fixture to create a mock SpigetClient whose call() returns an empty mapping."""
    mock_client = AsyncMock(spec=SpigetClient)
    mock_client.call.return_value = {}
    return mock_client
