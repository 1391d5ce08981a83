# tests/resources/test_authors_client.py
from unittest.mock import AsyncMock

import pytest

from spigetloom.resources import AuthorsClient


@pytest.fixture
def authors_client(mock_api_client: AsyncMock) -> AuthorsClient:
    return AuthorsClient(api_client=mock_api_client)


@pytest.mark.asyncio
async def test_list(authors_client: AuthorsClient, mock_api_client: AsyncMock):
    mock_api_client.call.return_value = [{"id": 1, "name": "md_5"}]

    result = await authors_client.list({"size": 1})

    assert result == [{"id": 1, "name": "md_5"}]
    mock_api_client.call.assert_awaited_once_with("authors.list", query_params={"size": 1})


@pytest.mark.asyncio
async def test_get(authors_client: AuthorsClient, mock_api_client: AsyncMock):
    await authors_client.get("md_5")
    mock_api_client.call.assert_awaited_once_with("authors.get", {"author": "md_5"})


@pytest.mark.asyncio
async def test_resources(authors_client: AuthorsClient, mock_api_client: AsyncMock):
    await authors_client.resources(1, {"page": 2})
    mock_api_client.call.assert_awaited_once_with(
        "authors.resources", {"author": 1}, query_params={"page": 2}
    )


@pytest.mark.asyncio
async def test_reviews(authors_client: AuthorsClient, mock_api_client: AsyncMock):
    await authors_client.reviews(1)
    mock_api_client.call.assert_awaited_once_with(
        "authors.reviews", {"author": 1}, query_params=None
    )
