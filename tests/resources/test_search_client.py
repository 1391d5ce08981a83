# tests/resources/test_search_client.py
from unittest.mock import AsyncMock

import pytest

from spigetloom.client import SpigetClient
from spigetloom.resources import SearchClient


@pytest.fixture
def search_client(mock_api_client: AsyncMock) -> SearchClient:
    return SearchClient(api_client=mock_api_client)


@pytest.mark.asyncio
async def test_authors(search_client: SearchClient, mock_api_client: AsyncMock):
    await search_client.authors("md 5")
    mock_api_client.call.assert_awaited_once_with(
        "search.authors", {"query": "md 5"}, query_params=None
    )


@pytest.mark.asyncio
async def test_resources(search_client: SearchClient, mock_api_client: AsyncMock):
    await search_client.resources("world edit", {"field": "name"})
    mock_api_client.call.assert_awaited_once_with(
        "search.resources", {"query": "world edit"}, query_params={"field": "name"}
    )


@pytest.mark.asyncio
async def test_query_with_unicode_and_slash_on_the_wire(httpx_mock):
    httpx_mock.add_response(json=[])

    async with SpigetClient() as client:
        await client.search.resources("über/tool", {"size": 3})

    request = httpx_mock.get_request()
    assert request.url.raw_path == b"/v2/search/resources/%C3%BCber%2Ftool?size=3"
