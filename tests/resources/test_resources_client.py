# tests/resources/test_resources_client.py
from unittest.mock import AsyncMock

import pytest

from spigetloom.client import SpigetClient
from spigetloom.resources import ResourcesClient


@pytest.fixture
def resources_client(mock_api_client: AsyncMock) -> ResourcesClient:
    return ResourcesClient(api_client=mock_api_client)


@pytest.mark.asyncio
async def test_list_and_new(
    resources_client: ResourcesClient, mock_api_client: AsyncMock
):
    await resources_client.list({"size": 5})
    await resources_client.new()

    assert [c.args[0] for c in mock_api_client.call.await_args_list] == [
        "resources.list",
        "resources.new",
    ]


@pytest.mark.asyncio
async def test_for_versions(
    resources_client: ResourcesClient, mock_api_client: AsyncMock
):
    await resources_client.for_versions("1.19,1.20", {"method": "any"})
    mock_api_client.call.assert_awaited_once_with(
        "resources.for_versions", {"versions": "1.19,1.20"}, query_params={"method": "any"}
    )


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("method_name", "operation_id"),
    [
        ("get", "resources.get"),
        ("author", "resources.author"),
        ("download", "resources.download"),
        ("reviews", "resources.reviews"),
        ("updates", "resources.updates"),
        ("versions", "resources.versions"),
    ],
)
async def test_per_resource_operations(
    resources_client: ResourcesClient,
    mock_api_client: AsyncMock,
    method_name: str,
    operation_id: str,
):
    await getattr(resources_client, method_name)(1234)
    mock_api_client.call.assert_awaited_once_with(
        operation_id, {"resource": 1234}, query_params=None
    )


@pytest.mark.asyncio
async def test_version_download_defaults_to_latest(
    resources_client: ResourcesClient, mock_api_client: AsyncMock
):
    await resources_client.version_download(1234)
    mock_api_client.call.assert_awaited_once_with(
        "resources.version_download",
        {"resource": 1234, "version": "latest"},
        query_params=None,
    )


@pytest.mark.asyncio
async def test_download_returns_body_unparsed(httpx_mock):
    httpx_mock.add_response(
        url="https://api.spiget.org/v2/resources/1234/download",
        content=b'{"looks":"like json"}',
    )

    async with SpigetClient() as client:
        body = await client.resources.download(1234)

    assert body == b'{"looks":"like json"}'


@pytest.mark.asyncio
async def test_version_download_on_the_wire(httpx_mock):
    httpx_mock.add_response(
        url="https://api.spiget.org/v2/resources/1234/versions/98765/download",
        content=b"jar-bytes",
    )

    async with SpigetClient() as client:
        body = await client.resources.version_download(1234, 98765)

    assert body == b"jar-bytes"
