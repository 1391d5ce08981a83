# spigetloom/resources/resources_client.py
"""Client for the Spiget resource endpoints.

Besides the JSON endpoints, this client exposes the two download operations.
Those return the response body as raw bytes, whatever its content type.
"""

from typing import Any

from ..constants import LATEST_VERSION
from ..endpoints import (
    RESOURCES_AUTHOR,
    RESOURCES_DOWNLOAD,
    RESOURCES_FOR_VERSIONS,
    RESOURCES_GET,
    RESOURCES_LIST,
    RESOURCES_NEW,
    RESOURCES_REVIEWS,
    RESOURCES_UPDATES,
    RESOURCES_VERSION_DOWNLOAD,
    RESOURCES_VERSIONS,
)
from ..types import QueryParams
from .base_client import BaseResourceClient


class ResourcesClient(BaseResourceClient):
    """Client for resource listings, details, reviews, updates, versions and downloads."""

    async def list(self, params: QueryParams | None = None) -> Any:
        """Lists resources."""
        return await self._api_client.call(RESOURCES_LIST, query_params=params)

    async def new(self, params: QueryParams | None = None) -> Any:
        """Lists the most recently published resources."""
        return await self._api_client.call(RESOURCES_NEW, query_params=params)

    async def for_versions(self, versions: str, params: QueryParams | None = None) -> Any:
        """Lists resources compatible with the given game versions.

        Args:
            versions: Comma-separated version list, e.g. "1.19,1.20". It is
                sent as one encoded path segment.
            params: Optional query parameters such as ``method`` ("any"/"all").
        """
        return await self._api_client.call(
            RESOURCES_FOR_VERSIONS, {"versions": versions}, query_params=params
        )

    async def get(
        self, resource: str | int, params: QueryParams | None = None
    ) -> dict[str, Any]:
        """Fetches the details of a resource."""
        return await self._api_client.call(
            RESOURCES_GET, {"resource": resource}, query_params=params
        )

    async def author(
        self, resource: str | int, params: QueryParams | None = None
    ) -> dict[str, Any]:
        """Fetches the author of a resource."""
        return await self._api_client.call(
            RESOURCES_AUTHOR, {"resource": resource}, query_params=params
        )

    async def download(
        self, resource: str | int, params: QueryParams | None = None
    ) -> bytes:
        """Downloads the current file of a resource as raw bytes."""
        return await self._api_client.call(
            RESOURCES_DOWNLOAD, {"resource": resource}, query_params=params
        )

    async def reviews(self, resource: str | int, params: QueryParams | None = None) -> Any:
        return await self._api_client.call(
            RESOURCES_REVIEWS, {"resource": resource}, query_params=params
        )

    async def updates(self, resource: str | int, params: QueryParams | None = None) -> Any:
        return await self._api_client.call(
            RESOURCES_UPDATES, {"resource": resource}, query_params=params
        )

    async def versions(
        self, resource: str | int, params: QueryParams | None = None
    ) -> Any:
        return await self._api_client.call(
            RESOURCES_VERSIONS, {"resource": resource}, query_params=params
        )

    async def version_download(
        self,
        resource: str | int,
        version: str | int | None = LATEST_VERSION,
        params: QueryParams | None = None,
    ) -> bytes:
        """Downloads a specific version of a resource as raw bytes.

        Args:
            resource: The resource id.
            version: The version id. Defaults to the newest version, also when None.
            params: Optional query parameters.
        """
        return await self._api_client.call(
            RESOURCES_VERSION_DOWNLOAD,
            {"resource": resource, "version": version},
            query_params=params,
        )
