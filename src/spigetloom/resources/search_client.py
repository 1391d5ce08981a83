# spigetloom/resources/search_client.py
"""Client for the Spiget search endpoints."""

from typing import Any

from ..endpoints import SEARCH_AUTHORS, SEARCH_RESOURCES
from ..types import QueryParams
from .base_client import BaseResourceClient


class SearchClient(BaseResourceClient):
    """Client for free-text author and resource search.

    The query is sent as a path segment and is percent-encoded as a whole, so
    it may contain spaces, slashes or any other character.
    """

    async def authors(self, query: str, params: QueryParams | None = None) -> Any:
        """Searches authors by name."""
        return await self._api_client.call(
            SEARCH_AUTHORS, {"query": query}, query_params=params
        )

    async def resources(self, query: str, params: QueryParams | None = None) -> Any:
        """Searches resources. Use the ``field`` parameter to pick the searched field."""
        return await self._api_client.call(
            SEARCH_RESOURCES, {"query": query}, query_params=params
        )
