# spigetloom/resources/categories_client.py
"""Client for the Spiget category endpoints."""

from typing import Any

from ..endpoints import CATEGORIES_GET, CATEGORIES_LIST, CATEGORIES_RESOURCES
from ..types import QueryParams
from .base_client import BaseResourceClient


class CategoriesClient(BaseResourceClient):
    """Client for listing categories and the resources filed under them."""

    async def list(self, params: QueryParams | None = None) -> Any:
        return await self._api_client.call(CATEGORIES_LIST, query_params=params)

    async def get(self, category: str | int) -> dict[str, Any]:
        return await self._api_client.call(CATEGORIES_GET, {"category": category})

    async def resources(
        self, category: str | int, params: QueryParams | None = None
    ) -> Any:
        return await self._api_client.call(
            CATEGORIES_RESOURCES, {"category": category}, query_params=params
        )
