# spigetloom/resources/authors_client.py
"""Client for the Spiget author endpoints."""

from typing import Any

from ..endpoints import AUTHORS_GET, AUTHORS_LIST, AUTHORS_RESOURCES, AUTHORS_REVIEWS
from ..types import QueryParams
from .base_client import BaseResourceClient


class AuthorsClient(BaseResourceClient):
    """Client for listing authors and fetching their details, resources and reviews."""

    async def list(self, params: QueryParams | None = None) -> Any:
        """Lists authors. Accepts paging parameters such as ``size`` and ``page``."""
        return await self._api_client.call(AUTHORS_LIST, query_params=params)

    async def get(self, author: str | int) -> dict[str, Any]:
        """Fetches the details of an author by id or name."""
        return await self._api_client.call(AUTHORS_GET, {"author": author})

    async def resources(
        self, author: str | int, params: QueryParams | None = None
    ) -> Any:
        """Lists the resources published by an author."""
        return await self._api_client.call(
            AUTHORS_RESOURCES, {"author": author}, query_params=params
        )

    async def reviews(self, author: str | int, params: QueryParams | None = None) -> Any:
        """Lists the reviews written by an author."""
        return await self._api_client.call(
            AUTHORS_REVIEWS, {"author": author}, query_params=params
        )
