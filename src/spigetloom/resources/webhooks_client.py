# spigetloom/resources/webhooks_client.py
"""Client for the Spiget webhook management endpoints."""

from typing import Any

from ..endpoints import (
    WEBHOOKS_DELETE,
    WEBHOOKS_EVENTS,
    WEBHOOKS_REGISTER,
    WEBHOOKS_STATUS,
)
from ..types import QueryParams
from .base_client import BaseResourceClient


class WebhooksClient(BaseResourceClient):
    """Client for registering, inspecting and deleting webhooks."""

    async def events(self, params: QueryParams | None = None) -> Any:
        """Lists the event types a webhook can subscribe to."""
        return await self._api_client.call(WEBHOOKS_EVENTS, query_params=params)

    async def status(
        self, webhook_id: str, params: QueryParams | None = None
    ) -> dict[str, Any]:
        """Fetches the delivery status of a registered webhook."""
        return await self._api_client.call(
            WEBHOOKS_STATUS, {"id": webhook_id}, query_params=params
        )

    async def register(self, params: QueryParams | None = None) -> dict[str, Any]:
        """Registers a webhook.

        The parameters are sent as an application/x-www-form-urlencoded body,
        e.g. ``{"url": "https://example.com/hook", "events": "resource-update"}``.
        The response carries the webhook id and the secret needed to delete it.
        """
        return await self._api_client.call(WEBHOOKS_REGISTER, form=params or {})

    async def delete(
        self, webhook_id: str, secret: str, params: QueryParams | None = None
    ) -> dict[str, Any]:
        """Deletes a webhook using the secret returned on registration."""
        return await self._api_client.call(
            WEBHOOKS_DELETE, {"id": webhook_id, "secret": secret}, query_params=params
        )
