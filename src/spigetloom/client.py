"""Asynchronous client for the Spiget API.

`SpigetClient` wires the request builder and the dispatcher together around a
single `httpx.AsyncClient`. Every operation goes through `call`, which looks up
the operation in the endpoint table; the resource sub-clients only add named
methods on top of it.
"""

import ssl
from typing import Any, Self

import certifi
import httpx

from .config import SpigetSettings, default_settings
from .dispatcher import Dispatcher
from .endpoints import STATUS, get_endpoint
from .log_config import logger
from .request_builder import RequestBuilder
from .resources import (
    AuthorsClient,
    CategoriesClient,
    ResourcesClient,
    SearchClient,
    WebhooksClient,
)
from .types import BodyEncoding, QueryParams


class SpigetClient:
    """Asynchronous client for interacting with the Spiget API.

    Each instance carries its own configuration and transport; nothing is
    shared between instances. Calls hold no per-call state on the client, so
    several may run concurrently on one instance.

    Typical usage:
    ```python
    async with SpigetClient(user_agent="my-panel/2.1") as client:
        resource = await client.resources.get(1234)
        jar = await client.resources.version_download(1234)
    ```

    Attributes:
        authors (AuthorsClient): Client for author endpoints.
        categories (CategoriesClient): Client for category endpoints.
        resources (ResourcesClient): Client for resource endpoints.
        search (SearchClient): Client for search endpoints.
        webhooks (WebhooksClient): Client for webhook endpoints.
        _settings (SpigetSettings): The resolved settings for this instance.
        _builder (RequestBuilder): Builds request descriptors.
        _dispatcher (Dispatcher): Sends them and normalizes the outcome.
        _http_client (httpx.AsyncClient): The transport.
        _should_close_client (bool): Whether this instance owns the transport.
    """

    def __init__(
        self,
        settings: SpigetSettings | None = None,
        *,
        user_agent: str | None = None,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initializes the SpigetClient.

        Args:
            settings: Optional settings. When omitted, the field defaults are
                used; the environment is not consulted.
            user_agent: User-Agent header value. Overrides `settings.user_agent`.
            base_url: Base URL including the versioned prefix. Overrides
                `settings.base_url`.
            http_client: Optional pre-configured httpx.AsyncClient used as the
                transport. Its timeout and connection policy are left untouched
                and it is not closed by `aclose()`.
        """
        self._settings: SpigetSettings = settings or default_settings()
        self._builder = RequestBuilder(
            base_url=base_url if base_url is not None else self._settings.base_url,
            user_agent=(
                user_agent if user_agent is not None else self._settings.user_agent
            ),
        )

        self._should_close_client = http_client is None  # Close only if we created it
        self._http_client = http_client or self._create_default_http_client()
        self._dispatcher = Dispatcher(self._http_client)

        self._authors = AuthorsClient(api_client=self)
        self._categories = CategoriesClient(api_client=self)
        self._resources = ResourcesClient(api_client=self)
        self._search = SearchClient(api_client=self)
        self._webhooks = WebhooksClient(api_client=self)

        logger.debug(
            f"SpigetClient initialized for {self._builder.base_url} "
            f"(User-Agent: {self._builder.user_agent})"
        )

    def _create_default_http_client(self) -> httpx.AsyncClient:
        """Create a default httpx.AsyncClient with configured settings.

        Returns:
            httpx.AsyncClient: HTTP client with certifi SSL verification and
                the configured timeout.
        """
        ssl_context = ssl.create_default_context(cafile=certifi.where())
        logger.debug("Using certifi SSL context.")
        return httpx.AsyncClient(
            timeout=self._settings.request_timeout,
            verify=ssl_context,
        )

    @property
    def builder(self) -> RequestBuilder:
        """The request builder bound to this client's base URL and User-Agent."""
        return self._builder

    @property
    def authors(self) -> AuthorsClient:
        """Provides access to the AuthorsClient for author APIs."""
        return self._authors

    @property
    def categories(self) -> CategoriesClient:
        """Provides access to the CategoriesClient for category APIs."""
        return self._categories

    @property
    def resources(self) -> ResourcesClient:
        """Provides access to the ResourcesClient for resource APIs."""
        return self._resources

    @property
    def search(self) -> SearchClient:
        """Provides access to the SearchClient for author and resource search."""
        return self._search

    @property
    def webhooks(self) -> WebhooksClient:
        """Provides access to the WebhooksClient for webhook management."""
        return self._webhooks

    async def call(
        self,
        operation_id: str,
        path_params: dict[str, Any] | None = None,
        query_params: QueryParams | None = None,
        form: QueryParams | None = None,
    ) -> Any:
        """Performs one API operation.

        Args:
            operation_id: Id of the operation in the endpoint table, e.g.
                "resources.get".
            path_params: Values for the placeholders of the path template.
            query_params: Ordered query parameters appended to the URL.
            form: Ordered parameters for operations sending a form body.

        Returns:
            The decoded JSON value, or the raw body bytes for download operations.

        Raises:
            ValidationError: If the operation is unknown or a path parameter
                is missing.
            CommunicationError: If the transport fails or the status is not 2xx.
            DecodeError: If a JSON response cannot be decoded.
        """
        endpoint = get_endpoint(operation_id)
        segments = endpoint.resolve_path(path_params)
        if endpoint.body is BodyEncoding.FORM:
            form = form if form is not None else {}
        elif form is not None:
            logger.warning(
                f"Operation '{operation_id}' does not send a body; ignoring form parameters."
            )
            form = None

        descriptor = self._builder.build(
            endpoint.method, segments, query_params=query_params, form=form
        )
        return await self._dispatcher.send(descriptor, endpoint.decode)

    async def status(self, params: QueryParams | None = None) -> dict[str, Any]:
        """Fetches the API status."""
        return await self.call(STATUS, query_params=params)

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._should_close_client and not self._http_client.is_closed:
            await self._http_client.aclose()
            logger.debug(f"SpigetClient internal HTTP client closed. Client ID: {id(self)}.")

    async def __aenter__(self) -> Self:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.aclose()
