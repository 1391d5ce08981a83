"""Sends request descriptors and normalizes their outcome.

The dispatcher performs exactly one HTTP exchange per call through the injected
`httpx.AsyncClient`. Transport failures and non-2xx responses are both raised
as `CommunicationError`; malformed JSON on a successful response is raised as
`DecodeError`. No retries and no caching happen here.
"""

import json
from http import HTTPStatus
from typing import Any

import httpx

from .exceptions import CommunicationError, DecodeError
from .log_config import logger
from .types import DecodeMode, RequestDescriptor

# Everything httpx raises while sending a request or reading its body
TRANSPORT_ERRORS: tuple[type[Exception], ...] = (
    httpx.HTTPError,
    httpx.InvalidURL,
    httpx.StreamError,
)


class Dispatcher:
    """Dispatches requests through an HTTP transport.

    Attributes:
        _http_client: The transport used for every exchange. The dispatcher
            never closes it.
    """

    def __init__(self, http_client: httpx.AsyncClient):
        self._http_client = http_client

    async def send(
        self, descriptor: RequestDescriptor, decode_mode: DecodeMode
    ) -> Any:
        """Sends a request and decodes a successful response.

        Args:
            descriptor: The request to send.
            decode_mode: `DecodeMode.JSON` to parse the body as JSON,
                `DecodeMode.RAW` to return the body bytes as received.

        Returns:
            The decoded JSON value, or the raw body bytes.

        Raises:
            CommunicationError: If the transport fails or the response status
                is outside the 2xx range.
            DecodeError: If the body of a successful response is not valid JSON
                in JSON mode.
        """
        request = descriptor.build_request()
        logger.debug(f"Sending request: {request.method} {request.url}")
        logger.trace(f"Request Headers: {request.headers}")
        if descriptor.body:
            logger.trace(f"Request Body: {descriptor.body.decode()}")

        try:
            response = await self._http_client.send(request)
        except TRANSPORT_ERRORS as e:
            logger.error(f"Transport error for {request.url}: {e!r}")
            raise CommunicationError.wrap(e, request=request) from e

        logger.debug(f"Received response: {response.status_code} for {request.url}")
        logger.trace(f"Response Headers: {response.headers}")

        if not HTTPStatus.OK <= response.status_code < HTTPStatus.MULTIPLE_CHOICES:
            logger.error(
                f"Request failed with status {response.status_code}: {request.url}"
            )
            raise CommunicationError(
                f"The request resulted in a non-success HTTP code {response.status_code}; "
                f"{response.text}",
                response.status_code,
                response=response,
                request=request,
            )

        if decode_mode is DecodeMode.RAW:
            return response.content

        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Response from {request.url} is not valid JSON: {e}")
            raise DecodeError(
                f"Could not decode JSON response: {e}",
                response=response,
                request=request,
            ) from e
