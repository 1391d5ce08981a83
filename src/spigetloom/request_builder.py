"""Builds fully resolved request descriptors for the Spiget API.

The builder owns everything about the shape of a request: it appends encoded
path segments to the versioned base URL, serializes query parameters in
insertion order and form-encodes request bodies. It never fails on string
input and never touches the scheme or host of the base URL.
"""

from collections.abc import Iterable
from typing import Any
from urllib.parse import quote, urlencode

from .constants import FORM_CONTENT_TYPE
from .log_config import logger
from .types import HttpMethod, ParamValue, QueryParams, RequestDescriptor


def encode_segment(segment: Any) -> str:
    """Percent-encodes a single path segment.

    No character is treated as safe, so ``/``, ``?``, ``#``, spaces and
    non-ASCII text inside a value can never change the path structure.
    """
    return quote(str(segment), safe="")


def _form_value(value: ParamValue) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def encode_params(params: QueryParams | None) -> str:
    """Form-encodes parameters in insertion order, skipping ``None`` values."""
    if not params:
        return ""
    return urlencode(
        [(key, _form_value(value)) for key, value in params.items() if value is not None]
    )


class RequestBuilder:
    """Composes request descriptors against a fixed base URL.

    Attributes:
        base_url: Scheme, host and versioned path prefix, always ending in "/".
        user_agent: Value of the User-Agent header sent with every request.
    """

    def __init__(self, base_url: str, user_agent: str):
        self.base_url = base_url.rstrip("/") + "/"
        self.user_agent = user_agent

    def build(
        self,
        method: HttpMethod | str,
        path_segments: Iterable[Any],
        query_params: QueryParams | None = None,
        form: QueryParams | None = None,
    ) -> RequestDescriptor:
        """Builds a request descriptor.

        Args:
            method: HTTP method of the request.
            path_segments: Raw path components relative to the base URL. Each
                one is percent-encoded on its own before joining with "/".
            query_params: Optional ordered query parameters.
            form: Optional ordered parameters sent as an
                application/x-www-form-urlencoded body.

        Returns:
            RequestDescriptor: The immutable, fully resolved request.
        """
        url = self.base_url + "/".join(encode_segment(s) for s in path_segments)
        query = encode_params(query_params)
        if query:
            url = f"{url}?{query}"

        headers = [("User-Agent", self.user_agent)]
        body: bytes | None = None
        if form is not None:
            body = encode_params(form).encode("ascii")
            headers.append(("Content-Type", FORM_CONTENT_TYPE))

        descriptor = RequestDescriptor(
            method=HttpMethod(method), url=url, headers=tuple(headers), body=body
        )
        logger.trace(f"Built request descriptor: {descriptor.method.value} {url}")
        return descriptor
