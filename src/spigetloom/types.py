# spigetloom/types.py
"""Core type definitions for the spigetloom request pipeline.

This module defines the enumerations describing how an operation is sent and
decoded, the type alias for query/form parameters and the immutable request
descriptor handed from the request builder to the dispatcher.
"""

from collections.abc import Mapping
from enum import Enum

import httpx
from pydantic import BaseModel, ConfigDict


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


class BodyEncoding(str, Enum):
    """How the parameters of an operation travel in the request body."""

    NONE = "none"
    FORM = "form"


class DecodeMode(str, Enum):
    """Policy for turning a successful response body into a return value."""

    JSON = "json"  # Parse as JSON
    RAW = "raw"  # Return the body bytes unmodified


ParamValue = str | int | float | bool | None

QueryParams = Mapping[str, ParamValue]
"""Ordered mapping of query or form parameters.

Insertion order is preserved on the wire. ``None`` values are left out and
booleans are sent as ``1``/``0``.
"""


class RequestDescriptor(BaseModel):
    """A fully resolved HTTP request, ready to be dispatched.

    Headers are kept as ordered name/value pairs so the descriptor cannot be
    changed after construction.
    """

    method: HttpMethod
    url: str
    headers: tuple[tuple[str, str], ...] = ()
    body: bytes | None = None

    model_config = ConfigDict(frozen=True)

    def build_request(self) -> httpx.Request:
        """Builds an httpx.Request object from the stored data."""
        return httpx.Request(
            method=self.method.value,
            url=self.url,
            headers=self.headers,
            content=self.body,
        )
