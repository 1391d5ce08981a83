"""Defines the Spiget API operations as a data table.

Every operation the client supports is described once by an `Endpoint`: its
path template, HTTP method, body encoding and decode mode. `SpigetClient.call`
looks operations up in `ENDPOINT_DEFINITIONS` by their id; the resource
sub-clients are thin named wrappers around those ids.
"""

import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .constants import LATEST_VERSION
from .exceptions import ValidationError
from .types import BodyEncoding, DecodeMode, HttpMethod

_PLACEHOLDER = re.compile(r"^\{(\w+)\}$")

# --- Operation ids ---
AUTHORS_LIST = "authors.list"
AUTHORS_GET = "authors.get"
AUTHORS_RESOURCES = "authors.resources"
AUTHORS_REVIEWS = "authors.reviews"
CATEGORIES_LIST = "categories.list"
CATEGORIES_GET = "categories.get"
CATEGORIES_RESOURCES = "categories.resources"
RESOURCES_LIST = "resources.list"
RESOURCES_NEW = "resources.new"
RESOURCES_FOR_VERSIONS = "resources.for_versions"
RESOURCES_GET = "resources.get"
RESOURCES_AUTHOR = "resources.author"
RESOURCES_DOWNLOAD = "resources.download"
RESOURCES_REVIEWS = "resources.reviews"
RESOURCES_UPDATES = "resources.updates"
RESOURCES_VERSIONS = "resources.versions"
RESOURCES_VERSION_DOWNLOAD = "resources.version_download"
SEARCH_AUTHORS = "search.authors"
SEARCH_RESOURCES = "search.resources"
STATUS = "status"
WEBHOOKS_EVENTS = "webhooks.events"
WEBHOOKS_STATUS = "webhooks.status"
WEBHOOKS_REGISTER = "webhooks.register"
WEBHOOKS_DELETE = "webhooks.delete"


class Endpoint(BaseModel):
    """Immutable description of a single API operation.

    Attributes:
        operation_id: Identifier used with `SpigetClient.call`.
        path: Path template relative to the versioned base, as literal
            segments and ``{name}`` placeholders.
        method: HTTP method used for the operation.
        body: Whether parameters are sent as a form-encoded body.
        decode: How a successful response body is returned.
        defaults: Values for placeholders the caller may leave out.
    """

    operation_id: str
    path: tuple[str, ...]
    method: HttpMethod = HttpMethod.GET
    body: BodyEncoding = BodyEncoding.NONE
    decode: DecodeMode = DecodeMode.JSON
    defaults: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def path_params(self) -> tuple[str, ...]:
        """Names of the placeholders in the path template, in order."""
        return tuple(
            match.group(1)
            for match in map(_PLACEHOLDER.match, self.path)
            if match is not None
        )

    def resolve_path(self, path_params: Mapping[str, Any] | None = None) -> list[str]:
        """Substitutes placeholder values into the path template.

        Values are returned raw; percent-encoding is the request builder's job.

        A placeholder given as ``None`` falls back to its default.

        Raises:
            ValidationError: If a placeholder has neither a value nor a default.
        """
        values = path_params or {}
        segments: list[str] = []
        for segment in self.path:
            match = _PLACEHOLDER.match(segment)
            if match is None:
                segments.append(segment)
                continue
            name = match.group(1)
            value = values.get(name)
            if value is None:
                value = self.defaults.get(name)
            if value is None:
                raise ValidationError(
                    f"Missing path parameter '{name}' for operation '{self.operation_id}'"
                )
            segments.append(str(value))
        return segments


def _endpoint(operation_id: str, template: str, **kwargs: Any) -> Endpoint:
    return Endpoint(operation_id=operation_id, path=tuple(template.split("/")), **kwargs)


ENDPOINT_DEFINITIONS: dict[str, Endpoint] = {
    endpoint.operation_id: endpoint
    for endpoint in (
        # Authors
        _endpoint(AUTHORS_LIST, "authors"),
        _endpoint(AUTHORS_GET, "authors/{author}"),
        _endpoint(AUTHORS_RESOURCES, "authors/{author}/resources"),
        _endpoint(AUTHORS_REVIEWS, "authors/{author}/reviews"),
        # Categories
        _endpoint(CATEGORIES_LIST, "categories"),
        _endpoint(CATEGORIES_GET, "categories/{category}"),
        _endpoint(CATEGORIES_RESOURCES, "categories/{category}/resources"),
        # Resources
        _endpoint(RESOURCES_LIST, "resources"),
        _endpoint(RESOURCES_NEW, "resources/new"),
        _endpoint(RESOURCES_FOR_VERSIONS, "resources/for/versions/{versions}"),
        _endpoint(RESOURCES_GET, "resources/{resource}"),
        _endpoint(RESOURCES_AUTHOR, "resources/{resource}/author"),
        _endpoint(
            RESOURCES_DOWNLOAD, "resources/{resource}/download", decode=DecodeMode.RAW
        ),
        _endpoint(RESOURCES_REVIEWS, "resources/{resource}/reviews"),
        _endpoint(RESOURCES_UPDATES, "resources/{resource}/updates"),
        _endpoint(RESOURCES_VERSIONS, "resources/{resource}/versions"),
        _endpoint(
            RESOURCES_VERSION_DOWNLOAD,
            "resources/{resource}/versions/{version}/download",
            decode=DecodeMode.RAW,
            defaults={"version": LATEST_VERSION},
        ),
        # Search
        _endpoint(SEARCH_AUTHORS, "search/authors/{query}"),
        _endpoint(SEARCH_RESOURCES, "search/resources/{query}"),
        # Status
        _endpoint(STATUS, "status"),
        # Webhooks
        _endpoint(WEBHOOKS_EVENTS, "webhook/events"),
        _endpoint(WEBHOOKS_STATUS, "webhook/status/{id}"),
        _endpoint(
            WEBHOOKS_REGISTER,
            "webhook/register",
            method=HttpMethod.POST,
            body=BodyEncoding.FORM,
        ),
        _endpoint(
            WEBHOOKS_DELETE, "webhook/delete/{id}/{secret}", method=HttpMethod.DELETE
        ),
    )
}


def get_endpoint(operation_id: str) -> Endpoint:
    """Returns the endpoint definition for an operation id.

    Raises:
        ValidationError: If the operation id is unknown.
    """
    try:
        return ENDPOINT_DEFINITIONS[operation_id]
    except KeyError:
        raise ValidationError(f"Unknown operation '{operation_id}'") from None
