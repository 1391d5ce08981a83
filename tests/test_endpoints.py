"""Tests for the endpoint table in spigetloom."""

import pytest

from spigetloom.endpoints import (
    ENDPOINT_DEFINITIONS,
    RESOURCES_DOWNLOAD,
    RESOURCES_VERSION_DOWNLOAD,
    WEBHOOKS_DELETE,
    WEBHOOKS_REGISTER,
    get_endpoint,
)
from spigetloom.exceptions import ValidationError
from spigetloom.types import BodyEncoding, DecodeMode, HttpMethod


def test_table_covers_every_operation():
    assert len(ENDPOINT_DEFINITIONS) == 24
    for operation_id, endpoint in ENDPOINT_DEFINITIONS.items():
        assert endpoint.operation_id == operation_id


def test_only_downloads_are_raw():
    raw = {op for op, e in ENDPOINT_DEFINITIONS.items() if e.decode is DecodeMode.RAW}
    assert raw == {RESOURCES_DOWNLOAD, RESOURCES_VERSION_DOWNLOAD}


def test_methods_and_bodies():
    register = get_endpoint(WEBHOOKS_REGISTER)
    assert register.method is HttpMethod.POST
    assert register.body is BodyEncoding.FORM

    delete = get_endpoint(WEBHOOKS_DELETE)
    assert delete.method is HttpMethod.DELETE
    assert delete.path_params == ("id", "secret")

    others = set(ENDPOINT_DEFINITIONS) - {WEBHOOKS_REGISTER, WEBHOOKS_DELETE}
    for operation_id in others:
        endpoint = ENDPOINT_DEFINITIONS[operation_id]
        assert endpoint.method is HttpMethod.GET
        assert endpoint.body is BodyEncoding.NONE


def test_resolve_path_keeps_values_raw():
    endpoint = get_endpoint("search.resources")
    assert endpoint.resolve_path({"query": "world/edit"}) == [
        "search",
        "resources",
        "world/edit",
    ]


def test_version_defaults_to_latest():
    endpoint = get_endpoint(RESOURCES_VERSION_DOWNLOAD)
    assert endpoint.resolve_path({"resource": 42}) == [
        "resources",
        "42",
        "versions",
        "latest",
        "download",
    ]
    assert endpoint.resolve_path({"resource": 42, "version": 7})[3] == "7"


def test_missing_path_param_raises():
    with pytest.raises(ValidationError, match="author"):
        get_endpoint("authors.get").resolve_path({})


def test_empty_string_is_a_valid_value():
    assert get_endpoint("authors.get").resolve_path({"author": ""}) == ["authors", ""]


def test_unknown_operation_raises():
    with pytest.raises(ValidationError, match="Unknown operation"):
        get_endpoint("resources.delete")


def test_explicit_none_version_falls_back_to_latest():
    endpoint = get_endpoint(RESOURCES_VERSION_DOWNLOAD)
    assert endpoint.resolve_path({"resource": 42, "version": None})[3] == "latest"


def test_explicit_none_without_default_raises():
    with pytest.raises(ValidationError, match="resource"):
        get_endpoint(RESOURCES_VERSION_DOWNLOAD).resolve_path({"resource": None})
