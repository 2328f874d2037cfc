"""Request construction tests for both encodings."""

import json
from urllib.parse import parse_qs, urlsplit

import pytest
import requests

from graphql_transport import (
    EndpointConfigurationError,
    GraphQLOperation,
    PersistedOperationError,
    RequestMode,
)
from graphql_transport.request_builder import (
    build_persisted_request,
    build_post_request,
    build_request,
    persisted_url,
    validate_endpoint,
)


ENDPOINT = "https://api.example.invalid/graphql"
DOCUMENT = "query Hero($episode: Episode) { hero(episode: $episode) { name } }"


def _query_params(url):
    return parse_qs(urlsplit(url).query)


@pytest.mark.parametrize("variables", [None, {}, {"episode": "JEDI", "first": 3, "tags": ["a", None]}])
def test_post_body_decodes_to_query_and_variables(variables):
    request = build_post_request(ENDPOINT, GraphQLOperation(DOCUMENT, variables))

    assert request.method == "POST"
    assert request.url == ENDPOINT
    assert json.loads(request.data) == {"query": DOCUMENT, "variables": variables}


def test_post_variables_are_null_when_absent():
    request = build_post_request(ENDPOINT, GraphQLOperation(DOCUMENT))

    body = json.loads(request.data)
    assert "variables" in body
    assert body["variables"] is None


def test_post_sets_json_content_type():
    prepared = build_post_request(ENDPOINT, GraphQLOperation(DOCUMENT)).prepare()

    assert prepared.headers["Content-Type"] == "application/json"


def test_persisted_extensions_always_present():
    operation = GraphQLOperation(DOCUMENT, operation_identifier="abc123")

    request = build_persisted_request(ENDPOINT, operation)

    assert request.method == "GET"
    params = _query_params(request.url)
    assert json.loads(params["extensions"][0]) == {"persistedQuery": {"version": 1, "sha256Hash": "abc123"}}
    assert "variables" not in params


def test_persisted_variables_match_post_variables():
    variables = {"episode": "EMPIRE", "nested": {"flag": True, "ids": [1, 2]}}
    operation = GraphQLOperation(DOCUMENT, variables, operation_identifier="abc123")

    params = _query_params(build_persisted_request(ENDPOINT, operation).url)
    post_body = json.loads(build_post_request(ENDPOINT, operation).data)

    assert json.loads(params["variables"][0]) == post_body["variables"]


def test_persisted_request_keeps_scheme_host_and_path():
    operation = GraphQLOperation(DOCUMENT, operation_identifier="abc123")

    parts = urlsplit(build_persisted_request("http://localhost:4000/api/graphql", operation).url)

    assert (parts.scheme, parts.netloc, parts.path) == ("http", "localhost:4000", "/api/graphql")


def test_persisted_request_appends_to_existing_query():
    url = persisted_url(ENDPOINT + "?tenant=acme", [("extensions", "{}")])

    assert _query_params(url) == {"tenant": ["acme"], "extensions": ["{}"]}


def test_persisted_request_sets_json_content_type_without_body():
    operation = GraphQLOperation(DOCUMENT, operation_identifier="abc123")

    prepared = build_persisted_request(ENDPOINT, operation).prepare()

    assert prepared.headers["Content-Type"] == "application/json"
    assert prepared.body is None


@pytest.mark.parametrize("identifier", [None, ""])
def test_persisted_request_requires_identifier(identifier):
    operation = GraphQLOperation(DOCUMENT, operation_identifier=identifier)

    with pytest.raises(PersistedOperationError):
        build_persisted_request(ENDPOINT, operation)


def test_build_request_dispatches_on_mode():
    operation = GraphQLOperation.persisted(DOCUMENT)

    assert build_request(ENDPOINT, operation, RequestMode.FULL_DOCUMENT).method == "POST"
    assert build_request(ENDPOINT, operation, RequestMode.PERSISTED_HASH).method == "GET"
    assert isinstance(build_request(ENDPOINT, operation, RequestMode.PERSISTED_HASH), requests.Request)


def test_mode_from_flag():
    assert RequestMode.from_flag(False) is RequestMode.FULL_DOCUMENT
    assert RequestMode.from_flag(True) is RequestMode.PERSISTED_HASH


def test_validate_endpoint_accepts_absolute_http_urls():
    assert validate_endpoint(ENDPOINT) == ENDPOINT
    assert validate_endpoint("http://127.0.0.1:8080/graphql") == "http://127.0.0.1:8080/graphql"


@pytest.mark.parametrize(
    "url",
    [
        "",
        None,
        "/graphql",
        "api.example.invalid/graphql",
        "ftp://api.example.invalid/graphql",
        "https:///graphql",
        "https://api.example.invalid:notaport/graphql",
    ],
)
def test_validate_endpoint_rejects_unusable_urls(url):
    with pytest.raises(EndpointConfigurationError):
        validate_endpoint(url)


def test_persisted_url_keeps_existing_query_verbatim():
    url = persisted_url(ENDPOINT + "?flag&name=a%20b;x=1", [("extensions", "{}")])

    assert url == ENDPOINT + "?flag&name=a%20b;x=1&extensions=%7B%7D"


def test_persisted_url_without_existing_query():
    assert persisted_url(ENDPOINT, [("extensions", "{}")]) == ENDPOINT + "?extensions=%7B%7D"
