"""Construction of outbound HTTP requests for GraphQL operations.

Two encodings are supported and chosen once per transport:

- FULL_DOCUMENT: POST the query text and variables as a JSON body
- PERSISTED_HASH: GET with the operation's hash in an ``extensions`` query
  parameter, letting the server look up a pre-registered document

Everything here is pure: it returns unprepared ``requests.Request`` objects and
performs no I/O.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Dict, List, Tuple
from urllib.parse import urlencode, urlsplit, urlunsplit

import requests

from .constants import (
    ALLOWED_SCHEMES,
    CONTENT_TYPE_HEADER,
    EXTENSIONS_PARAM,
    JSON_MEDIA_TYPE,
    VARIABLES_PARAM,
)
from .exceptions import EndpointConfigurationError, PersistedOperationError
from .extensions import Extensions
from .operation import Operation


class RequestMode(str, Enum):
    FULL_DOCUMENT = "full_document"
    PERSISTED_HASH = "persisted_hash"

    @classmethod
    def from_flag(cls, send_persisted_operations: bool) -> "RequestMode":
        return cls.PERSISTED_HASH if send_persisted_operations else cls.FULL_DOCUMENT


def validate_endpoint(url: Any) -> str:
    """Check that ``url`` is an absolute http(s) URL and return it.

    Raises:
        EndpointConfigurationError: If the URL cannot be used as an endpoint
    """
    if not isinstance(url, str) or not url.strip():
        raise EndpointConfigurationError(url, "URL must be a non-empty string")
    try:
        parts = urlsplit(url)
        # Accessing port validates it
        parts.port
    except ValueError as e:
        raise EndpointConfigurationError(url, str(e)) from e
    if parts.scheme.lower() not in ALLOWED_SCHEMES:
        raise EndpointConfigurationError(url, f"scheme must be one of {', '.join(ALLOWED_SCHEMES)}")
    if not parts.hostname:
        raise EndpointConfigurationError(url, "URL must include a host")
    return url


def _json_headers() -> Dict[str, str]:
    return {CONTENT_TYPE_HEADER: JSON_MEDIA_TYPE}


def _encode_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"))


def request_body(operation: Operation) -> Dict[str, Any]:
    variables = operation.variables
    return {
        "query": operation.query_document,
        "variables": dict(variables) if variables is not None else None,
    }


def build_post_request(endpoint: str, operation: Operation) -> requests.Request:
    return requests.Request(
        method="POST",
        url=endpoint,
        headers=_json_headers(),
        data=_encode_json(request_body(operation)).encode("utf-8"),
    )


def persisted_query_items(operation: Operation) -> List[Tuple[str, str]]:
    """Query items carrying a persisted operation, in wire order.

    Raises:
        PersistedOperationError: If the operation has no identifier
    """
    identifier = operation.operation_identifier
    if not identifier:
        raise PersistedOperationError(operation)

    items: List[Tuple[str, str]] = []
    if operation.variables is not None:
        items.append((VARIABLES_PARAM, _encode_json(dict(operation.variables))))
    items.append((EXTENSIONS_PARAM, Extensions.for_identifier(identifier).to_json()))
    return items


def persisted_url(endpoint: str, items: List[Tuple[str, str]]) -> str:
    """Append ``items`` to the endpoint's query string, keeping scheme, host and path."""
    try:
        parts = urlsplit(endpoint)
        query = "&".join(part for part in (parts.query, urlencode(items)) if part)
        return urlunsplit(parts._replace(query=query))
    except ValueError as e:
        raise EndpointConfigurationError(endpoint, f"cannot resolve URL components: {e}") from e


def build_persisted_request(endpoint: str, operation: Operation) -> requests.Request:
    url = persisted_url(endpoint, persisted_query_items(operation))
    # GET carries no body, but servers expect the JSON content type regardless
    return requests.Request(method="GET", url=url, headers=_json_headers())


def build_request(endpoint: str, operation: Operation, mode: RequestMode) -> requests.Request:
    if mode is RequestMode.PERSISTED_HASH:
        return build_persisted_request(endpoint, operation)
    return build_post_request(endpoint, operation)
