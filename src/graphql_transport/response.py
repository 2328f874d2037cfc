"""Interpretation of HTTP responses into envelopes or classified errors."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .errors import TransportError
from .exceptions import TransportInvariantError
from .operation import Operation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphQLResponse:
    """Decoded JSON object body paired with the operation that produced it.

    Typed decoding of ``data`` and ``errors`` is left to the caller.
    """

    operation: Operation
    body: Dict[str, Any]

    @property
    def data(self) -> Any:
        return self.body.get("data")

    @property
    def errors(self) -> Any:
        return self.body.get("errors")


InterpretResult = Tuple[Optional[GraphQLResponse], Optional[TransportError]]


def is_successful(status_code: int) -> bool:
    return 200 <= status_code < 300


def interpret_response(
    operation: Operation,
    response: Any = None,
    error: Optional[BaseException] = None,
) -> InterpretResult:
    """Classify the outcome of one HTTP exchange.

    Checks run in order and the first match wins: transport failure,
    non-HTTP response, unsuccessful status, empty body, non-object body,
    success.

    Args:
        operation: The operation that was sent
        response: The ``requests.Response`` (or equivalent), if one was received
        error: The exception raised by the HTTP call, if it failed

    Returns:
        ``(GraphQLResponse, None)`` on success, ``(None, TransportError)`` otherwise

    Raises:
        TransportInvariantError: If ``response`` is not an HTTP response
    """
    if error is not None:
        return None, TransportError.network(error)

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int) or isinstance(status_code, bool):
        raise TransportInvariantError(f"Expected an HTTP response, got {type(response).__name__}")

    if not is_successful(status_code):
        return None, TransportError.http_error(response)

    body = response.content
    if not body:
        return None, TransportError.invalid_response(response)

    try:
        decoded = json.loads(body)
    except ValueError as e:
        # Covers JSONDecodeError and UnicodeDecodeError
        return None, TransportError.invalid_response(response, body, cause=e)

    if not isinstance(decoded, dict):
        logger.debug("Response body is JSON %s, not an object", type(decoded).__name__)
        return None, TransportError.decode_error(response, body)

    return GraphQLResponse(operation=operation, body=decoded), None
