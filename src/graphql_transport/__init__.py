"""GraphQL HTTP transport.

Sends a single GraphQL operation over HTTP, either as a full-document POST or
as a persisted-query GET, and reports the outcome as a response envelope or a
classified ``TransportError``.
"""

from __future__ import annotations

from .config import TransportConfig, transport_config
from .errors import TransportError, TransportErrorKind
from .exceptions import (
    EndpointConfigurationError,
    GraphQLTransportError,
    PersistedOperationError,
    TransportConfigurationError,
    TransportInvariantError,
)
from .extensions import Extensions, PersistedQuery
from .operation import GraphQLOperation, Operation, compute_operation_identifier
from .protocol import Cancellable, CompletionHandler, NetworkTransport
from .request_builder import RequestMode, build_request
from .response import GraphQLResponse, interpret_response
from .transport import HTTPNetworkTransport, InFlightRequest

__version__ = "0.1.0"

__all__ = [
    "Cancellable",
    "CompletionHandler",
    "EndpointConfigurationError",
    "Extensions",
    "GraphQLOperation",
    "GraphQLResponse",
    "GraphQLTransportError",
    "HTTPNetworkTransport",
    "InFlightRequest",
    "NetworkTransport",
    "Operation",
    "PersistedOperationError",
    "PersistedQuery",
    "RequestMode",
    "TransportConfig",
    "TransportConfigurationError",
    "TransportError",
    "TransportErrorKind",
    "TransportInvariantError",
    "build_request",
    "compute_operation_identifier",
    "interpret_response",
    "transport_config",
]
