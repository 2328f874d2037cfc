"""Fatal exception types for the GraphQL HTTP transport.

These are raised, never delivered through a completion callback. They signal
setup or programming mistakes the caller must fix rather than recover from.
"""

from __future__ import annotations


class GraphQLTransportError(RuntimeError):
    """Base exception for GraphQL transport errors."""

    def __init__(self, message: str, *, error_code: str = "graphql_transport_error") -> None:
        super().__init__(message)
        self.error_code = error_code


class TransportConfigurationError(GraphQLTransportError):
    """The transport or an operation is configured in a way that cannot work."""

    def __init__(self, message: str, *, error_code: str = "TRANSPORT_CONFIGURATION") -> None:
        super().__init__(message, error_code=error_code)


class EndpointConfigurationError(TransportConfigurationError):
    """Endpoint URL is malformed or not an absolute http(s) URL."""

    def __init__(self, url: object, reason: str) -> None:
        super().__init__(f"Invalid GraphQL endpoint {url!r}: {reason}", error_code="INVALID_ENDPOINT")
        self.url = url


class PersistedOperationError(TransportConfigurationError):
    """Persisted mode was selected for an operation without an identifier."""

    def __init__(self, operation: object) -> None:
        super().__init__(
            f"Cannot send {type(operation).__name__} as a persisted operation: "
            "it has no operation identifier",
            error_code="MISSING_OPERATION_IDENTIFIER",
        )
        self.operation = operation


class TransportInvariantError(GraphQLTransportError):
    """The HTTP layer produced something that is not an HTTP response."""

    def __init__(self, message: str) -> None:
        super().__init__(message, error_code="TRANSPORT_INVARIANT")
