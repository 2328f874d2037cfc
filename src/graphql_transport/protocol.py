"""NetworkTransport protocol - contract for operation transports.

Structural subtyping (Protocol) keeps callers independent of the concrete
transport: anything with a matching ``send`` can stand in for
``HTTPNetworkTransport``, for example an in-memory transport in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .errors import TransportError
    from .operation import Operation
    from .response import GraphQLResponse


CompletionHandler = Callable[[Optional["GraphQLResponse"], Optional["TransportError"]], None]


@runtime_checkable
class Cancellable(Protocol):
    """Handle for work that can be abandoned before it completes."""

    def cancel(self) -> None:
        """Stop delivery of the result. Calling more than once has no effect."""
        ...


@runtime_checkable
class NetworkTransport(Protocol):
    """Protocol for sending a single GraphQL operation to a server."""

    def send(self, operation: "Operation", completion: CompletionHandler) -> Cancellable:
        """Send an operation and report the outcome through ``completion``.

        Args:
            operation: The operation to send
            completion: Called once with ``(response, None)`` or ``(None, error)``

        Returns:
            A handle that can cancel delivery of the outcome
        """
        ...
