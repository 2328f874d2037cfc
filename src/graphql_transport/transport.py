"""HTTP network transport for GraphQL operations.

``HTTPNetworkTransport.send`` builds the request on the calling thread, hands
one unit of work to a thread pool and returns an ``InFlightRequest`` handle
immediately. The worker performs the HTTP call with ``requests``, interprets
the response and invokes the completion callback exactly once, unless the
handle was cancelled first.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import CancelledError, Executor, Future, ThreadPoolExecutor
from typing import Any, Optional

import requests

from .config import TransportConfig, transport_config
from .errors import TransportError
from .exceptions import EndpointConfigurationError, GraphQLTransportError, TransportInvariantError
from .operation import Operation
from .protocol import CompletionHandler
from .request_builder import RequestMode, build_request, validate_endpoint
from .response import GraphQLResponse, interpret_response

logger = logging.getLogger(__name__)


class InFlightRequest:
    """Handle for one outstanding send.

    The handle is active until its completion callback has fired or
    cancellation has been requested, whichever happens first.
    """

    def __init__(self, operation: Operation, completion: CompletionHandler) -> None:
        self.operation = operation
        self._completion = completion
        self._lock = threading.Lock()
        self._cancelled = False
        self._delivered = False
        self._future: Optional[Future] = None

    def _attach(self, future: Future) -> None:
        self._future = future

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def is_active(self) -> bool:
        with self._lock:
            return not (self._cancelled or self._delivered)

    def cancel(self) -> None:
        """Suppress delivery of the outcome. No-op once delivered or already cancelled."""
        with self._lock:
            if self._cancelled or self._delivered:
                return
            self._cancelled = True
            future = self._future
        if future is not None and future.cancel():
            logger.debug("Cancelled pending GraphQL request before it started")
        else:
            logger.debug("Cancelled in-flight GraphQL request; its result will be discarded")

    def done(self) -> bool:
        return self._future is not None and self._future.done()

    def wait(self, timeout: Optional[float] = None) -> None:
        """Block until the unit of work has finished.

        Raises:
            TransportInvariantError: If the worker hit a non-HTTP response
            concurrent.futures.TimeoutError: If ``timeout`` elapses first
        """
        if self._future is None:
            return
        try:
            self._future.result(timeout=timeout)
        except CancelledError:
            return

    def _deliver(self, response: Optional[GraphQLResponse], error: Optional[TransportError]) -> bool:
        with self._lock:
            if self._cancelled or self._delivered:
                return False
            self._delivered = True
        self._completion(response, error)
        return True


class HTTPNetworkTransport:
    """Sends GraphQL operations over HTTP using a ``requests.Session``.

    Args:
        url: Absolute http(s) URL of the GraphQL endpoint
        session: Session to send requests with; one is created (and owned) when omitted
        send_persisted_operations: Send operation identifiers via GET instead of
            POSTing the full document. Requires servers that support persisted queries.
        config: Transport configuration; defaults to the environment-derived config
        executor: Executor running in-flight requests; a thread pool is created
            (and owned) when omitted

    Raises:
        EndpointConfigurationError: If ``url`` is not an absolute http(s) URL
    """

    def __init__(
        self,
        url: str,
        session: Optional[requests.Session] = None,
        send_persisted_operations: bool = False,
        config: Optional[TransportConfig] = None,
        executor: Optional[Executor] = None,
    ) -> None:
        self._url = validate_endpoint(url)
        self._mode = RequestMode.from_flag(send_persisted_operations)
        self._config = config or transport_config

        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=self._config.max_workers,
            thread_name_prefix="graphql-transport",
        )
        self._closed = False

    @property
    def url(self) -> str:
        return self._url

    @property
    def mode(self) -> RequestMode:
        return self._mode

    @property
    def session(self) -> requests.Session:
        return self._session

    def send(self, operation: Operation, completion: CompletionHandler) -> InFlightRequest:
        """Send an operation and return without waiting for the response.

        Args:
            operation: The operation to send
            completion: Called once, on a worker thread, with ``(response, None)``
                or ``(None, error)``. Not called if the handle is cancelled first.

        Returns:
            Handle that can cancel delivery of the outcome

        Raises:
            PersistedOperationError: If persisted mode is on and the operation has no identifier
            EndpointConfigurationError: If the request URL cannot be prepared
            GraphQLTransportError: If the transport has been closed
        """
        if self._closed:
            raise GraphQLTransportError("Transport is closed", error_code="TRANSPORT_CLOSED")

        request = build_request(self._url, operation, self._mode)
        try:
            prepared = self._session.prepare_request(request)
        except requests.RequestException as e:
            raise EndpointConfigurationError(request.url, str(e)) from e

        handle = InFlightRequest(operation, completion)
        logger.debug("Sending GraphQL %s request to %s", prepared.method, self._url)
        try:
            future = self._executor.submit(self._perform, handle, prepared)
        except RuntimeError as e:
            # close() shut the executor down after the _closed check above
            raise GraphQLTransportError("Transport is closed", error_code="TRANSPORT_CLOSED") from e
        handle._attach(future)
        return handle

    def _perform(self, handle: InFlightRequest, prepared: requests.PreparedRequest) -> None:
        response: Any = None
        failure: Optional[BaseException] = None
        try:
            response = self._session.send(prepared, timeout=self._config.timeout)
        except requests.RequestException as e:
            failure = e
        except Exception as e:
            # Adapters may raise errors that requests does not wrap
            logger.debug("Unwrapped error from HTTP adapter: %r", e)
            failure = e

        if handle.cancelled:
            logger.debug("Discarding result of cancelled GraphQL request to %s", self._url)
            return

        try:
            result, error = interpret_response(handle.operation, response, failure)
        except TransportInvariantError as e:
            logger.critical("GraphQL transport invariant violated: %s", e)
            raise

        if error is not None:
            self._log_error(error)
        else:
            logger.debug("GraphQL request to %s succeeded", self._url)
        try:
            handle._deliver(result, error)
        except Exception:
            logger.exception("GraphQL completion callback for %s raised", self._url)

    def _log_error(self, error: TransportError) -> None:
        if self._config.log_bodies:
            logger.warning("GraphQL request to %s failed: %s", self._url, error.error_description)
        else:
            logger.warning(
                "GraphQL request to %s failed: %s (status %s)", self._url, error.kind.value, error.status_code
            )

    def close(self) -> None:
        """Shut down the owned executor and session. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        if self._owns_executor:
            self._executor.shutdown(wait=True)
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "HTTPNetworkTransport":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"HTTPNetworkTransport(url={self._url!r}, mode={self._mode.value!r})"
