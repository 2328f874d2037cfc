"""Test configuration for pytest."""

import threading
from typing import Any, Dict, Optional

import pytest
import requests
from requests.utils import get_encoding_from_headers

from graphql_transport import TransportConfig


ENDPOINT = "https://api.example.invalid/graphql"


def make_response(
    status_code: int = 200,
    body: bytes = b"",
    *,
    reason: Optional[str] = None,
    encoding: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
) -> requests.Response:
    """Build a real ``requests.Response`` without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response.reason = reason
    response.headers.update(headers or {"Content-Type": "application/json"})
    # Mirror HTTPAdapter.build_response unless a test forces an encoding
    response.encoding = encoding if encoding is not None else get_encoding_from_headers(response.headers)
    response.url = ENDPOINT
    return response


class CompletionRecorder:
    """Completion callback that records every invocation."""

    def __init__(self) -> None:
        self.calls: list = []
        self.called = threading.Event()

    def __call__(self, response: Any, error: Any) -> None:
        self.calls.append((response, error))
        self.called.set()

    @property
    def response(self) -> Any:
        return self.calls[0][0]

    @property
    def error(self) -> Any:
        return self.calls[0][1]


@pytest.fixture
def make_http_response():
    return make_response


@pytest.fixture
def recorder() -> CompletionRecorder:
    return CompletionRecorder()


@pytest.fixture
def test_config() -> TransportConfig:
    return TransportConfig(timeout=5.0, max_workers=2)


@pytest.fixture
def fake_session():
    """Real session whose ``send`` is replaced, so requests are prepared normally."""
    session = requests.Session()
    session.send = lambda *args, **kwargs: make_response(200, b'{"data":{}}')
    yield session
    session.close()
