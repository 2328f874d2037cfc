"""Classified errors delivered to completion callbacks.

``TransportError`` is a single class tagged with a closed ``TransportErrorKind``
so callers can switch on ``error.kind`` instead of using isinstance checks.
Each kind carries the fields needed to diagnose it:

- NETWORK: the underlying ``cause`` from the HTTP client
- HTTP_ERROR, INVALID_RESPONSE, DECODE_ERROR: status code, reason phrase,
  raw body bytes and the body's declared text encoding
"""

from __future__ import annotations

from enum import Enum
from http import HTTPStatus
from typing import Any, Optional

from .constants import (
    DEFAULT_TEXT_ENCODING,
    EMPTY_BODY_DESCRIPTION,
    UNKNOWN_STATUS_DESCRIPTION,
    UNREADABLE_BODY_DESCRIPTION,
)


class TransportErrorKind(str, Enum):
    NETWORK = "network"
    HTTP_ERROR = "http_error"
    INVALID_RESPONSE = "invalid_response"
    DECODE_ERROR = "decode_error"

    @property
    def description(self) -> str:
        return _KIND_DESCRIPTIONS[self]


_KIND_DESCRIPTIONS = {
    TransportErrorKind.NETWORK: "Network error",
    TransportErrorKind.HTTP_ERROR: "Received error response",
    TransportErrorKind.INVALID_RESPONSE: "Received invalid response",
    TransportErrorKind.DECODE_ERROR: "Received undecodable response",
}


def status_description(status_code: int, reason: Optional[str] = None) -> str:
    """Human-readable phrase for a status code, preferring the server's reason."""
    if reason:
        return reason
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return UNKNOWN_STATUS_DESCRIPTION


def declared_encoding(response: Any) -> Optional[str]:
    """Charset named in the response's Content-Type header, if any.

    ``requests`` fills ``response.encoding`` with ISO-8859-1 for ``text/*``
    responses that declare no charset; that default is not honoured here.
    """
    headers = getattr(response, "headers", None) or {}
    content_type = headers.get("content-type") or ""
    if "charset" not in content_type.lower():
        return None
    return getattr(response, "encoding", None)


def describe_body(body: Optional[bytes], encoding: Optional[str] = None) -> str:
    """Render a response body as text for diagnostics. Never raises."""
    if not body:
        return EMPTY_BODY_DESCRIPTION
    try:
        return body.decode(encoding or DEFAULT_TEXT_ENCODING)
    except (UnicodeDecodeError, LookupError):
        return UNREADABLE_BODY_DESCRIPTION


class TransportError(Exception):
    """A send that did not produce a usable response.

    Build instances through the per-kind constructors (``network``,
    ``http_error``, ``invalid_response``, ``decode_error``).
    """

    def __init__(
        self,
        kind: TransportErrorKind,
        *,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
        body: Optional[bytes] = None,
        encoding: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.kind = kind
        self.status_code = status_code
        self.reason = reason
        self.body = body
        self.encoding = encoding
        self.cause = cause
        super().__init__(self.error_description)
        if cause is not None:
            self.__cause__ = cause

    @classmethod
    def network(cls, cause: BaseException) -> "TransportError":
        return cls(TransportErrorKind.NETWORK, cause=cause)

    @classmethod
    def http_error(cls, response: Any) -> "TransportError":
        return cls._from_response(TransportErrorKind.HTTP_ERROR, response, response.content)

    @classmethod
    def invalid_response(
        cls, response: Any, body: Optional[bytes] = None, cause: Optional[BaseException] = None
    ) -> "TransportError":
        return cls._from_response(TransportErrorKind.INVALID_RESPONSE, response, body, cause)

    @classmethod
    def decode_error(cls, response: Any, body: bytes) -> "TransportError":
        return cls._from_response(TransportErrorKind.DECODE_ERROR, response, body)

    @classmethod
    def _from_response(
        cls,
        kind: TransportErrorKind,
        response: Any,
        body: Optional[bytes],
        cause: Optional[BaseException] = None,
    ) -> "TransportError":
        return cls(
            kind,
            status_code=response.status_code,
            reason=status_description(response.status_code, getattr(response, "reason", None)),
            body=body,
            encoding=declared_encoding(response),
            cause=cause,
        )

    @property
    def body_description(self) -> str:
        return describe_body(self.body, self.encoding)

    @property
    def error_description(self) -> str:
        if self.kind is TransportErrorKind.NETWORK:
            return f"{self.kind.description}: {self.cause}"
        return f"{self.kind.description} ({self.status_code} {self.reason}): {self.body_description}"

    def __repr__(self) -> str:
        return f"TransportError(kind={self.kind.value!r}, status_code={self.status_code!r})"
