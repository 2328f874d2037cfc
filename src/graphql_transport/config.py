"""Configuration for the GraphQL HTTP transport."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from .exceptions import TransportConfigurationError


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        raise TransportConfigurationError(f"GRAPHQL_TRANSPORT_TIMEOUT must be a number, got {raw!r}")
    if value <= 0:
        raise TransportConfigurationError(f"GRAPHQL_TRANSPORT_TIMEOUT must be positive, got {raw!r}")
    return value


def _parse_workers(raw: Optional[str]) -> int:
    if raw is None or not raw.strip():
        return 4
    try:
        value = int(raw)
    except ValueError:
        raise TransportConfigurationError(f"GRAPHQL_TRANSPORT_MAX_WORKERS must be an integer, got {raw!r}")
    if value < 1:
        raise TransportConfigurationError(f"GRAPHQL_TRANSPORT_MAX_WORKERS must be at least 1, got {raw!r}")
    return value


class TransportConfig:
    """Configuration for HTTP requests made by the transport."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        max_workers: int = 4,
        log_bodies: bool = False,
    ) -> None:
        # Seconds; None leaves the requests default (no timeout) in place
        self.timeout = timeout
        # Size of the thread pool that runs in-flight requests
        self.max_workers = max_workers
        # Include response bodies in warning logs for failed requests
        self.log_bodies = log_bodies

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TransportConfig":
        env = os.environ if environ is None else environ
        return cls(
            timeout=_parse_timeout(env.get("GRAPHQL_TRANSPORT_TIMEOUT")),
            max_workers=_parse_workers(env.get("GRAPHQL_TRANSPORT_MAX_WORKERS")),
            log_bodies=env.get("GRAPHQL_TRANSPORT_LOG_BODIES", "false").lower() == "true",
        )

    def __repr__(self) -> str:
        return (
            f"TransportConfig(timeout={self.timeout!r}, max_workers={self.max_workers!r}, "
            f"log_bodies={self.log_bodies!r})"
        )


# Global config instance
transport_config = TransportConfig.from_env()
