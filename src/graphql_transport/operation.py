"""GraphQL operations as seen by the transport.

The transport only needs three facets of an operation: the full query
document, its variables and, for persisted queries, an identifier that the
server can resolve back to the document.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class Operation(Protocol):
    """Structural contract for anything the transport can send."""

    @property
    def query_document(self) -> str:
        """Full GraphQL document text."""
        ...

    @property
    def variables(self) -> Optional[Mapping[str, Any]]:
        """JSON-compatible variable values, or None when there are none."""
        ...

    @property
    def operation_identifier(self) -> Optional[str]:
        """Persisted-query hash, or None when the operation is not persisted."""
        ...


def compute_operation_identifier(document: str) -> str:
    """Return the SHA-256 hex digest that identifies a persisted document."""
    return hashlib.sha256(document.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class GraphQLOperation:
    """Plain operation value implementing the Operation protocol.

    Attributes:
        query_document: The GraphQL query or mutation text
        variables: Variable values keyed by name (None when the operation declares none)
        operation_identifier: Hash registered with the server for persisted queries
    """

    query_document: str
    variables: Optional[Mapping[str, Any]] = None
    operation_identifier: Optional[str] = None

    @classmethod
    def persisted(cls, query_document: str, variables: Optional[Mapping[str, Any]] = None) -> "GraphQLOperation":
        """Build an operation whose identifier is the SHA-256 of its document."""
        return cls(
            query_document=query_document,
            variables=variables,
            operation_identifier=compute_operation_identifier(query_document),
        )
