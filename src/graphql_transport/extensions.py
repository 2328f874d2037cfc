"""Persisted-query extensions envelope sent with GET requests."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .constants import PERSISTED_QUERY_VERSION


class PersistedQuery(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: Literal[1] = PERSISTED_QUERY_VERSION
    sha256_hash: str = Field(alias="sha256Hash", min_length=1)


class Extensions(BaseModel):
    """``{"persistedQuery": {"version": 1, "sha256Hash": ...}}``"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    persisted_query: PersistedQuery = Field(alias="persistedQuery")

    @classmethod
    def for_identifier(cls, operation_identifier: str) -> "Extensions":
        return cls(persisted_query=PersistedQuery(sha256_hash=operation_identifier))

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
