"""Boundary Protocols: the storage gateway contract between services and infrastructure.

Invariants:
    - Services only touch storage through DocumentStore
    - Every operation is single-document (except find_many) and atomic at the backend
    - Filters are equality mappings; an `_id` filter value is the string id
    - Returned documents carry `_id` as a string

Design Decisions:
    - Protocol over ABC: structural subtyping, Mongo and in-memory stores share no base class
    - is_well_formed_id lives on the store so the id syntax travels with the backend
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from smart_transport.core.domain_types import Collection, DocumentId, SortDirection


Filter = Mapping[str, Any]
Sort = list[tuple[str, SortDirection]]


@dataclass(frozen=True)
class UpsertResult:
    """Outcome of an upsert-by-natural-key."""
    matched_count: int
    modified_count: int
    upserted_id: DocumentId | None = None

    def as_dict(self) -> dict:
        return {
            "acknowledged": True,
            "matchedCount": self.matched_count,
            "modifiedCount": self.modified_count,
            "upsertedCount": 1 if self.upserted_id else 0,
            "upsertedId": self.upserted_id,
        }


class DocumentStore(Protocol):
    """Contract for document persistence - implemented by infrastructure."""

    def is_well_formed_id(self, value: str) -> bool: ...

    async def ping(self) -> None: ...

    async def ensure_indexes(self) -> None: ...

    async def insert_one(
        self, collection: Collection, document: Mapping[str, Any],
    ) -> DocumentId: ...

    async def find_many(
        self,
        collection: Collection,
        filter: Filter | None = None,
        sort: Sort | None = None,
    ) -> list[dict]: ...

    async def find_one(self, collection: Collection, filter: Filter) -> dict | None: ...

    async def update_one(
        self, collection: Collection, filter: Filter, fields: Mapping[str, Any],
    ) -> int: ...

    async def upsert_one(
        self, collection: Collection, filter: Filter, fields: Mapping[str, Any],
    ) -> UpsertResult: ...

    async def delete_one(self, collection: Collection, filter: Filter) -> int: ...

    async def close(self) -> None: ...
