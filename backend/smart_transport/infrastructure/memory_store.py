"""In-memory DocumentStore for development and tests.

Invariants:
    - Same contract as MongoDocumentStore: ObjectId identities, string ids out,
      equality filters, $set-style field updates, upsert by filter
    - Stored documents are copies; callers never alias internal state
    - No await inside a mutation, so each one is atomic on the event loop
    - Sort places documents missing the sort field last when descending, first when ascending
"""

from collections.abc import Mapping
from typing import Any

from bson import ObjectId

from smart_transport.core.domain_types import Collection, DocumentId, SortDirection
from smart_transport.core.repository_protocols import Filter, Sort, UpsertResult
from smart_transport.infrastructure.documents import (
    is_object_id, serialize_document, to_query,
)


def _matches(document: Mapping[str, Any], query: Mapping[str, Any]) -> bool:
    return all(
        key in document and document[key] == value
        for key, value in query.items()
    )


def _sort_key(field: str):
    def key(document: Mapping[str, Any]):
        value = document.get(field)
        return (value is not None, value if value is not None else "")
    return key


class InMemoryDocumentStore:
    """Simple in-memory document store."""

    def __init__(self):
        self.collections: dict[Collection, list[dict]] = {c: [] for c in Collection}

    def reset(self) -> None:
        """Clear all stored data (useful in tests)."""
        for documents in self.collections.values():
            documents.clear()

    def is_well_formed_id(self, value: str) -> bool:
        return is_object_id(value)

    async def ping(self) -> None:
        return None

    async def ensure_indexes(self) -> None:
        return None

    async def insert_one(
        self, collection: Collection, document: Mapping[str, Any],
    ) -> DocumentId:
        stored = dict(document)
        stored["_id"] = ObjectId()
        self.collections[collection].append(stored)
        return DocumentId(str(stored["_id"]))

    async def find_many(
        self,
        collection: Collection,
        filter: Filter | None = None,
        sort: Sort | None = None,
    ) -> list[dict]:
        query = to_query(filter)
        found = [d for d in self.collections[collection] if _matches(d, query)]
        # Stable multi-key sort: apply keys from least to most significant
        for field, direction in reversed(sort or []):
            found.sort(
                key=_sort_key(field),
                reverse=direction == SortDirection.DESCENDING,
            )
        return [serialize_document(d) for d in found]

    async def find_one(self, collection: Collection, filter: Filter) -> dict | None:
        query = to_query(filter)
        for document in self.collections[collection]:
            if _matches(document, query):
                return serialize_document(document)
        return None

    async def update_one(
        self, collection: Collection, filter: Filter, fields: Mapping[str, Any],
    ) -> int:
        query = to_query(filter)
        for document in self.collections[collection]:
            if _matches(document, query):
                document.update(fields)
                return 1
        return 0

    async def upsert_one(
        self, collection: Collection, filter: Filter, fields: Mapping[str, Any],
    ) -> UpsertResult:
        query = to_query(filter)
        for document in self.collections[collection]:
            if _matches(document, query):
                before = dict(document)
                document.update(fields)
                return UpsertResult(
                    matched_count=1,
                    modified_count=int(document != before),
                )
        stored = {**query, **fields}
        stored.setdefault("_id", ObjectId())
        self.collections[collection].append(stored)
        return UpsertResult(
            matched_count=0,
            modified_count=0,
            upserted_id=DocumentId(str(stored["_id"])),
        )

    async def delete_one(self, collection: Collection, filter: Filter) -> int:
        query = to_query(filter)
        documents = self.collections[collection]
        for index, document in enumerate(documents):
            if _matches(document, query):
                del documents[index]
                return 1
        return 0

    async def close(self) -> None:
        return None
