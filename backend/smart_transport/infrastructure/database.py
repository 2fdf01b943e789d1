"""MongoDB Gateway & Storage Lifecycle: async document store with explicit ready state.

Invariants:
    - Every PyMongoError is mapped to StorageError (core/errors.py); driver text is only logged
    - A client that cannot be configured (bad URI) is a StorageError too, so startup ends FAILED
    - String ids are converted to ObjectId at this boundary, and back to str on the way out
    - get_store() hands out the store only in StorageState.READY, else StorageNotReadyError (503)
    - No retries: a failed operation is surfaced once

Design Decisions:
    - Singleton storage_manager initialized by the FastAPI lifespan, closed on shutdown
    - Stable API v1 (strict) on the client, matching the reference deployment
"""

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from smart_transport.config import Settings
from smart_transport.core.domain_types import (
    Collection, DocumentId, StorageState,
)
from smart_transport.core.errors import StorageError, StorageNotReadyError
from smart_transport.core.repository_protocols import (
    DocumentStore, Filter, Sort, UpsertResult,
)
from smart_transport.infrastructure.documents import (
    is_object_id, serialize_document, to_query,
)
from smart_transport.infrastructure.memory_store import InMemoryDocumentStore

logger = logging.getLogger(__name__)


# ─── Gateway ─────────────────────────────────────────────────────

class MongoDocumentStore:
    """DocumentStore over one MongoDB database."""

    def __init__(
        self,
        uri: str,
        db_name: str,
        server_selection_timeout_ms: int = 5000,
        max_pool_size: int = 100,
    ):
        self.client = AsyncMongoClient(
            uri,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
            serverSelectionTimeoutMS=server_selection_timeout_ms,
            maxPoolSize=max_pool_size,
            tz_aware=True,
        )
        self.db = self.client[db_name]

    @contextmanager
    def _guard(self, operation: str, collection: str) -> Iterator[None]:
        try:
            yield
        except PyMongoError as e:
            logger.error(
                f"MongoDB {operation} failed: {e}",
                extra={"operation": operation, "collection": collection},
            )
            raise StorageError(operation, collection) from e

    def is_well_formed_id(self, value: str) -> bool:
        return is_object_id(value)

    async def ping(self) -> None:
        with self._guard("ping", "admin"):
            await self.client.admin.command("ping")

    async def ensure_indexes(self) -> None:
        """Unique index on users.email, the natural key of the upsert."""
        users = Collection.USERS.value
        with self._guard("create_index", users):
            await self.db[users].create_index("email", unique=True)

    async def insert_one(
        self, collection: Collection, document: Mapping[str, Any],
    ) -> DocumentId:
        with self._guard("insert_one", collection.value):
            result = await self.db[collection.value].insert_one(dict(document))
        return DocumentId(str(result.inserted_id))

    async def find_many(
        self,
        collection: Collection,
        filter: Filter | None = None,
        sort: Sort | None = None,
    ) -> list[dict]:
        with self._guard("find", collection.value):
            cursor = self.db[collection.value].find(to_query(filter))
            if sort:
                cursor = cursor.sort(
                    [(field, int(direction)) for field, direction in sort],
                )
            documents = await cursor.to_list()
        return [serialize_document(d) for d in documents]

    async def find_one(self, collection: Collection, filter: Filter) -> dict | None:
        with self._guard("find_one", collection.value):
            document = await self.db[collection.value].find_one(to_query(filter))
        return serialize_document(document) if document else None

    async def update_one(
        self, collection: Collection, filter: Filter, fields: Mapping[str, Any],
    ) -> int:
        with self._guard("update_one", collection.value):
            result = await self.db[collection.value].update_one(
                to_query(filter), {"$set": dict(fields)},
            )
        return result.matched_count

    async def upsert_one(
        self, collection: Collection, filter: Filter, fields: Mapping[str, Any],
    ) -> UpsertResult:
        with self._guard("upsert_one", collection.value):
            result = await self.db[collection.value].update_one(
                to_query(filter), {"$set": dict(fields)}, upsert=True,
            )
        return UpsertResult(
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_id=(
                DocumentId(str(result.upserted_id))
                if result.upserted_id is not None else None
            ),
        )

    async def delete_one(self, collection: Collection, filter: Filter) -> int:
        with self._guard("delete_one", collection.value):
            result = await self.db[collection.value].delete_one(to_query(filter))
        return result.deleted_count

    async def close(self) -> None:
        await self.client.close()


# ─── Lifecycle ───────────────────────────────────────────────────

class StorageManager:
    """Owns the store and its Connecting → Ready | Failed state."""

    def __init__(self, store: DocumentStore | None = None):
        self.store = store
        self.state = StorageState.CONNECTING

    async def connect(self) -> None:
        """Ping once, then ensure indexes; READY on success, FAILED (and re-raise) otherwise."""
        self.state = StorageState.CONNECTING
        try:
            await self.store.ping()
            await self.store.ensure_indexes()
        except StorageError:
            self.state = StorageState.FAILED
            logger.error(
                "Storage connection failed",
                extra={"storage_state": self.state.value},
            )
            raise
        self.state = StorageState.READY
        logger.info(
            "Storage connected", extra={"storage_state": self.state.value},
        )

    async def health_check(self) -> bool:
        """Check storage connectivity (for the readiness endpoint)."""
        if self.state != StorageState.READY:
            return False
        try:
            await self.store.ping()
            return True
        except StorageError as e:
            logger.error(f"Storage health check failed: {e}")
            return False

    async def close(self) -> None:
        if self.store is not None:
            await self.store.close()


def build_store(settings: Settings) -> DocumentStore:
    if settings.use_in_memory_store:
        return InMemoryDocumentStore()
    try:
        return MongoDocumentStore(
            settings.mongo_connection_uri,
            settings.db_name,
            server_selection_timeout_ms=settings.mongo_server_selection_timeout_ms,
            max_pool_size=settings.mongo_max_pool_size,
        )
    except (PyMongoError, ValueError) as e:
        logger.error(f"Invalid MongoDB configuration: {e}")
        raise StorageError("configure", "client") from e


# Singleton (initialized on startup)
storage_manager: StorageManager | None = None


async def init_storage(settings: Settings) -> StorageManager:
    """Build the store and connect it.

    With storage_fail_fast a build or connect error propagates (the lifespan
    aborts and the process exits non-zero); otherwise the manager stays
    FAILED and data routes answer 503.
    """
    global storage_manager
    storage_manager = StorageManager()
    try:
        storage_manager.store = build_store(settings)
        await storage_manager.connect()
    except StorageError:
        storage_manager.state = StorageState.FAILED
        if settings.storage_fail_fast:
            raise
    return storage_manager


async def close_storage() -> None:
    global storage_manager
    if storage_manager is not None:
        await storage_manager.close()
        logger.info("Storage connection closed")
        storage_manager = None


def get_store() -> DocumentStore:
    """FastAPI dependency for the document store."""
    if storage_manager is None:
        raise StorageNotReadyError(StorageState.CONNECTING.value)
    if storage_manager.state != StorageState.READY:
        raise StorageNotReadyError(storage_manager.state.value)
    return storage_manager.store
