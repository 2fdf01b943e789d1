"""Document Handlers: update-by-id and delete-by-id shared by id-keyed resources.

Invariants:
    - The id is checked with the store's is_well_formed_id before any storage call
    - A patch is built from the resource's patchable fields before any storage call
    - A patch that blanks one of the resource's required fields fails with 400
    - Zero matched / deleted documents → ResourceNotFoundError (404)
"""

import logging
from collections.abc import Mapping
from typing import Any

from smart_transport.core.document_patch import build_patch
from smart_transport.core.domain_types import Collection
from smart_transport.core.envelope import success_envelope
from smart_transport.core.errors import ResourceNotFoundError
from smart_transport.core.repository_protocols import DocumentStore
from smart_transport.core.validators import require_well_formed_id

logger = logging.getLogger(__name__)


class DocumentHandlers:
    """Base for resources addressed by a backend-generated id."""

    collection: Collection
    resource_name: str
    patchable: tuple[str, ...]
    required: tuple[str, ...] = ()

    def __init__(self, store: DocumentStore):
        self.store = store

    async def update(self, document_id: str, payload: Mapping[str, Any]) -> dict:
        """Apply a sparse patch to the document with this id."""
        require_well_formed_id(document_id, self.store.is_well_formed_id)
        patch = build_patch(payload, self.patchable, self.required)

        matched = await self.store.update_one(
            self.collection, {"_id": document_id}, patch,
        )
        if not matched:
            raise ResourceNotFoundError(self.resource_name, document_id)

        logger.info(
            f"{self.resource_name} updated: {sorted(patch)}",
            extra={"collection": self.collection.value, "document_id": document_id},
        )
        return success_envelope(message=f"{self.resource_name} updated successfully")

    async def delete(self, document_id: str) -> dict:
        require_well_formed_id(document_id, self.store.is_well_formed_id)

        deleted = await self.store.delete_one(self.collection, {"_id": document_id})
        if not deleted:
            raise ResourceNotFoundError(self.resource_name, document_id)

        logger.info(
            f"{self.resource_name} deleted",
            extra={"collection": self.collection.value, "document_id": document_id},
        )
        return success_envelope(message=f"{self.resource_name} deleted successfully")
