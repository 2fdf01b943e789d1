"""Transport Request Handlers: create, list, update, delete.

Invariants:
    - Creation requires studentId, name, reason, date, time, destination (non-empty)
    - Created requests are always "Pending"; only the strict six-field schema is stored
    - Listing is unordered (storage order)
"""

import logging
from collections.abc import Mapping
from typing import Any

from smart_transport.core.document_patch import build_transport_request
from smart_transport.core.domain_types import (
    TRANSPORT_REQUEST_PATCHABLE, TRANSPORT_REQUEST_REQUIRED, Collection,
)
from smart_transport.core.envelope import success_envelope
from smart_transport.core.validators import require_fields
from smart_transport.services.handle_documents import DocumentHandlers

logger = logging.getLogger(__name__)


class TransportRequestHandlers(DocumentHandlers):
    """Handlers for the transport_requests collection."""

    collection = Collection.TRANSPORT_REQUESTS
    resource_name = "Transport request"
    patchable = TRANSPORT_REQUEST_PATCHABLE
    required = TRANSPORT_REQUEST_REQUIRED

    async def create(self, payload: Mapping[str, Any]) -> dict:
        require_fields(payload, TRANSPORT_REQUEST_REQUIRED)
        document = build_transport_request(payload)

        request_id = await self.store.insert_one(self.collection, document)
        logger.info(
            f"Transport request created for student {document['studentId']}",
            extra={"collection": self.collection.value, "document_id": request_id},
        )
        return success_envelope(id=request_id)

    async def list_all(self) -> list[dict]:
        return await self.store.find_many(self.collection)
