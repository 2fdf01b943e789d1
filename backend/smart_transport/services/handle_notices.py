"""Notice Handlers: create, list (newest date first), update, delete."""

import logging
from collections.abc import Mapping
from typing import Any

from smart_transport.core.document_patch import build_notice
from smart_transport.core.domain_types import (
    NOTICE_PATCHABLE, NOTICE_REQUIRED, Collection, SortDirection,
)
from smart_transport.core.envelope import success_envelope
from smart_transport.core.validators import require_fields
from smart_transport.services.handle_documents import DocumentHandlers

logger = logging.getLogger(__name__)


class NoticeHandlers(DocumentHandlers):
    """Handlers for the notices collection."""

    collection = Collection.NOTICES
    resource_name = "Notice"
    patchable = NOTICE_PATCHABLE
    required = NOTICE_REQUIRED

    async def create(self, payload: Mapping[str, Any]) -> dict:
        require_fields(payload, NOTICE_REQUIRED)
        document = build_notice(payload)

        notice_id = await self.store.insert_one(self.collection, document)
        logger.info(
            f"Notice created: {document['title']}",
            extra={"collection": self.collection.value, "document_id": notice_id},
        )
        return success_envelope(noticeId=notice_id)

    async def list_all(self) -> list[dict]:
        """All notices sorted by date, newest first."""
        return await self.store.find_many(
            self.collection, sort=[("date", SortDirection.DESCENDING)],
        )
