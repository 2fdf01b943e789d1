"""User Handlers: upsert by email, list, lookup by email, promote to admin.

Invariants:
    - Upsert is one storage call keyed on email; lastLogin is refreshed every time
    - role is written only when supplied, so an admin is never downgraded by a login refresh
    - Promotion sets role="admin" unconditionally, whatever the prior role
    - Users are never deleted
"""

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from smart_transport.core.document_patch import build_user_upsert
from smart_transport.core.domain_types import USER_REQUIRED, Collection, UserRole
from smart_transport.core.envelope import success_envelope
from smart_transport.core.errors import ResourceNotFoundError
from smart_transport.core.repository_protocols import DocumentStore
from smart_transport.core.validators import require_fields, require_well_formed_id

logger = logging.getLogger(__name__)


class UserHandlers:
    """Handlers for the users collection."""

    collection = Collection.USERS

    def __init__(self, store: DocumentStore):
        self.store = store

    async def upsert(
        self, payload: Mapping[str, Any], now: datetime | None = None,
    ) -> dict:
        """Create or refresh the user matched by email."""
        require_fields(payload, USER_REQUIRED)
        fields = build_user_upsert(payload, now or datetime.now(timezone.utc))

        result = await self.store.upsert_one(
            self.collection, {"email": fields["email"]}, fields,
        )
        created = result.upserted_id is not None
        logger.info(
            f"User {'created' if created else 'refreshed'}",
            extra={
                "collection": self.collection.value,
                "document_id": result.upserted_id,
            },
        )
        return success_envelope(
            message="User created successfully" if created else "User updated successfully",
            result=result.as_dict(),
        )

    async def list_all(self) -> list[dict]:
        return await self.store.find_many(self.collection)

    async def get_by_email(self, email: str) -> dict:
        user = await self.store.find_one(self.collection, {"email": email})
        if user is None:
            raise ResourceNotFoundError("User", email)
        return success_envelope(user=user)

    async def promote_to_admin(self, user_id: str) -> dict:
        require_well_formed_id(user_id, self.store.is_well_formed_id)

        matched = await self.store.update_one(
            self.collection, {"_id": user_id}, {"role": UserRole.ADMIN.value},
        )
        if not matched:
            raise ResourceNotFoundError("User", user_id)

        logger.info(
            "User promoted to admin",
            extra={"collection": self.collection.value, "document_id": user_id},
        )
        return success_envelope(message="User promoted to admin")
