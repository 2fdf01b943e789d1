"""Document Builders: turn validated request payloads into stored documents and patches.

Invariants:
    - New transport requests always start in RequestStatus.PENDING, whatever the payload says
    - New notices get DEFAULT_NOTICE_PRIORITY when priority is absent or blank
    - Patches contain only allowed fields with non-None values; `_id` is never patchable
    - A patch may not blank a required field (same presence rule as creation)
    - User upserts never carry `role` unless the payload explicitly supplies one

Design Decisions:
    - Sparse patch as a plain mapping: the store applies each entry independently
      ($set semantics), fields absent from the mapping stay untouched
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from smart_transport.core.domain_types import (
    DEFAULT_NOTICE_PRIORITY,
    NOTICE_REQUIRED,
    TRANSPORT_REQUEST_REQUIRED,
    RequestStatus,
)
from smart_transport.core.errors import EmptyPatchError, MissingFieldsError
from smart_transport.core.validators import is_present


def build_patch(
    payload: Mapping[str, Any],
    allowed: tuple[str, ...],
    required: tuple[str, ...] = (),
) -> dict:
    """Sparse patch of the allowed fields actually supplied.

    Supplied required fields must still be present after the update;
    a blank string for one of them raises MissingFieldsError.
    """
    patch = {
        name: payload[name]
        for name in allowed
        if name != "_id" and payload.get(name) is not None
    }
    blanked = [
        name for name in required if name in patch and not is_present(patch[name])
    ]
    if blanked:
        raise MissingFieldsError(blanked)
    if not patch:
        raise EmptyPatchError(allowed)
    return patch


def build_transport_request(payload: Mapping[str, Any]) -> dict:
    document = {name: payload[name] for name in TRANSPORT_REQUEST_REQUIRED}
    document["status"] = RequestStatus.PENDING.value
    return document


def build_notice(payload: Mapping[str, Any]) -> dict:
    document = {name: payload[name] for name in NOTICE_REQUIRED}
    priority = payload.get("priority")
    document["priority"] = priority if is_present(priority) else DEFAULT_NOTICE_PRIORITY
    return document


def build_user_upsert(payload: Mapping[str, Any], now: datetime) -> dict:
    """Fields to $set on the user matched by email.

    name/email/photoURL/lastLogin are refreshed on every call; role only
    when the caller provides one, so a stored admin is never downgraded.
    """
    fields = {
        "name": payload.get("name"),
        "email": payload["email"],
        "photoURL": payload.get("photoURL"),
        "lastLogin": now,
    }
    role = payload.get("role")
    if role is not None:
        fields["role"] = role
    return fields
