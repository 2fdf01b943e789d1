"""Document Builders: new documents, sparse patches, and user upsert fields.

Tests:
    - Transport requests are forced to Pending and keep only the six schema fields
    - Notices default priority to "normal"
    - Patches keep allowed non-None fields only and reject empty results
    - Patches may not blank a required field
    - User upserts carry role only when supplied
"""

from datetime import datetime, timezone

import pytest

from smart_transport.core.document_patch import (
    build_notice, build_patch, build_transport_request, build_user_upsert,
)
from smart_transport.core.domain_types import (
    NOTICE_PATCHABLE, NOTICE_REQUIRED,
    TRANSPORT_REQUEST_PATCHABLE, TRANSPORT_REQUEST_REQUIRED,
)
from smart_transport.core.errors import EmptyPatchError, MissingFieldsError

NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def _trip(**overrides):
    payload = {
        "studentId": "S1", "name": "A", "reason": "trip",
        "date": "2024-01-01", "time": "10:00", "destination": "Campus2",
    }
    payload.update(overrides)
    return payload


def test_transport_request_status_forced_to_pending():
    document = build_transport_request(_trip(status="Approved"))
    assert document["status"] == "Pending"


def test_transport_request_drops_unknown_fields():
    document = build_transport_request(_trip(userEmail="x@y.z", busName="B"))
    assert set(document) == {
        "studentId", "name", "reason", "date", "time", "destination", "status",
    }


def test_notice_priority_defaults_to_normal():
    payload = {
        "title": "t", "content": "c", "date": "d", "time": "t",
        "author": "a", "category": "c",
    }
    assert build_notice(payload)["priority"] == "normal"
    assert build_notice({**payload, "priority": " "})["priority"] == "normal"
    assert build_notice({**payload, "priority": "high"})["priority"] == "high"


def test_patch_keeps_only_allowed_supplied_fields():
    patch = build_patch(
        {"status": "Approved", "reason": None, "_id": "x", "extra": 1},
        TRANSPORT_REQUEST_PATCHABLE,
    )
    assert patch == {"status": "Approved"}


def test_patch_with_no_allowed_fields_raises():
    with pytest.raises(EmptyPatchError) as exc_info:
        build_patch({"unknown": "value"}, NOTICE_PATCHABLE)
    assert exc_info.value.http_status == 400


def test_patch_rejects_blank_required_fields():
    with pytest.raises(MissingFieldsError) as exc_info:
        build_patch(
            {"name": "  ", "studentId": "", "status": "Approved"},
            TRANSPORT_REQUEST_PATCHABLE,
            TRANSPORT_REQUEST_REQUIRED,
        )
    assert exc_info.value.missing == ["studentId", "name"]
    assert exc_info.value.http_status == 400


def test_patch_allows_blank_optional_field():
    patch = build_patch(
        {"priority": "", "title": "New"}, NOTICE_PATCHABLE, NOTICE_REQUIRED,
    )
    assert patch == {"priority": "", "title": "New"}


def test_user_upsert_sets_login_fields():
    fields = build_user_upsert(
        {"email": "a@b.c", "name": "A", "photoURL": "http://p"}, NOW,
    )
    assert fields == {
        "name": "A", "email": "a@b.c", "photoURL": "http://p", "lastLogin": NOW,
    }


def test_user_upsert_omits_role_when_not_supplied():
    assert "role" not in build_user_upsert({"email": "a@b.c", "role": None}, NOW)


def test_user_upsert_carries_supplied_role():
    assert build_user_upsert({"email": "a@b.c", "role": "admin"}, NOW)["role"] == "admin"
