"""Request schemas: optional fields, extra-field dropping, number coercion, role values."""

import pytest
from pydantic import ValidationError

from smart_transport.schemas.notice import NoticeUpdate
from smart_transport.schemas.transport_request import (
    TransportRequestCreate, TransportRequestUpdate,
)
from smart_transport.schemas.user import UserUpsert


def test_transport_request_fields_default_to_none():
    assert TransportRequestCreate().model_dump() == {
        "studentId": None, "name": None, "reason": None,
        "date": None, "time": None, "destination": None,
    }


def test_transport_request_drops_unknown_fields():
    body = TransportRequestCreate.model_validate({"name": "A", "busName": "B"})
    assert "busName" not in body.model_dump()


def test_transport_request_coerces_numbers():
    assert TransportRequestCreate(studentId=221).studentId == "221"


def test_update_dump_contains_only_sent_fields():
    body = TransportRequestUpdate.model_validate({"status": "Approved"})
    assert body.model_dump(exclude_unset=True) == {"status": "Approved"}


def test_notice_update_accepts_priority():
    body = NoticeUpdate.model_validate({"priority": "high"})
    assert body.model_dump(exclude_unset=True) == {"priority": "high"}


def test_user_role_restricted_to_user_or_admin():
    assert UserUpsert(email="a@diu.edu", role="admin").role == "admin"
    with pytest.raises(ValidationError):
        UserUpsert(email="a@diu.edu", role="superuser")


def test_user_role_optional():
    assert UserUpsert(email="a@diu.edu").role is None
