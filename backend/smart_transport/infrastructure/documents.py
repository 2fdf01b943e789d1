"""BSON conversion helpers shared by the Mongo and in-memory stores."""

from collections.abc import Mapping
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId

from smart_transport.core.errors import MalformedIdentifierError
from smart_transport.core.repository_protocols import Filter


def is_object_id(value: str) -> bool:
    return isinstance(value, str) and ObjectId.is_valid(value)


def to_object_id(value: str) -> ObjectId:
    if not is_object_id(value):
        raise MalformedIdentifierError(str(value))
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise MalformedIdentifierError(str(value))


def to_query(filter: Filter | None) -> dict:
    """Copy a filter, converting a string `_id` to ObjectId."""
    query = dict(filter or {})
    if "_id" in query and not isinstance(query["_id"], ObjectId):
        query["_id"] = to_object_id(query["_id"])
    return query


def serialize_document(document: Mapping[str, Any]) -> dict:
    """Copy a stored document with `_id` rendered as a string."""
    serialized = dict(document)
    if isinstance(serialized.get("_id"), ObjectId):
        serialized["_id"] = str(serialized["_id"])
    return serialized
