"""Domain Types: collection names, lifecycle enums, and the resource field sets.

Invariants:
    - Collection names are the persisted MongoDB collection names
    - RequestStatus.PENDING is the only status a new transport request can have
    - Required-field tuples are ordered as clients send them (error messages list them in order)

Design Decisions:
    - str Enums: serialize to JSON and BSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

DocumentId = NewType("DocumentId", str)     # 24-hex ObjectId rendering


# ─── Enums ───────────────────────────────────────────────────────

class Collection(str, Enum):
    """The three document collections of the service."""
    TRANSPORT_REQUESTS = "transport_requests"
    USERS = "users"
    NOTICES = "notices"


class RequestStatus(str, Enum):
    """Transport request review states."""
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"


class StorageState(str, Enum):
    """Storage gateway lifecycle - requests are served only in READY."""
    CONNECTING = "CONNECTING"
    READY = "READY"
    FAILED = "FAILED"


class SortDirection(int, Enum):
    ASCENDING = 1
    DESCENDING = -1


# ─── Field Sets ──────────────────────────────────────────────────

TRANSPORT_REQUEST_REQUIRED = (
    "studentId", "name", "reason", "date", "time", "destination",
)
TRANSPORT_REQUEST_PATCHABLE = TRANSPORT_REQUEST_REQUIRED + ("status",)

NOTICE_REQUIRED = ("title", "content", "date", "time", "author", "category")
NOTICE_PATCHABLE = NOTICE_REQUIRED + ("priority",)
DEFAULT_NOTICE_PRIORITY = "normal"

USER_REQUIRED = ("email",)
