"""Transport Request Schemas: request bodies for create and partial update.

Invariants:
    - Every field is optional at the schema level; presence is checked by core/validators.py
      so a missing field yields the MISSING_FIELDS envelope, not a type error
    - Unknown body fields are dropped (extra="ignore"), clients cannot smuggle fields into storage
    - Numbers are accepted for string fields and coerced to str
"""

from pydantic import BaseModel, ConfigDict


class TransportRequestCreate(BaseModel):
    """Body of POST /transport_requests."""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    studentId: str | None = None
    name: str | None = None
    reason: str | None = None
    date: str | None = None
    time: str | None = None
    destination: str | None = None


class TransportRequestUpdate(TransportRequestCreate):
    """Body of PUT /transport_requests/{id} - a sparse patch, status included."""
    status: str | None = None
