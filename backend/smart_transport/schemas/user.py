"""User Schemas: request body for the upsert-by-email endpoint.

Invariants:
    - role, when present, is exactly "user" or "admin"
    - Omitting role never clears a stored role (see core/document_patch.build_user_upsert)
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class UserUpsert(BaseModel):
    """Body of POST /users."""
    model_config = ConfigDict(extra="ignore")

    email: str | None = None
    name: str | None = None
    photoURL: str | None = None
    role: Literal["user", "admin"] | None = None
