"""User Routes: POST/GET /users, GET /users/{email}, PUT /users/admin/{id}.

Invariants:
    - POST is an upsert keyed on email and answers 200 (not 201) with the upsert result
    - GET /users/{email} answers {success, user} or 404
    - There is no DELETE route for users
"""

from fastapi import APIRouter, Depends

from smart_transport.core.repository_protocols import DocumentStore
from smart_transport.infrastructure.database import get_store
from smart_transport.schemas.user import UserUpsert
from smart_transport.services.handle_users import UserHandlers

router = APIRouter(prefix="/users", tags=["users"])


def get_handlers(store: DocumentStore = Depends(get_store)) -> UserHandlers:
    return UserHandlers(store)


@router.post("")
async def upsert_user(
    body: UserUpsert, handlers: UserHandlers = Depends(get_handlers),
):
    """Create or refresh a user by email (login sync)."""
    return await handlers.upsert(body.model_dump())


@router.get("")
async def list_users(handlers: UserHandlers = Depends(get_handlers)):
    return await handlers.list_all()


@router.get("/{email}")
async def get_user(email: str, handlers: UserHandlers = Depends(get_handlers)):
    return await handlers.get_by_email(email)


@router.put("/admin/{user_id}")
async def make_admin(user_id: str, handlers: UserHandlers = Depends(get_handlers)):
    """Set role="admin" on the user with this id."""
    return await handlers.promote_to_admin(user_id)
