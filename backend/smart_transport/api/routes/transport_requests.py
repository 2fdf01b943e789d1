"""Transport Request Routes: POST/GET /transport_requests, PUT/DELETE /transport_requests/{id}.

Invariants:
    - POST answers 201 {success, id}; GET answers 200 with a bare document array
    - PUT/DELETE answer 200 {success, message}, 404 when no document matched, 400 for a malformed id
"""

from fastapi import APIRouter, Depends, status

from smart_transport.core.repository_protocols import DocumentStore
from smart_transport.infrastructure.database import get_store
from smart_transport.schemas.transport_request import (
    TransportRequestCreate, TransportRequestUpdate,
)
from smart_transport.services.handle_transport_requests import TransportRequestHandlers

router = APIRouter(prefix="/transport_requests", tags=["transport_requests"])


def get_handlers(store: DocumentStore = Depends(get_store)) -> TransportRequestHandlers:
    return TransportRequestHandlers(store)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_transport_request(
    body: TransportRequestCreate,
    handlers: TransportRequestHandlers = Depends(get_handlers),
):
    """Create a transport request in "Pending" state."""
    return await handlers.create(body.model_dump())


@router.get("")
async def list_transport_requests(
    handlers: TransportRequestHandlers = Depends(get_handlers),
):
    return await handlers.list_all()


@router.put("/{request_id}")
async def update_transport_request(
    request_id: str,
    body: TransportRequestUpdate,
    handlers: TransportRequestHandlers = Depends(get_handlers),
):
    """Merge the supplied fields into the stored request."""
    return await handlers.update(request_id, body.model_dump(exclude_unset=True))


@router.delete("/{request_id}")
async def delete_transport_request(
    request_id: str,
    handlers: TransportRequestHandlers = Depends(get_handlers),
):
    return await handlers.delete(request_id)
