"""Notice Routes: POST/GET /notices, PUT/DELETE /notices/{id}."""

from fastapi import APIRouter, Depends, status

from smart_transport.core.repository_protocols import DocumentStore
from smart_transport.infrastructure.database import get_store
from smart_transport.schemas.notice import NoticeCreate, NoticeUpdate
from smart_transport.services.handle_notices import NoticeHandlers

router = APIRouter(prefix="/notices", tags=["notices"])


def get_handlers(store: DocumentStore = Depends(get_store)) -> NoticeHandlers:
    return NoticeHandlers(store)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_notice(
    body: NoticeCreate, handlers: NoticeHandlers = Depends(get_handlers),
):
    return await handlers.create(body.model_dump())


@router.get("")
async def list_notices(handlers: NoticeHandlers = Depends(get_handlers)):
    """Notices, newest date first."""
    return await handlers.list_all()


@router.put("/{notice_id}")
async def update_notice(
    notice_id: str,
    body: NoticeUpdate,
    handlers: NoticeHandlers = Depends(get_handlers),
):
    return await handlers.update(notice_id, body.model_dump(exclude_unset=True))


@router.delete("/{notice_id}")
async def delete_notice(
    notice_id: str, handlers: NoticeHandlers = Depends(get_handlers),
):
    return await handlers.delete(notice_id)
