"""Notice Schemas: request bodies for create and partial update."""

from pydantic import BaseModel, ConfigDict


class NoticeCreate(BaseModel):
    """Body of POST /notices. priority falls back to "normal" when omitted."""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    title: str | None = None
    content: str | None = None
    date: str | None = None
    time: str | None = None
    author: str | None = None
    category: str | None = None
    priority: str | None = None


class NoticeUpdate(NoticeCreate):
    """Body of PUT /notices/{id} - a sparse patch."""
