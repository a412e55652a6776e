"""Pydantic schemas for Events.

`from` is a Python keyword, so the field is `from_` with the wire alias `from`.
"""
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

from eventboard.schemas.base import PatchModel


class EventCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    desc: str
    date: str
    from_: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None
    location_id: Optional[str] = None
    user_id: Optional[str] = None


class EventPatch(PatchModel):
    non_nullable: ClassVar[tuple[str, ...]] = ("title", "desc", "date")

    title: Optional[str] = None
    desc: Optional[str] = None
    date: Optional[str] = None
    from_: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None
    location_id: Optional[str] = None
    user_id: Optional[str] = None


class EventUpdate(EventPatch):
    id: str
