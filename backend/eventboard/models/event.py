"""Event record.

`location_id` and `user_id` are foreign keys that are never validated;
`from_` / `to` are serialized as `from` / `to`.
"""
from typing import Optional

from pydantic import Field

from eventboard.models.base import Record


class Event(Record):
    title: str
    desc: str
    date: str
    from_: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None
    location_id: Optional[str] = None
    user_id: Optional[str] = None
