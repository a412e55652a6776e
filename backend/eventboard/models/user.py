"""User record — the organizer of events and the person behind a participant."""
from typing import Optional

from eventboard.models.base import Record


class User(Record):
    username: str
    email: Optional[str] = None
