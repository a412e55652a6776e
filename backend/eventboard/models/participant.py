"""Participant record — one user's attendance at one event.

The same (event_id, user_id) pair may appear more than once.
"""
from eventboard.models.base import Record


class Participant(Record):
    event_id: str
    user_id: str
