"""Relationship resolution — derived fields computed by scanning collections.

No secondary indices are kept: every lookup is a linear scan of the related
collection. An unset or dangling foreign key resolves to None (or an empty
list for one-to-many relations) and never raises.
"""
from typing import Optional

from eventboard.models import Event, Location, Participant, User
from eventboard.store import Collection, EntityStore


def _find(collection: Collection, record_id: Optional[str]):
    if record_id is None:
        return None
    for record in collection.list():
        if record.id == record_id:
            return record
    return None


def resolve_event_location(store: EntityStore, event: Event) -> Optional[Location]:
    return _find(store.locations, event.location_id)


def resolve_event_user(store: EntityStore, event: Event) -> Optional[User]:
    """The organizer of `event`."""
    return _find(store.users, event.user_id)


def resolve_event_participants(store: EntityStore, event: Event) -> list[Participant]:
    return [p for p in store.participants.list() if p.event_id == event.id]


def resolve_user_events(store: EntityStore, user: User) -> list[Event]:
    """Events organized by `user`."""
    return [e for e in store.events.list() if e.user_id == user.id]


def resolve_participant_event(store: EntityStore, participant: Participant) -> Optional[Event]:
    return _find(store.events, participant.event_id)


def resolve_participant_user(store: EntityStore, participant: Participant) -> Optional[User]:
    return _find(store.users, participant.user_id)
