"""Mutation service — the only writer of the entity store.

Responsibilities:
- Generate ids for new records
- Merge partial patches over stored records (only supplied fields change)
- Publish <entity>Created / <entity>Updated / <entity>Deleted for every
  single-record write
- Raise RecordNotFound for updates and deletes of unknown ids

Foreign keys are stored as given and never checked; deletes never cascade.
Each write and its publish run without awaiting, so no subscriber can see a
change before it is readable from the store.
"""
import logging
import uuid
from typing import Any

from pydantic import BaseModel

from eventboard.errors import RecordNotFound
from eventboard.models import EntityType, Event, Location, Participant, Record, User
from eventboard.schemas.base import PatchModel
from eventboard.schemas.event import EventCreate, EventUpdate
from eventboard.schemas.location import LocationCreate, LocationUpdate
from eventboard.schemas.participant import ParticipantCreate, ParticipantUpdate
from eventboard.schemas.user import UserCreate, UserUpdate
from eventboard.services.change_notifier import ChangeNotifier, Operation, Topic
from eventboard.store import EntityStore

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return str(uuid.uuid4())


def _create(
    store: EntityStore,
    notifier: ChangeNotifier,
    entity: EntityType,
    record_type: type[Record],
    payload: BaseModel,
) -> Any:
    record = record_type(id=_new_id(), **payload.model_dump())
    store.collection(entity).insert(record)
    notifier.publish(Topic.for_(entity, Operation.created), record)
    logger.info("Created %s %s", entity.value, record.id)
    return record


def _update(
    store: EntityStore,
    notifier: ChangeNotifier,
    entity: EntityType,
    payload: PatchModel,
) -> Any:
    collection = store.collection(entity)
    existing = collection.find_by_id(payload.id)
    if existing is None:
        raise RecordNotFound(entity.value, payload.id)

    changes = payload.changes()
    merged = existing.model_copy(update=changes)
    collection.replace_at(existing.id, merged)
    notifier.publish(Topic.for_(entity, Operation.updated), merged)
    logger.info("Updated %s %s (%s)", entity.value, existing.id, ", ".join(sorted(changes)) or "no fields")
    return merged


def _delete_one(
    store: EntityStore,
    notifier: ChangeNotifier,
    entity: EntityType,
    record_id: str,
) -> Any:
    removed = store.collection(entity).remove_by_id(record_id)
    if removed is None:
        raise RecordNotFound(entity.value, record_id)
    notifier.publish(Topic.for_(entity, Operation.deleted), removed)
    logger.info("Deleted %s %s", entity.value, record_id)
    return removed


def _delete_all(store: EntityStore, entity: EntityType) -> int:
    count = store.collection(entity).remove_all()
    logger.info("Deleted all %d %s records", count, entity.value)
    return count


# ── Users ──────────────────────────────────────────────────────────

def create_user(store: EntityStore, notifier: ChangeNotifier, payload: UserCreate) -> User:
    return _create(store, notifier, EntityType.user, User, payload)


def update_user(store: EntityStore, notifier: ChangeNotifier, payload: UserUpdate) -> User:
    return _update(store, notifier, EntityType.user, payload)


def delete_user(store: EntityStore, notifier: ChangeNotifier, user_id: str) -> User:
    """Remove a user. Events and participants pointing at it are left in place."""
    return _delete_one(store, notifier, EntityType.user, user_id)


def delete_all_users(store: EntityStore) -> int:
    return _delete_all(store, EntityType.user)


# ── Events ─────────────────────────────────────────────────────────

def create_event(store: EntityStore, notifier: ChangeNotifier, payload: EventCreate) -> Event:
    return _create(store, notifier, EntityType.event, Event, payload)


def update_event(store: EntityStore, notifier: ChangeNotifier, payload: EventUpdate) -> Event:
    return _update(store, notifier, EntityType.event, payload)


def delete_event(store: EntityStore, notifier: ChangeNotifier, event_id: str) -> Event:
    """Remove an event. Its participants are left in place."""
    return _delete_one(store, notifier, EntityType.event, event_id)


def delete_all_events(store: EntityStore) -> int:
    return _delete_all(store, EntityType.event)


# ── Locations ──────────────────────────────────────────────────────

def create_location(store: EntityStore, notifier: ChangeNotifier, payload: LocationCreate) -> Location:
    return _create(store, notifier, EntityType.location, Location, payload)


def update_location(store: EntityStore, notifier: ChangeNotifier, payload: LocationUpdate) -> Location:
    return _update(store, notifier, EntityType.location, payload)


def delete_location(store: EntityStore, notifier: ChangeNotifier, location_id: str) -> Location:
    return _delete_one(store, notifier, EntityType.location, location_id)


def delete_all_locations(store: EntityStore) -> int:
    return _delete_all(store, EntityType.location)


# ── Participants ───────────────────────────────────────────────────

def create_participant(store: EntityStore, notifier: ChangeNotifier, payload: ParticipantCreate) -> Participant:
    """Register attendance. Duplicate (event_id, user_id) pairs are accepted."""
    return _create(store, notifier, EntityType.participant, Participant, payload)


def update_participant(store: EntityStore, notifier: ChangeNotifier, payload: ParticipantUpdate) -> Participant:
    return _update(store, notifier, EntityType.participant, payload)


def delete_participant(store: EntityStore, notifier: ChangeNotifier, participant_id: str) -> Participant:
    return _delete_one(store, notifier, EntityType.participant, participant_id)


def delete_all_participants(store: EntityStore) -> int:
    return _delete_all(store, EntityType.participant)
