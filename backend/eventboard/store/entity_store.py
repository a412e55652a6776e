"""Process-wide store holding the four collections."""
import logging
from typing import Optional

from eventboard.models import EntityType, Event, Location, Participant, User
from eventboard.store.collection import Collection

logger = logging.getLogger(__name__)


class EntityStore:
    """Owns the Events, Locations, Users and Participants collections.

    Never validates foreign keys and never publishes changes; both are the
    mutation service's concern.
    """

    def __init__(self):
        self.events: Collection[Event] = Collection(EntityType.event)
        self.locations: Collection[Location] = Collection(EntityType.location)
        self.users: Collection[User] = Collection(EntityType.user)
        self.participants: Collection[Participant] = Collection(EntityType.participant)

    def collection(self, entity: EntityType) -> Collection:
        return {
            EntityType.event: self.events,
            EntityType.location: self.locations,
            EntityType.user: self.users,
            EntityType.participant: self.participants,
        }[entity]

    def counts(self) -> dict[str, int]:
        return {entity.value: len(self.collection(entity)) for entity in EntityType}

    def clear(self) -> None:
        for entity in EntityType:
            self.collection(entity).remove_all()


_store: Optional[EntityStore] = None


def open_store() -> EntityStore:
    """Construct the process-wide store. Calling it again returns the same one."""
    global _store
    if _store is None:
        _store = EntityStore()
        logger.info("Entity store opened")
    return _store


def close_store() -> None:
    """Drop every record and release the process-wide store."""
    global _store
    if _store is not None:
        _store.clear()
        _store = None
        logger.info("Entity store closed")


def get_store() -> EntityStore:
    """FastAPI dependency — the open store."""
    if _store is None:
        raise RuntimeError("Entity store is not open")
    return _store
