"""Record models for the four collections."""
from eventboard.models.base import EntityType, Record
from eventboard.models.event import Event
from eventboard.models.location import Location
from eventboard.models.participant import Participant
from eventboard.models.user import User

RECORD_TYPES: dict[EntityType, type[Record]] = {
    EntityType.user: User,
    EntityType.event: Event,
    EntityType.location: Location,
    EntityType.participant: Participant,
}

__all__ = ["EntityType", "Record", "Event", "Location", "Participant", "User", "RECORD_TYPES"]
