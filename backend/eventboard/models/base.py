"""Shared base for stored records."""
import enum

from pydantic import BaseModel, ConfigDict


class EntityType(str, enum.Enum):
    user = "user"
    event = "event"
    location = "location"
    participant = "participant"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Record(BaseModel):
    """An immutable stored record. Updates produce a merged copy."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
