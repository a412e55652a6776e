"""Pydantic schemas for Participants."""
from typing import ClassVar, Optional

from pydantic import BaseModel

from eventboard.schemas.base import PatchModel


class ParticipantCreate(BaseModel):
    event_id: str
    user_id: str


class ParticipantPatch(PatchModel):
    non_nullable: ClassVar[tuple[str, ...]] = ("event_id", "user_id")

    event_id: Optional[str] = None
    user_id: Optional[str] = None


class ParticipantUpdate(ParticipantPatch):
    id: str
