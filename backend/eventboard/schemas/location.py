"""Pydantic schemas for Locations."""
from typing import ClassVar, Optional

from pydantic import BaseModel

from eventboard.schemas.base import PatchModel


class LocationCreate(BaseModel):
    name: str
    desc: str
    lat: Optional[float] = None
    lng: Optional[float] = None


class LocationPatch(PatchModel):
    non_nullable: ClassVar[tuple[str, ...]] = ("name", "desc")

    name: Optional[str] = None
    desc: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None


class LocationUpdate(LocationPatch):
    id: str
