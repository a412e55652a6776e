"""Pydantic schemas for Users."""
from typing import ClassVar, Optional

from pydantic import BaseModel

from eventboard.schemas.base import PatchModel


class UserCreate(BaseModel):
    username: str
    email: Optional[str] = None


class UserPatch(PatchModel):
    non_nullable: ClassVar[tuple[str, ...]] = ("username",)

    username: Optional[str] = None
    email: Optional[str] = None


class UserUpdate(UserPatch):
    id: str
