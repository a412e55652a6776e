"""Location record."""
from typing import Optional

from eventboard.models.base import Record


class Location(Record):
    name: str
    desc: str
    lat: Optional[float] = None
    lng: Optional[float] = None
