"""Ordered, id-keyed collection of immutable records."""
from typing import Generic, Optional, TypeVar

from eventboard.errors import DuplicateRecordError, RecordNotFound
from eventboard.models.base import EntityType, Record

T = TypeVar("T", bound=Record)


class Collection(Generic[T]):
    """Insertion-ordered mapping of id -> record.

    Records are frozen pydantic models, so handing out the stored objects
    never exposes mutable state. `replace_at` keeps the record's position.
    """

    def __init__(self, entity: EntityType):
        self.entity = entity
        self._records: dict[str, T] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def list(self) -> tuple[T, ...]:
        return tuple(self._records.values())

    def find_by_id(self, record_id: str) -> Optional[T]:
        return self._records.get(record_id)

    def insert(self, record: T) -> T:
        if record.id in self._records:
            raise DuplicateRecordError(self.entity.label, record.id)
        self._records[record.id] = record
        return record

    def replace_at(self, record_id: str, record: T) -> T:
        if record_id not in self._records:
            raise RecordNotFound(self.entity.value, record_id)
        if record.id != record_id:
            raise ValueError(f"Cannot change id of {self.entity.value} {record_id} to {record.id}")
        # dict assignment to an existing key keeps its position
        self._records[record_id] = record
        return record

    def remove_by_id(self, record_id: str) -> Optional[T]:
        return self._records.pop(record_id, None)

    def remove_all(self) -> int:
        count = len(self._records)
        self._records.clear()
        return count
