"""Domain errors raised by the store and the mutation service."""


class EventboardError(Exception):
    """Base class for every error raised by the core."""


class RecordNotFound(EventboardError):
    """An update or delete referenced an id that is not in the collection."""

    def __init__(self, entity: str, record_id: str):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"Couldn't find {entity} with id {record_id}")


class DuplicateRecordError(EventboardError):
    """A record was inserted with an id already present in its collection."""

    def __init__(self, entity: str, record_id: str):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} with id {record_id} already exists")


class SeedDataError(EventboardError):
    """The seed file is missing or does not describe valid records."""
