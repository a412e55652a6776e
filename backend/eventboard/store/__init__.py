"""In-memory entity store."""
from eventboard.store.collection import Collection
from eventboard.store.entity_store import EntityStore, open_store, close_store, get_store

__all__ = ["Collection", "EntityStore", "open_store", "close_store", "get_store"]
