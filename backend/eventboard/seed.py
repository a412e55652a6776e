"""Seed loader — fills the store from a JSON file at startup.

The file is a JSON object with optional `events`, `locations`, `users` and
`participants` arrays. Records keep the ids they are given, are inserted in
file order, and are not announced to subscribers.
"""
import json
import logging
from pathlib import Path
from typing import Any, Union

from pydantic import ValidationError

from eventboard.errors import DuplicateRecordError, SeedDataError
from eventboard.models import RECORD_TYPES, EntityType
from eventboard.store import EntityStore

logger = logging.getLogger(__name__)

# JSON key for each collection
SEED_KEYS = {
    "users": EntityType.user,
    "locations": EntityType.location,
    "events": EntityType.event,
    "participants": EntityType.participant,
}


def load_seed_data(store: EntityStore, data: dict[str, Any]) -> dict[str, int]:
    """Insert every record described by `data`; returns counts per collection key."""
    if not isinstance(data, dict):
        raise SeedDataError("Seed data must be a JSON object")

    unknown = set(data) - set(SEED_KEYS)
    if unknown:
        raise SeedDataError(f"Unknown seed collections: {', '.join(sorted(unknown))}")

    counts: dict[str, int] = {}
    for key, entity in SEED_KEYS.items():
        items = data.get(key, [])
        if not isinstance(items, list):
            raise SeedDataError(f"Seed collection '{key}' must be a list")
        record_type = RECORD_TYPES[entity]
        collection = store.collection(entity)
        for index, item in enumerate(items):
            try:
                record = record_type.model_validate(item)
                collection.insert(record)
            except (ValidationError, DuplicateRecordError) as exc:
                raise SeedDataError(f"Invalid {key}[{index}]: {exc}") from exc
        counts[key] = len(items)
    return counts


def load_seed_file(store: EntityStore, path: Union[str, Path]) -> dict[str, int]:
    """Read `path` and load it into `store`."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise SeedDataError(f"Seed file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise SeedDataError(f"Seed file {path} is not valid JSON: {exc}") from exc

    counts = load_seed_data(store, data)
    logger.info(
        "Seeded store from %s: %s",
        path, ", ".join(f"{n} {key}" for key, n in counts.items()),
    )
    return counts
