"""Event API routes, including the event's location, organizer and participants."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from eventboard.models import Event, Location, Participant, User
from eventboard.schemas.event import EventCreate, EventPatch, EventUpdate
from eventboard.services import mutation_service, relationship_service
from eventboard.services.change_notifier import ChangeNotifier, get_notifier
from eventboard.store import EntityStore, get_store

logger = logging.getLogger(__name__)
router = APIRouter()


def _get_event_or_404(store: EntityStore, event_id: str) -> Event:
    event = store.events.find_by_id(event_id)
    if event is None:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


@router.post("/", response_model=Event, status_code=status.HTTP_201_CREATED)
async def create_event(
    payload: EventCreate,
    store: EntityStore = Depends(get_store),
    notifier: ChangeNotifier = Depends(get_notifier),
):
    """Create an event. location_id and user_id are stored without checks."""
    return mutation_service.create_event(store, notifier, payload)


@router.get("/", response_model=list[Event])
async def list_events(store: EntityStore = Depends(get_store)):
    """List all events in insertion order."""
    return store.events.list()


@router.delete("/")
async def delete_all_events(store: EntityStore = Depends(get_store)):
    return {"deleted": mutation_service.delete_all_events(store)}


@router.get("/{event_id}", response_model=Event)
async def get_event(event_id: str, store: EntityStore = Depends(get_store)):
    """Fetch a single event by ID."""
    return _get_event_or_404(store, event_id)


@router.patch("/{event_id}", response_model=Event)
async def update_event(
    event_id: str,
    payload: EventPatch,
    store: EntityStore = Depends(get_store),
    notifier: ChangeNotifier = Depends(get_notifier),
):
    """Merge the supplied fields over the stored event (partial update)."""
    update = EventUpdate(id=event_id, **payload.changes())
    return mutation_service.update_event(store, notifier, update)


@router.delete("/{event_id}", response_model=Event)
async def delete_event(
    event_id: str,
    store: EntityStore = Depends(get_store),
    notifier: ChangeNotifier = Depends(get_notifier),
):
    """Remove an event. Its participants are kept."""
    return mutation_service.delete_event(store, notifier, event_id)


@router.get("/{event_id}/location", response_model=Optional[Location])
async def get_event_location(event_id: str, store: EntityStore = Depends(get_store)):
    event = _get_event_or_404(store, event_id)
    return relationship_service.resolve_event_location(store, event)


@router.get("/{event_id}/user", response_model=Optional[User])
async def get_event_user(event_id: str, store: EntityStore = Depends(get_store)):
    """The organizer, or null when user_id is unset or dangling."""
    event = _get_event_or_404(store, event_id)
    return relationship_service.resolve_event_user(store, event)


@router.get("/{event_id}/participants", response_model=list[Participant])
async def get_event_participants(event_id: str, store: EntityStore = Depends(get_store)):
    event = _get_event_or_404(store, event_id)
    return relationship_service.resolve_event_participants(store, event)
