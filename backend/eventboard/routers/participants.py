"""Participant API routes."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from eventboard.models import Event, Participant, User
from eventboard.schemas.participant import ParticipantCreate, ParticipantPatch, ParticipantUpdate
from eventboard.services import mutation_service, relationship_service
from eventboard.services.change_notifier import ChangeNotifier, get_notifier
from eventboard.store import EntityStore, get_store

logger = logging.getLogger(__name__)
router = APIRouter()


def _get_participant_or_404(store: EntityStore, participant_id: str) -> Participant:
    participant = store.participants.find_by_id(participant_id)
    if participant is None:
        raise HTTPException(status_code=404, detail="Participant not found")
    return participant


@router.post("/", response_model=Participant, status_code=status.HTTP_201_CREATED)
async def create_participant(
    payload: ParticipantCreate,
    store: EntityStore = Depends(get_store),
    notifier: ChangeNotifier = Depends(get_notifier),
):
    """Register a user's attendance at an event. Neither id is checked."""
    return mutation_service.create_participant(store, notifier, payload)


@router.get("/", response_model=list[Participant])
async def list_participants(store: EntityStore = Depends(get_store)):
    return store.participants.list()


@router.delete("/")
async def delete_all_participants(store: EntityStore = Depends(get_store)):
    return {"deleted": mutation_service.delete_all_participants(store)}


@router.get("/{participant_id}", response_model=Participant)
async def get_participant(participant_id: str, store: EntityStore = Depends(get_store)):
    return _get_participant_or_404(store, participant_id)


@router.patch("/{participant_id}", response_model=Participant)
async def update_participant(
    participant_id: str,
    payload: ParticipantPatch,
    store: EntityStore = Depends(get_store),
    notifier: ChangeNotifier = Depends(get_notifier),
):
    update = ParticipantUpdate(id=participant_id, **payload.changes())
    return mutation_service.update_participant(store, notifier, update)


@router.delete("/{participant_id}", response_model=Participant)
async def delete_participant(
    participant_id: str,
    store: EntityStore = Depends(get_store),
    notifier: ChangeNotifier = Depends(get_notifier),
):
    return mutation_service.delete_participant(store, notifier, participant_id)


@router.get("/{participant_id}/event", response_model=Optional[Event])
async def get_participant_event(participant_id: str, store: EntityStore = Depends(get_store)):
    """The attended event, or null when event_id is dangling."""
    participant = _get_participant_or_404(store, participant_id)
    return relationship_service.resolve_participant_event(store, participant)


@router.get("/{participant_id}/user", response_model=Optional[User])
async def get_participant_user(participant_id: str, store: EntityStore = Depends(get_store)):
    participant = _get_participant_or_404(store, participant_id)
    return relationship_service.resolve_participant_user(store, participant)
