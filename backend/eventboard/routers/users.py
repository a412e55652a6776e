"""User API routes.

Handlers are `async def` so every store access runs on the event loop,
one request at a time between awaits.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from eventboard.models import Event, User
from eventboard.schemas.user import UserCreate, UserPatch, UserUpdate
from eventboard.services import mutation_service, relationship_service
from eventboard.services.change_notifier import ChangeNotifier, get_notifier
from eventboard.store import EntityStore, get_store

logger = logging.getLogger(__name__)
router = APIRouter()


def _get_user_or_404(store: EntityStore, user_id: str) -> User:
    user = store.users.find_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.post("/", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserCreate,
    store: EntityStore = Depends(get_store),
    notifier: ChangeNotifier = Depends(get_notifier),
):
    """Create a new user."""
    return mutation_service.create_user(store, notifier, payload)


@router.get("/", response_model=list[User])
async def list_users(store: EntityStore = Depends(get_store)):
    """List all users in insertion order."""
    return store.users.list()


@router.delete("/")
async def delete_all_users(store: EntityStore = Depends(get_store)):
    """Remove every user. No per-record notifications are sent."""
    return {"deleted": mutation_service.delete_all_users(store)}


@router.get("/{user_id}", response_model=User)
async def get_user(user_id: str, store: EntityStore = Depends(get_store)):
    """Fetch a single user by ID."""
    return _get_user_or_404(store, user_id)


@router.patch("/{user_id}", response_model=User)
async def update_user(
    user_id: str,
    payload: UserPatch,
    store: EntityStore = Depends(get_store),
    notifier: ChangeNotifier = Depends(get_notifier),
):
    """Merge the supplied fields over the stored user."""
    update = UserUpdate(id=user_id, **payload.changes())
    return mutation_service.update_user(store, notifier, update)


@router.delete("/{user_id}", response_model=User)
async def delete_user(
    user_id: str,
    store: EntityStore = Depends(get_store),
    notifier: ChangeNotifier = Depends(get_notifier),
):
    return mutation_service.delete_user(store, notifier, user_id)


@router.get("/{user_id}/events", response_model=list[Event])
async def get_user_events(user_id: str, store: EntityStore = Depends(get_store)):
    """Events organized by the user."""
    user = _get_user_or_404(store, user_id)
    return relationship_service.resolve_user_events(store, user)
