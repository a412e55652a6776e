"""Location API routes."""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from eventboard.models import Location
from eventboard.schemas.location import LocationCreate, LocationPatch, LocationUpdate
from eventboard.services import mutation_service
from eventboard.services.change_notifier import ChangeNotifier, get_notifier
from eventboard.store import EntityStore, get_store

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=Location, status_code=status.HTTP_201_CREATED)
async def create_location(
    payload: LocationCreate,
    store: EntityStore = Depends(get_store),
    notifier: ChangeNotifier = Depends(get_notifier),
):
    return mutation_service.create_location(store, notifier, payload)


@router.get("/", response_model=list[Location])
async def list_locations(store: EntityStore = Depends(get_store)):
    return store.locations.list()


@router.delete("/")
async def delete_all_locations(store: EntityStore = Depends(get_store)):
    return {"deleted": mutation_service.delete_all_locations(store)}


@router.get("/{location_id}", response_model=Location)
async def get_location(location_id: str, store: EntityStore = Depends(get_store)):
    location = store.locations.find_by_id(location_id)
    if location is None:
        raise HTTPException(status_code=404, detail="Location not found")
    return location


@router.patch("/{location_id}", response_model=Location)
async def update_location(
    location_id: str,
    payload: LocationPatch,
    store: EntityStore = Depends(get_store),
    notifier: ChangeNotifier = Depends(get_notifier),
):
    """Partial update; lat/lng may be cleared with an explicit null."""
    update = LocationUpdate(id=location_id, **payload.changes())
    return mutation_service.update_location(store, notifier, update)


@router.delete("/{location_id}", response_model=Location)
async def delete_location(
    location_id: str,
    store: EntityStore = Depends(get_store),
    notifier: ChangeNotifier = Depends(get_notifier),
):
    """Remove a location. Events that reference it keep their location_id."""
    return mutation_service.delete_location(store, notifier, location_id)
