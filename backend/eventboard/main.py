"""FastAPI application entry point."""
import logging

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from eventboard.config import settings
from eventboard.errors import DuplicateRecordError, RecordNotFound
from eventboard.routers import events, locations, participants, subscriptions, users
from eventboard.seed import load_seed_file
from eventboard.services.change_notifier import close_notifier, open_notifier
from eventboard.store import EntityStore, close_store, get_store, open_store

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Event Board",
    description="Events, locations, users and participants held in memory, with live change subscriptions",
    version="0.1.0",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(users.router, prefix="/api/users", tags=["Users"])
app.include_router(events.router, prefix="/api/events", tags=["Events"])
app.include_router(locations.router, prefix="/api/locations", tags=["Locations"])
app.include_router(participants.router, prefix="/api/participants", tags=["Participants"])
app.include_router(subscriptions.router, prefix="/api/subscriptions", tags=["Subscriptions"])


@app.exception_handler(RecordNotFound)
async def record_not_found_handler(request: Request, exc: RecordNotFound):
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": f"{exc.entity.capitalize()} not found", "id": exc.record_id},
    )


@app.exception_handler(DuplicateRecordError)
async def duplicate_record_handler(request: Request, exc: DuplicateRecordError):
    logger.error("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})


@app.on_event("startup")
def on_startup():
    """Open the store and notifier, then load seed records if configured."""
    store = open_store()
    open_notifier()
    if settings.SEED_DATA_PATH:
        load_seed_file(store, settings.SEED_DATA_PATH)


@app.on_event("shutdown")
def on_shutdown():
    """Close live subscriptions before dropping the records."""
    close_notifier()
    close_store()


@app.get("/api/health")
async def health_check(store: EntityStore = Depends(get_store)):
    return {"status": "ok", "records": store.counts()}
