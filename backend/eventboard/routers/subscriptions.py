"""Subscription routes — one Server-Sent Events stream per topic.

Each connection owns one Subscription. The stream yields a frame per record
published after the connection opened and unsubscribes when the client goes
away (Starlette cancels the generator, running its `finally`).
"""
import asyncio
import logging
from typing import AsyncIterator

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse

from eventboard.config import settings
from eventboard.models import Record
from eventboard.services.change_notifier import ChangeNotifier, Subscription, Topic, get_notifier

logger = logging.getLogger(__name__)
router = APIRouter()

_SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "X-Accel-Buffering": "no",
    "Connection": "keep-alive",
}


def format_sse(topic: Topic, record: Record) -> str:
    """One SSE frame: the topic as event name, the record as JSON data."""
    return f"event: {topic.value}\ndata: {record.model_dump_json(by_alias=True)}\n\n"


async def event_stream(subscription: Subscription, keepalive_seconds: float) -> AsyncIterator[str]:
    try:
        while True:
            try:
                record = await asyncio.wait_for(subscription.__anext__(), timeout=keepalive_seconds)
            except asyncio.TimeoutError:
                yield ": keepalive\n\n"
                continue
            except StopAsyncIteration:
                break
            yield format_sse(subscription.topic, record)
    finally:
        subscription.close()


@router.get("/")
async def list_topics(notifier: ChangeNotifier = Depends(get_notifier)):
    """Every topic with its current number of live listeners."""
    return {topic.value: notifier.listener_count(topic) for topic in Topic}


@router.get("/{topic}")
async def subscribe(topic: str, notifier: ChangeNotifier = Depends(get_notifier)):
    """Stream records published to `topic` (e.g. eventCreated) from now on."""
    try:
        resolved = Topic(topic)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown topic: {topic}")

    subscription = notifier.subscribe(resolved)
    logger.info("SSE client subscribed to %s", resolved.value)
    return StreamingResponse(
        event_stream(subscription, settings.SSE_KEEPALIVE_SECONDS),
        media_type="text/event-stream",
        headers=_SSE_HEADERS,
    )
