"""Change notifier — in-process publish/subscribe over a fixed set of topics.

Invariants:
    - Exactly one topic per (entity type, operation) pair; twelve in total
    - A subscription only sees records published after it was created
    - publish() never blocks; with no listeners the record is dropped
    - Each subscription buffers at most `queue_size` records; when full the
      oldest pending record is discarded (drop-oldest)
    - Closed or garbage-collected subscriptions leave the channel registry
"""
import asyncio
import enum
import logging
import weakref
from typing import Optional

from eventboard.config import settings
from eventboard.models.base import EntityType, Record

logger = logging.getLogger(__name__)


class Operation(str, enum.Enum):
    created = "Created"
    updated = "Updated"
    deleted = "Deleted"


class Topic(str, enum.Enum):
    user_created = "userCreated"
    user_updated = "userUpdated"
    user_deleted = "userDeleted"
    event_created = "eventCreated"
    event_updated = "eventUpdated"
    event_deleted = "eventDeleted"
    participant_created = "participantCreated"
    participant_updated = "participantUpdated"
    participant_deleted = "participantDeleted"
    location_created = "locationCreated"
    location_updated = "locationUpdated"
    location_deleted = "locationDeleted"

    @classmethod
    def for_(cls, entity: EntityType, operation: Operation) -> "Topic":
        return cls(f"{entity.value}{operation.value}")

    @property
    def operation(self) -> Operation:
        for operation in Operation:
            if self.value.endswith(operation.value):
                return operation
        raise ValueError(self.value)

    @property
    def entity(self) -> EntityType:
        return EntityType(self.value[: -len(self.operation.value)])


_CLOSED = object()


class Subscription:
    """Infinite, non-restartable async stream of records for one topic.

    Use as `async for record in subscription` and call `close()` (or use
    `async with`) once the consumer goes away.
    """

    def __init__(self, channel: "Channel", queue_size: int):
        self.topic = channel.topic
        self._channel = channel
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=max(queue_size, 1))
        self._closed = False
        self.dropped = 0

    @property
    def closed(self) -> bool:
        return self._closed

    def deliver(self, record: Record) -> bool:
        if self._closed:
            return False
        if self._queue.full():
            self._queue.get_nowait()
            self.dropped += 1
            logger.warning(
                "Subscription backlog full on %s, dropped oldest record (%d dropped so far)",
                self.topic.value, self.dropped,
            )
        self._queue.put_nowait(record)
        return True

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._channel.discard(self)
        while not self._queue.empty():
            self._queue.get_nowait()
        # wakes a consumer blocked in __anext__
        self._queue.put_nowait(_CLOSED)
        logger.debug("Unsubscribed from %s", self.topic.value)

    def __aiter__(self) -> "Subscription":
        return self

    async def __anext__(self) -> Record:
        if self._closed and self._queue.empty():
            raise StopAsyncIteration
        item = await self._queue.get()
        if item is _CLOSED:
            raise StopAsyncIteration
        return item

    async def __aenter__(self) -> "Subscription":
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.close()


class Channel:
    """Listener registry for a single topic."""

    def __init__(self, topic: Topic):
        self.topic = topic
        self._listeners: "weakref.WeakSet[Subscription]" = weakref.WeakSet()

    def __len__(self) -> int:
        return len(self._listeners)

    def add(self, subscription: Subscription) -> None:
        self._listeners.add(subscription)

    def discard(self, subscription: Subscription) -> None:
        self._listeners.discard(subscription)

    def broadcast(self, record: Record) -> int:
        delivered = 0
        for subscription in list(self._listeners):
            if subscription.deliver(record):
                delivered += 1
        return delivered

    def close_all(self) -> None:
        for subscription in list(self._listeners):
            subscription.close()


class ChangeNotifier:
    """Fan-out of mutation results to live subscriptions, one channel per topic."""

    def __init__(self, queue_size: Optional[int] = None):
        self.queue_size = queue_size if queue_size is not None else settings.SUBSCRIPTION_QUEUE_SIZE
        self._channels = {topic: Channel(topic) for topic in Topic}

    def subscribe(self, topic: Topic) -> Subscription:
        channel = self._channels[Topic(topic)]
        subscription = Subscription(channel, self.queue_size)
        channel.add(subscription)
        logger.debug("Subscribed to %s (%d listeners)", channel.topic.value, len(channel))
        return subscription

    def publish(self, topic: Topic, record: Record) -> int:
        """Deliver `record` to every live listener of `topic`; returns how many got it."""
        return self._channels[Topic(topic)].broadcast(record)

    def listener_count(self, topic: Topic) -> int:
        return len(self._channels[Topic(topic)])

    def close(self) -> None:
        for channel in self._channels.values():
            channel.close_all()


_notifier: Optional[ChangeNotifier] = None


def open_notifier() -> ChangeNotifier:
    global _notifier
    if _notifier is None:
        _notifier = ChangeNotifier()
        logger.info("Change notifier opened")
    return _notifier


def close_notifier() -> None:
    global _notifier
    if _notifier is not None:
        _notifier.close()
        _notifier = None
        logger.info("Change notifier closed")


def get_notifier() -> ChangeNotifier:
    """FastAPI dependency — the open notifier."""
    if _notifier is None:
        raise RuntimeError("Change notifier is not open")
    return _notifier
