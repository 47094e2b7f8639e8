from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from hoststats.models.event import Event, EventType, StatsUpdate

logger = logging.getLogger(__name__)

Subscriber = Callable[[Event], Awaitable[None]]


class EventBus:
    """Delivers sampler notifications to subscribers from one consumer task.

    Every ``stats_updated`` payload carries the whole history, so a newer
    update supersedes any older one still queued. When the queue is full
    ``emit()`` drops the oldest pending update instead of blocking the
    sampler; ``dropped`` counts how often that happened.
    """

    def __init__(self, maxsize: int = 16) -> None:
        self._queue: asyncio.Queue[Event] = asyncio.Queue(maxsize=maxsize)
        self._subscribers: dict[EventType, list[Subscriber]] = {}
        self._consumer_task: asyncio.Task | None = None
        self.dropped = 0

    # ── lifecycle ────────────────────────────────────────

    async def start(self) -> None:
        if self._consumer_task is not None:
            return
        self._consumer_task = asyncio.create_task(self._consume_loop())
        logger.info("EventBus started")

    async def stop(self) -> None:
        """Deliver what is still queued, then stop the consumer."""
        if self._consumer_task is None:
            return
        await self._queue.join()
        self._consumer_task.cancel()
        try:
            await self._consumer_task
        except asyncio.CancelledError:
            pass
        self._consumer_task = None
        logger.info("EventBus stopped (%d updates dropped)", self.dropped)

    # ── publish / subscribe ─────────────────────────────

    async def emit(self, event_type: EventType, payload: StatsUpdate) -> Event:
        event = Event(event_type=event_type, payload=payload)
        if self._queue.full():
            stale = self._queue.get_nowait()
            self._queue.task_done()
            self.dropped += 1
            logger.debug("Queue full, dropping superseded event %s", stale.id)
        self._queue.put_nowait(event)
        return event

    def subscribe(
        self, callback: Subscriber, event_type: EventType = EventType.STATS_UPDATED
    ) -> None:
        self._subscribers.setdefault(event_type, []).append(callback)

    # ── internals ───────────────────────────────────────

    async def _consume_loop(self) -> None:
        while True:
            event = await self._queue.get()
            try:
                await self._dispatch(event)
            finally:
                self._queue.task_done()

    async def _dispatch(self, event: Event) -> None:
        for sub in self._subscribers.get(event.event_type, []):
            try:
                await sub(event)
            except Exception:
                logger.exception("Subscriber %s failed for event %s", sub, event.id)

    # ── introspection ───────────────────────────────────

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    @property
    def running(self) -> bool:
        return self._consumer_task is not None

    @property
    def subscriber_count(self) -> int:
        return sum(len(subs) for subs in self._subscribers.values())
