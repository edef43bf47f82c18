"""Bounded credential channel between the producer and the workers."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Awaitable
from typing import Protocol, TypeVar

from clawbrute.errors import ConfigurationError

from .models import STOP, Credentials, TerminationSentinel

logger = logging.getLogger(__name__)

T = TypeVar("T")

Item = Credentials | TerminationSentinel


class CredentialSource(Protocol):
    """Pull-based view of the channel handed to probes."""

    async def take(self) -> Item: ...

    def __aiter__(self) -> AsyncIterator[Credentials]: ...


class BoundedChannel:
    """Fixed-capacity FIFO of credentials and termination sentinels.

    The channel also carries the run's cancellation broadcast. Once
    :meth:`cancel` is called, :meth:`put` stops enqueueing and :meth:`take`
    hands out ``STOP`` immediately, which wakes any task blocked on either side.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ConfigurationError(f"channel capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._queue: asyncio.Queue[Item] = asyncio.Queue(maxsize=capacity)
        self._cancelled = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        """Broadcast cancellation to the producer and every worker. Idempotent."""
        if not self._cancelled.is_set():
            logger.debug("Credential channel cancelled")
            self._cancelled.set()

    def qsize(self) -> int:
        return self._queue.qsize()

    async def put(self, item: Item) -> bool:
        """Enqueue ``item``, waiting while the channel is full.

        Returns False when the channel was cancelled before the item went in.
        """
        if self.cancelled:
            return False
        if not self._queue.full():
            self._queue.put_nowait(item)
            return True
        done, _ = await self._until_cancelled(self._queue.put(item))
        return done

    async def take(self) -> Item:
        """Dequeue the next item, or ``STOP`` once the channel is cancelled."""
        if self.cancelled:
            return STOP
        if not self._queue.empty():
            return self._queue.get_nowait()
        done, item = await self._until_cancelled(self._queue.get())
        if not done or self.cancelled:
            return STOP
        return item

    async def close(self, workers: int) -> None:
        """Deliver one ``STOP`` per worker.

        After cancellation the pending credentials are discarded, so the
        sentinels always fit even though no worker will take again.
        """
        sent = 0
        while sent < workers:
            if not await self.put(STOP):
                break
            sent += 1

        if self.cancelled:
            discarded = self._discard_credentials()
            if discarded:
                logger.debug("Discarded %d queued credentials after cancellation", discarded)
            while sent < workers:
                self._queue.put_nowait(STOP)
                sent += 1

    def _discard_credentials(self) -> int:
        discarded = 0
        kept = 0
        while not self._queue.empty():
            if self._queue.get_nowait() is STOP:
                kept += 1
            else:
                discarded += 1
        for _ in range(kept):
            self._queue.put_nowait(STOP)
        return discarded

    async def _until_cancelled(self, operation: Awaitable[T]) -> tuple[bool, T | None]:
        op_task = asyncio.ensure_future(operation)
        stop_task = asyncio.ensure_future(self._cancelled.wait())
        try:
            await asyncio.wait({op_task, stop_task}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            stop_task.cancel()
            if not op_task.done():
                # asyncio.Queue only mutates after the wait returns, so a
                # cancelled get/put neither loses nor duplicates an item.
                op_task.cancel()
        if op_task.done() and not op_task.cancelled():
            return True, op_task.result()
        return False, None
