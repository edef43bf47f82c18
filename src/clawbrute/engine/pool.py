"""Fixed-size pool of workers driving probes over the channel."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Callable

from clawbrute.errors import ProbeFatalError

from .channel import BoundedChannel, Item
from .collector import ResultCollector
from .models import STOP, Credentials
from .probe import Probe

logger = logging.getLogger(__name__)

ProbeFactory = Callable[[], Probe]


class WorkerInbox:
    """One worker's view of the channel; remembers whether it saw ``STOP``."""

    def __init__(self, channel: BoundedChannel, index: int):
        self.index = index
        self.stopped = False
        self.taken = 0
        self._channel = channel

    async def take(self) -> Item:
        if self.stopped:
            return STOP
        item = await self._channel.take()
        if item is STOP:
            self.stopped = True
        else:
            self.taken += 1
        return item

    async def __aiter__(self) -> AsyncIterator[Credentials]:
        while True:
            item = await self.take()
            if item is STOP:
                return
            yield item


class WorkerPool:
    """Spawns ``size`` workers, each building and driving its own probe."""

    def __init__(
        self,
        probe_factory: ProbeFactory,
        channel: BoundedChannel,
        collector: ResultCollector,
        size: int,
    ):
        self.probe_factory = probe_factory
        self.channel = channel
        self.collector = collector
        self.size = size
        self.tasks: list[asyncio.Task[None]] = []
        self.inboxes: list[WorkerInbox] = []

    @property
    def attempted(self) -> int:
        """Credentials handed to probes so far."""
        return sum(inbox.taken for inbox in self.inboxes)

    def start(self) -> list[asyncio.Task[None]]:
        self.inboxes = [WorkerInbox(self.channel, index) for index in range(self.size)]
        self.tasks = [
            asyncio.create_task(self._work(inbox), name=f"clawbrute-worker-{inbox.index}")
            for inbox in self.inboxes
        ]
        return self.tasks

    async def wait(self) -> None:
        """Block until every worker has exited."""
        await asyncio.gather(*self.tasks)

    async def _work(self, inbox: WorkerInbox) -> None:
        try:
            probe = self.probe_factory()
            await probe.bruteforce(inbox, self.collector.record_hit)
        except Exception as exc:
            logger.error("Worker %d failed: %s", inbox.index, exc)
            self.collector.fail(exc)
            return

        if not inbox.stopped and not self.channel.cancelled:
            # Probes must consume their inbox until STOP.
            self.collector.fail(
                ProbeFatalError(
                    f"{type(probe).__name__} returned before the credentials were exhausted"
                )
            )
        logger.debug("Worker %d exited after %d credentials", inbox.index, inbox.taken)
