"""Run coordination for the two discovery modes."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable, Iterable
from enum import Enum

from clawbrute.errors import ConfigurationError
from clawbrute.utils.async_utils import safe_async_run

from .channel import BoundedChannel
from .collector import ResultCollector
from .models import DEFAULT_CONCURRENCY, Credentials, DiscoveryMode
from .pool import ProbeFactory, WorkerPool
from .stream import CredentialStream

logger = logging.getLogger(__name__)

HitHandler = Callable[[Credentials], None]


class CoordinatorState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


def validate_concurrency(concurrency: object) -> int:
    """Return ``concurrency`` if it is a usable worker count."""
    if isinstance(concurrency, bool) or not isinstance(concurrency, int):
        raise ConfigurationError(f"concurrency must be an integer, got {concurrency!r}")
    if concurrency < 1:
        raise ConfigurationError(f"concurrency must be >= 1, got {concurrency}")
    return concurrency


def _validate_words(values: object, label: str) -> Iterable[str]:
    if values is None:
        raise ConfigurationError(f"{label} must be an iterable of strings, got None")
    if isinstance(values, (str, bytes)):
        raise ConfigurationError(f"{label} must be an iterable of strings, not a single string")
    if not isinstance(values, Iterable):
        raise ConfigurationError(f"{label} must be an iterable of strings")
    return values


class Coordinator:
    """Runs one bruteforce job: a producer, ``concurrency`` workers and a collector.

    The only barrier is the worker pool: the run ends once every worker has
    exited, either after taking its ``STOP`` sentinel or after observing
    cancellation. In ``FIRST`` mode the first hit cancels the channel; the
    result is still a success and ``stopped_early`` is set.
    """

    def __init__(
        self,
        usernames: Iterable[str],
        passwords: Iterable[str],
        probe_factory: ProbeFactory,
        concurrency: int = DEFAULT_CONCURRENCY,
        mode: DiscoveryMode = DiscoveryMode.FIRST,
        on_hit: HitHandler | None = None,
    ):
        if not callable(probe_factory):
            raise ConfigurationError("probe_factory must be callable")
        self.usernames = _validate_words(usernames, "usernames")
        self.passwords = _validate_words(passwords, "passwords")
        self.probe_factory = probe_factory
        self.concurrency = validate_concurrency(concurrency)
        self.mode = DiscoveryMode(mode)
        self.on_hit = on_hit
        self.state = CoordinatorState.IDLE
        self.stopped_early = False
        self.attempted = 0
        self.cracked_usernames: set[str] = set()

    async def run(self) -> Credentials | None | list[Credentials]:
        """Execute the run; returns a pair (or None) in FIRST mode, a list in ALL mode."""
        if self.state is not CoordinatorState.IDLE:
            raise RuntimeError("a Coordinator can only run once")

        channel = BoundedChannel(self.concurrency)
        collector = ResultCollector(self.mode, channel, on_hit=self.on_hit)
        self.cracked_usernames = collector.cracked_usernames
        stream = CredentialStream(
            self.usernames,
            self.passwords,
            cracked=collector.cracked_usernames if self.mode is DiscoveryMode.ALL else None,
        )
        pool = WorkerPool(self.probe_factory, channel, collector, self.concurrency)

        self.state = CoordinatorState.RUNNING
        started = time.perf_counter()
        logger.debug("Starting %s run with %d workers", self.mode.value, self.concurrency)

        producer = asyncio.create_task(
            stream.produce(channel, self.concurrency), name="clawbrute-producer"
        )
        workers = pool.start()
        try:
            await pool.wait()
            await producer
        finally:
            for task in (producer, *workers):
                if not task.done():
                    task.cancel()
            self.attempted = pool.attempted
            self.stopped_early = channel.cancelled
            # A find-first hit stops early but still completes; only a failed run is cancelled.
            self.state = (
                CoordinatorState.CANCELLED
                if collector.failed
                else CoordinatorState.COMPLETED
            )

        elapsed = time.perf_counter() - started
        logger.debug(
            "Run %s after %.2fs: %d attempted, %d hit(s)",
            self.state.value,
            elapsed,
            self.attempted,
            len(collector.hits),
        )

        if collector.error is not None:
            raise collector.error
        if collector.callback_error is not None:
            raise collector.callback_error
        if self.mode is DiscoveryMode.FIRST:
            return collector.first
        return collector.hits


async def find_first_async(
    usernames: Iterable[str],
    passwords: Iterable[str],
    probe_factory: ProbeFactory,
    concurrency: int = DEFAULT_CONCURRENCY,
) -> Credentials | None:
    """Return the first valid credentials found, or None."""
    coordinator = Coordinator(usernames, passwords, probe_factory, concurrency, DiscoveryMode.FIRST)
    return await coordinator.run()


async def find_all_async(
    usernames: Iterable[str],
    passwords: Iterable[str],
    probe_factory: ProbeFactory,
    concurrency: int = DEFAULT_CONCURRENCY,
    on_hit: HitHandler | None = None,
) -> list[Credentials]:
    """Return every valid credential pair, at most one per username."""
    coordinator = Coordinator(
        usernames, passwords, probe_factory, concurrency, DiscoveryMode.ALL, on_hit=on_hit
    )
    return await coordinator.run()


def find_first(
    usernames: Iterable[str],
    passwords: Iterable[str],
    probe_factory: ProbeFactory,
    concurrency: int = DEFAULT_CONCURRENCY,
) -> Credentials | None:
    """Blocking form of :func:`find_first_async`."""
    coordinator = Coordinator(usernames, passwords, probe_factory, concurrency, DiscoveryMode.FIRST)
    return safe_async_run(coordinator.run())


def find_all(
    usernames: Iterable[str],
    passwords: Iterable[str],
    probe_factory: ProbeFactory,
    concurrency: int = DEFAULT_CONCURRENCY,
    on_hit: HitHandler | None = None,
) -> list[Credentials]:
    """Blocking form of :func:`find_all_async`."""
    coordinator = Coordinator(
        usernames, passwords, probe_factory, concurrency, DiscoveryMode.ALL, on_hit=on_hit
    )
    return safe_async_run(coordinator.run())
