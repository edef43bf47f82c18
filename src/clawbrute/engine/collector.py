"""Concurrency-safe sink for discovered credentials."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from clawbrute.errors import ProbeFatalError

from .channel import BoundedChannel
from .models import Credentials, DiscoveryMode

logger = logging.getLogger(__name__)


class ResultCollector:
    """Records hits reported by probes and triggers cancellation.

    In ``FIRST`` mode the collector is a first-write-wins slot whose first
    write cancels the channel. In ``ALL`` mode it appends one hit per username
    and marks the username cracked; both happen under the same lock. The lock
    only guards these in-memory updates and is never held across an attempt
    or while the ``on_hit`` callback runs.

    An exception raised by ``on_hit`` is kept in ``callback_error`` and cancels
    the run; the probe that reported the hit never sees it.
    """

    def __init__(
        self,
        mode: DiscoveryMode,
        channel: BoundedChannel,
        on_hit: Callable[[Credentials], None] | None = None,
    ):
        self.mode = mode
        self.cracked_usernames: set[str] = set()
        self.error: ProbeFatalError | None = None
        self.callback_error: Exception | None = None
        self._channel = channel
        self._on_hit = on_hit
        self._hits: list[Credentials] = []
        self._lock = threading.Lock()

    @property
    def hits(self) -> list[Credentials]:
        with self._lock:
            return list(self._hits)

    @property
    def first(self) -> Credentials | None:
        with self._lock:
            return self._hits[0] if self._hits else None

    @property
    def failed(self) -> bool:
        return self.error is not None or self.callback_error is not None

    def record_hit(self, username: str, password: str) -> None:
        """Accept a hit from any worker; duplicates for a cracked username are dropped."""
        credentials = Credentials(username, password)
        with self._lock:
            if self.mode is DiscoveryMode.FIRST and self._hits:
                return
            if username in self.cracked_usernames:
                logger.debug("Ignoring extra hit for cracked username %r", username)
                return
            self._hits.append(credentials)
            self.cracked_usernames.add(username)

        logger.info("Found credentials %s", credentials)
        if self.mode is DiscoveryMode.FIRST:
            self._channel.cancel()
        if self._on_hit is not None:
            self._notify(credentials)

    def _notify(self, credentials: Credentials) -> None:
        try:
            self._on_hit(credentials)
        except Exception as exc:
            logger.error("on_hit callback failed for %s: %s", credentials, exc)
            with self._lock:
                if self.callback_error is None:
                    self.callback_error = exc
            self._channel.cancel()

    def fail(self, exc: BaseException) -> None:
        """Record the first fatal probe error and cancel the run."""
        with self._lock:
            if self.error is None:
                if isinstance(exc, ProbeFatalError):
                    self.error = exc
                else:
                    error = ProbeFatalError(f"probe failed: {type(exc).__name__}: {exc}")
                    error.__cause__ = exc
                    self.error = error
        self._channel.cancel()
