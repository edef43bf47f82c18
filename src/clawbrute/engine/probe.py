"""Probe contract implemented by every protocol-specific bruteforcer."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from clawbrute.errors import ProbeAttemptFailure, ProbeFatalError

from .channel import CredentialSource
from .models import HitCallback

logger = logging.getLogger(__name__)


class Probe(ABC):
    """Tests credentials pulled from a worker's source against one target.

    ``bruteforce`` must keep taking credentials until the source is exhausted,
    make exactly one login attempt per pair, call ``on_hit`` only for pairs it
    tested itself, and treat connection problems as "not a match".
    """

    name: ClassVar[str] = ""
    summary: ClassVar[str] = ""
    config_class: ClassVar[type[Any] | None] = None

    def __init__(self, config: Any = None):
        self.config = config

    @abstractmethod
    async def bruteforce(self, credentials: CredentialSource, on_hit: HitCallback) -> None:
        """Run the login loop for one worker."""


class AttemptProbe(Probe):
    """Probe that tests one pair per :meth:`attempt` call.

    Exceptions listed in ``attempt_errors`` count as a failed attempt and the
    loop moves on. :meth:`setup` runs when the first credential arrives, so a
    worker that only ever sees ``STOP`` does no I/O; anything it raises is
    fatal for the run. :meth:`teardown` runs only if setup was attempted.
    """

    attempt_errors: ClassVar[tuple[type[BaseException], ...]] = (
        ProbeAttemptFailure,
        OSError,
        EOFError,
        TimeoutError,
    )
    attempt_timeout: float | None = None

    async def setup(self) -> None:
        """Prepare per-worker state (sessions, clients) before the first attempt."""

    async def teardown(self) -> None:
        """Release per-worker state."""

    @abstractmethod
    async def attempt(self, username: str, password: str) -> bool:
        """Return True when ``username``/``password`` logged in."""

    async def bruteforce(self, credentials: CredentialSource, on_hit: HitCallback) -> None:
        started = False
        try:
            async for username, password in credentials:
                if not started:
                    started = True
                    try:
                        await self.setup()
                    except self.attempt_errors as exc:
                        label = self.name or type(self).__name__
                        raise ProbeFatalError(f"{label} setup failed: {exc}") from exc
                try:
                    if self.attempt_timeout is None:
                        matched = await self.attempt(username, password)
                    else:
                        matched = await asyncio.wait_for(
                            self.attempt(username, password), timeout=self.attempt_timeout
                        )
                except self.attempt_errors as exc:
                    logger.debug("Attempt %s:%s failed: %s", username, password, exc)
                    continue
                if matched:
                    on_hit(username, password)
        finally:
            if started:
                await self.teardown()
