"""Lazy username x password credential generation."""

from __future__ import annotations

import logging
from collections.abc import Container, Iterable, Iterator

from .channel import BoundedChannel
from .models import Credentials

logger = logging.getLogger(__name__)


class _Replay:
    """Caches a one-shot iterator so it can be walked once per username."""

    def __init__(self, iterator: Iterator[str]):
        self._iterator = iterator
        self._seen: list[str] = []

    def __iter__(self) -> Iterator[str]:
        yield from self._seen
        for item in self._iterator:
            self._seen.append(item)
            yield item


def _replayable(values: Iterable[str]) -> Iterable[str]:
    iterator = iter(values)
    if iterator is values:
        return _Replay(iterator)
    # Collections and Wordlist objects can simply be iterated again.
    return values


class CredentialStream:
    """Produces every (username, password) pair in username-major order.

    When ``cracked`` is given, the stream checks it before emitting each pair
    and moves on to the next username as soon as the current one shows up.
    The check is a plain read: pairs already queued or in flight for a
    username that gets cracked are not withdrawn.
    """

    def __init__(
        self,
        usernames: Iterable[str],
        passwords: Iterable[str],
        cracked: Container[str] | None = None,
    ):
        self.usernames = usernames
        self.passwords = passwords
        self.cracked = cracked

    def __iter__(self) -> Iterator[Credentials]:
        passwords = _replayable(self.passwords)
        for username in self.usernames:
            for password in passwords:
                if self.cracked is not None and username in self.cracked:
                    break
                yield Credentials(username, password)

    async def produce(self, channel: BoundedChannel, workers: int) -> int:
        """Feed ``channel`` until exhausted or cancelled, then send ``workers`` sentinels.

        Returns the number of credentials enqueued.
        """
        produced = 0
        try:
            for credentials in self:
                if not await channel.put(credentials):
                    logger.debug("Producer stopped after %d credentials (cancelled)", produced)
                    break
                produced += 1
        except Exception:
            # Every worker still needs its sentinel.
            channel.cancel()
            await channel.close(workers)
            raise

        await channel.close(workers)
        logger.debug("Producer finished: %d credentials queued", produced)
        return produced
