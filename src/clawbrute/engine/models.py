"""Value types shared by the bruteforcing engine."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import NamedTuple

DEFAULT_CONCURRENCY = 100


class Credentials(NamedTuple):
    """A username and password candidate."""

    username: str
    password: str

    def __str__(self) -> str:
        return f"{self.username}:{self.password}"


class DiscoveryMode(str, Enum):
    """How a run reacts to valid credentials."""

    FIRST = "first"
    ALL = "all"


class TerminationSentinel(Enum):
    """Marker telling exactly one worker that no more credentials will come."""

    STOP = "stop"

    def __repr__(self) -> str:
        return "STOP"


STOP = TerminationSentinel.STOP

# Called by probes with (username, password) for every pair that logged in.
HitCallback = Callable[[str, str], None]
