"""Concurrent credential bruteforcing engine."""

from .channel import BoundedChannel, CredentialSource
from .collector import ResultCollector
from .coordinator import (
    Coordinator,
    CoordinatorState,
    find_all,
    find_all_async,
    find_first,
    find_first_async,
    validate_concurrency,
)
from .models import (
    DEFAULT_CONCURRENCY,
    STOP,
    Credentials,
    DiscoveryMode,
    HitCallback,
    TerminationSentinel,
)
from .pool import ProbeFactory, WorkerInbox, WorkerPool
from .probe import AttemptProbe, Probe
from .stream import CredentialStream

__all__ = [
    "AttemptProbe",
    "BoundedChannel",
    "Coordinator",
    "CoordinatorState",
    "CredentialSource",
    "CredentialStream",
    "Credentials",
    "DEFAULT_CONCURRENCY",
    "DiscoveryMode",
    "HitCallback",
    "Probe",
    "ProbeFactory",
    "ResultCollector",
    "STOP",
    "TerminationSentinel",
    "WorkerInbox",
    "WorkerPool",
    "find_all",
    "find_all_async",
    "find_first",
    "find_first_async",
    "validate_concurrency",
]
