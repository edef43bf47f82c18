"""ClawBrute - concurrent credential bruteforcing engine."""

from clawbrute.engine import (
    DEFAULT_CONCURRENCY,
    AttemptProbe,
    Coordinator,
    Credentials,
    DiscoveryMode,
    Probe,
    find_all,
    find_all_async,
    find_first,
    find_first_async,
)
from clawbrute.errors import (
    ClawBruteError,
    ConfigurationError,
    ProbeAttemptFailure,
    ProbeFatalError,
    ProbeNotFound,
)
from clawbrute.wordlist import Wordlist

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONCURRENCY",
    "AttemptProbe",
    "ClawBruteError",
    "ConfigurationError",
    "Coordinator",
    "Credentials",
    "DiscoveryMode",
    "Probe",
    "ProbeAttemptFailure",
    "ProbeFatalError",
    "ProbeNotFound",
    "Wordlist",
    "find_all",
    "find_all_async",
    "find_first",
    "find_first_async",
]
