"""Exception hierarchy for ClawBrute."""


class ClawBruteError(Exception):
    """Base class for all ClawBrute errors."""


class ConfigurationError(ClawBruteError, ValueError):
    """Invalid run or probe configuration, raised before any work starts."""


class ProbeAttemptFailure(ClawBruteError):
    """A single credential attempt could not be completed.

    Probes raise this (or let a connection error escape ``attempt``) to mark
    one pair as "not a match" without stopping the worker.
    """


class ProbeFatalError(ClawBruteError):
    """A probe cannot continue at all; the whole run is cancelled."""


class ProbeNotFound(ClawBruteError, LookupError):
    """No probe is registered under the requested name."""
