"""Configuration dataclasses for the built-in probes."""

from __future__ import annotations

import types
from collections.abc import Mapping
from dataclasses import MISSING, dataclass, field, fields
from typing import Any, Self, Union, get_args, get_origin, get_type_hints

from clawbrute.config import DEFAULT_TIMEOUT
from clawbrute.errors import ConfigurationError

HTTP_METHODS = (
    "COPY",
    "DELETE",
    "GET",
    "HEAD",
    "LOCK",
    "MKCOL",
    "MOVE",
    "OPTIONS",
    "PATCH",
    "POST",
    "PROPFIND",
    "PROPPATCH",
    "PUT",
    "TRACE",
    "UNLOCK",
)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _coerce(name: str, value: Any, hint: Any) -> Any:
    if not isinstance(value, str):
        return value

    allowed = get_args(hint) if get_origin(hint) in (Union, types.UnionType) else (hint,)
    if type(None) in allowed and value.strip().lower() in ("", "none"):
        return None
    target = next(arg for arg in allowed if arg is not type(None))

    if target is bool:
        text = value.strip().lower()
        if text in _TRUE_VALUES:
            return True
        if text in _FALSE_VALUES:
            return False
        raise ConfigurationError(f"param {name!r} must be true or false, got {value!r}")
    if target in (int, float):
        try:
            return target(value)
        except ValueError:
            raise ConfigurationError(
                f"param {name!r} must be {target.__name__}, got {value!r}"
            ) from None
    return value


@dataclass
class TCPProbeConfig:
    """Target settings shared by every network probe."""

    host: str
    port: int | None = None
    ssl: bool = False
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not isinstance(self.host, str) or not self.host.strip():
            raise ConfigurationError("param 'host' is required")
        if self.port is not None and not 0 < self.port < 65536:
            raise ConfigurationError(f"param 'port' must be between 1 and 65535, got {self.port}")
        if self.timeout <= 0:
            raise ConfigurationError(f"param 'timeout' must be > 0, got {self.timeout}")

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> Self:
        """Build a config from ``key=value`` style params, converting string values."""
        hints = get_type_hints(cls)
        known = {f.name: f for f in fields(cls)}

        unknown = sorted(set(params) - set(known))
        if unknown:
            raise ConfigurationError(
                f"unknown param(s) {', '.join(unknown)}; expected one of: {', '.join(known)}"
            )
        missing = [
            name
            for name, f in known.items()
            if f.default is MISSING and f.default_factory is MISSING and name not in params
        ]
        if missing:
            raise ConfigurationError(f"missing required param(s): {', '.join(missing)}")

        values = {name: _coerce(name, value, hints[name]) for name, value in params.items()}
        return cls(**values)


@dataclass
class LoginProbeConfig(TCPProbeConfig):
    """Adds ``login_timeout``, the wait for a reply to the credentials themselves."""

    login_timeout: float | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.login_timeout is not None and self.login_timeout <= 0:
            raise ConfigurationError(
                f"param 'login_timeout' must be > 0, got {self.login_timeout}"
            )


@dataclass
class MailProbeConfig(LoginProbeConfig):
    """Mail server settings; ``domain`` is appended to bare usernames."""

    domain: str | None = None


@dataclass
class MySQLProbeConfig(LoginProbeConfig):
    database: str = field(kw_only=True)

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.database, str) or not self.database.strip():
            raise ConfigurationError("param 'database' is required")


@dataclass
class PostgresProbeConfig(LoginProbeConfig):
    """``database`` defaults to the server's choice, usually the username."""

    database: str | None = None


@dataclass
class HTTPProbeConfig(TCPProbeConfig):
    path: str = "/"
    method: str = "HEAD"
    user_agent: str | None = None
    proxy: str | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        self.method = self.method.upper()
        if self.method not in HTTP_METHODS:
            raise ConfigurationError(
                f"param 'method' must be one of {', '.join(HTTP_METHODS)}, got {self.method!r}"
            )
        if not self.path.startswith("/"):
            raise ConfigurationError(f"param 'path' must start with '/', got {self.path!r}")


@dataclass
class HTTPLoginConfig(HTTPProbeConfig):
    """Login form settings.

    A response counts as a successful login when its status differs from
    ``failure_status``, when its body lacks ``failure_string``, or when it
    redirects anywhere but ``failure_redirect``.
    """

    method: str = "POST"
    username_param: str = "username"
    password_param: str = "password"
    failure_status: int | None = None
    failure_redirect: str | None = None
    failure_string: str | None = None
    success_heuristics: bool = False

    def __post_init__(self) -> None:
        super().__post_init__()
        if not self.username_param or not self.password_param:
            raise ConfigurationError("params 'username_param' and 'password_param' must be set")
        if self.failure_status is not None and not 100 <= self.failure_status <= 599:
            raise ConfigurationError(
                f"param 'failure_status' must be an HTTP status code, got {self.failure_status}"
            )
