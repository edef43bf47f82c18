"""Base class for probes that talk to a host and port."""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import ClassVar

from clawbrute.engine.probe import AttemptProbe
from clawbrute.errors import ConfigurationError

from .config import LoginProbeConfig, TCPProbeConfig
from .helpers import LineConnection, connect_lines


class NetworkProbe(AttemptProbe):
    """Attempt-per-pair probe against ``config.host`` and the resolved port."""

    default_port: ClassVar[int] = 0
    ssl_port: ClassVar[int | None] = None
    config_class: ClassVar[type[TCPProbeConfig]] = TCPProbeConfig

    config: TCPProbeConfig

    def __init__(self, config: TCPProbeConfig):
        if not isinstance(config, self.config_class):
            raise ConfigurationError(
                f"{type(self).__name__} expects {self.config_class.__name__}, "
                f"got {type(config).__name__}"
            )
        super().__init__(config)

    @property
    def host(self) -> str:
        return self.config.host

    @property
    def port(self) -> int:
        if self.config.port is not None:
            return self.config.port
        if self.config.ssl and self.ssl_port is not None:
            return self.ssl_port
        return self.default_port

    @property
    def target(self) -> str:
        return f"{self.host}:{self.port}"

    def connect(self) -> AbstractAsyncContextManager[LineConnection]:
        return connect_lines(
            self.host,
            self.port,
            use_ssl=self.config.ssl,
            timeout=self.config.timeout,
        )


class LoginProbe(NetworkProbe):
    """Network probe whose login reply may be slow; see ``effective_login_timeout``."""

    config_class: ClassVar[type[LoginProbeConfig]] = LoginProbeConfig
    config: LoginProbeConfig
    login_timeout: ClassVar[float | None] = None

    @property
    def effective_login_timeout(self) -> float | None:
        if self.config.login_timeout is not None:
            return self.config.login_timeout
        return self.login_timeout
