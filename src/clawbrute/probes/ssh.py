"""SSH password authentication probe."""

from __future__ import annotations

import asyncio
import logging

import paramiko

from clawbrute.engine.probe import AttemptProbe

from .base import LoginProbe
from .registry import register

logger = logging.getLogger(__name__)


@register
class SSHProbe(LoginProbe):
    """Password-only SSH login; host keys are accepted without verification."""

    name = "ssh"
    summary = "SSH password authentication"
    default_port = 22
    login_timeout = 4.0
    attempt_errors = AttemptProbe.attempt_errors + (paramiko.SSHException,)

    async def attempt(self, username: str, password: str) -> bool:
        return await asyncio.to_thread(self._login, username, password)

    def _login(self, username: str, password: str) -> bool:
        client = paramiko.SSHClient()
        client.set_missing_host_key_policy(paramiko.AutoAddPolicy())
        try:
            client.connect(
                self.host,
                port=self.port,
                username=username,
                password=password,
                timeout=self.config.timeout,
                banner_timeout=self.config.timeout,
                auth_timeout=self.effective_login_timeout,
                allow_agent=False,
                look_for_keys=False,
            )
        except paramiko.AuthenticationException:
            logger.debug("SSH login rejected for %s on %s", username, self.target)
            return False
        finally:
            client.close()
        return True
