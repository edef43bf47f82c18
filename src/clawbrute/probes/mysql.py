"""MySQL login probe."""

from __future__ import annotations

import asyncio

import pymysql
from pymysql.constants import ER

from clawbrute.engine.probe import AttemptProbe

from .base import LoginProbe
from .config import MySQLProbeConfig
from .helpers import insecure_ssl_context
from .registry import register


@register
class MySQLProbe(LoginProbe):
    """Connects to ``database``; "access denied" is a miss.

    Other server errors, such as an unknown database, fail the attempt.
    """

    name = "mysql"
    summary = "MySQL login to a database"
    default_port = 3306
    login_timeout = 4.0
    config_class = MySQLProbeConfig
    config: MySQLProbeConfig
    attempt_errors = AttemptProbe.attempt_errors + (pymysql.err.MySQLError,)

    async def attempt(self, username: str, password: str) -> bool:
        return await asyncio.to_thread(self._login, username, password)

    def _login(self, username: str, password: str) -> bool:
        try:
            connection = pymysql.connect(
                host=self.host,
                port=self.port,
                user=username,
                password=password,
                database=self.config.database,
                connect_timeout=self.effective_login_timeout or self.config.timeout,
                read_timeout=self.config.timeout,
                ssl=insecure_ssl_context() if self.config.ssl else None,
            )
        except pymysql.err.OperationalError as exc:
            if exc.args and exc.args[0] == ER.ACCESS_DENIED_ERROR:
                return False
            raise
        connection.close()
        return True
